import pytest

from chachacore import (
    CONSTANTS,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidWord,
    Key,
    format_state,
    nonce_from_bytes,
    setup_state,
)

from .conftest import RFC_NONCE_BYTES


def test_constants_spell_expand_32_byte_k():
    assert CONSTANTS == (0x61707865, 0x3320646e, 0x79622d32, 0x6b206574)


def test_setup_state_rfc_layout(rfc_key, rfc_nonce):
    state = setup_state(rfc_key, rfc_nonce, 1)
    assert state == (
        0x61707865, 0x3320646e, 0x79622d32, 0x6b206574,
        0x03020100, 0x07060504, 0x0b0a0908, 0x0f0e0d0c,
        0x13121110, 0x17161514, 0x1b1a1918, 0x1f1e1d1c,
        0x00000001, 0x09000000, 0x4a000000, 0x00000000,
    )
    assert isinstance(state, tuple)


def test_nonce_from_bytes(rfc_nonce):
    assert nonce_from_bytes(RFC_NONCE_BYTES) == rfc_nonce
    with pytest.raises(InvalidNonceLength):
        nonce_from_bytes(bytes(8))


def test_setup_state_accepts_nonce_bytes_and_key_words(rfc_key, rfc_nonce):
    expected = setup_state(rfc_key, rfc_nonce, 7)
    assert setup_state(rfc_key.key(), RFC_NONCE_BYTES, 7) == expected


@pytest.mark.parametrize("nonce", [(), (1, 2), (1, 2, 3, 4), bytes(11), bytes(16)])
def test_setup_state_rejects_bad_nonce(rfc_key, nonce):
    with pytest.raises(InvalidNonceLength):
        setup_state(rfc_key, nonce, 0)


def test_setup_state_rejects_bad_key_words(rfc_nonce):
    with pytest.raises(InvalidKeyLength):
        setup_state([0] * 7, rfc_nonce, 0)
    with pytest.raises(InvalidKeyLength):
        setup_state([0] * 9, rfc_nonce, 0)


@pytest.mark.parametrize("counter", [-1, 1 << 32, 1.0, "1", True])
def test_setup_state_rejects_bad_counter(rfc_key, rfc_nonce, counter):
    with pytest.raises(InvalidWord):
        setup_state(rfc_key, rfc_nonce, counter)


def test_setup_state_rejects_bad_nonce_word(rfc_key):
    with pytest.raises(InvalidWord):
        setup_state(rfc_key, (0, 0, 1 << 32), 0)


def test_max_counter_is_plain_word(rfc_key, rfc_nonce):
    assert setup_state(rfc_key, rfc_nonce, 0xffffffff)[12] == 0xffffffff


def test_format_state_masks_key_rows(rfc_key, rfc_nonce):
    state = setup_state(rfc_key, rfc_nonce, 1)
    text = format_state(state, "initial", hide_key=True)
    assert "61707865" in text
    assert "09000000" in text
    assert "03020100" not in text
    assert "1f1e1d1c" not in text
    assert len(text.splitlines()) == 5
    assert "03020100" in format_state(state, "initial")


def test_different_keys_give_different_states(rfc_nonce):
    a = setup_state(Key.from_bytes(bytes(32)), rfc_nonce, 0)
    b = setup_state(Key.from_bytes(bytes(31) + b"\x01"), rfc_nonce, 0)
    assert a[:11] == b[:11]
    assert a[11] != b[11]
