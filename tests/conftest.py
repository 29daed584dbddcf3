import pytest

from chachacore import Key

# RFC 7539 section 2.3.2
RFC_KEY_BYTES = bytes(range(32))
RFC_NONCE_BYTES = bytes.fromhex("000000090000004a00000000")
RFC_COUNTER = 1


@pytest.fixture
def rfc_key():
    return Key.from_bytes(RFC_KEY_BYTES)


@pytest.fixture
def rfc_nonce():
    return (0x09000000, 0x4a000000, 0x00000000)
