# state.py - ChaCha20 initial state: constants || key || counter || nonce
#
#   [ c0  c1  c2  c3 ]   = "expand 32-byte k" (SIGMA)
#   [ k0  k1  k2  k3 ]   = 256-bit key (first 4 words)
#   [ k4  k5  k6  k7 ]   = 256-bit key (last 4 words)
#   [ ctr n0  n1  n2 ]   = 32-bit block counter, 96-bit nonce (IETF)
from .errors import InvalidKeyLength, InvalidNonceLength
from .key import KEY_WORDS, Key
from .words import check_word, le_bytes_to_words

SIGMA = b"expand 32-byte k"  # 16 bytes
CONSTANTS = tuple(le_bytes_to_words(SIGMA))  # 0x61707865 0x3320646e 0x79622d32 0x6b206574

NONCE_SIZE = 12
NONCE_WORDS = NONCE_SIZE // 4
STATE_WORDS = 16


def nonce_from_bytes(nonce: bytes) -> tuple[int, ...]:
    """Decode a 12-byte IETF nonce into its three little-endian words."""
    raw = bytes(nonce)
    if len(raw) != NONCE_SIZE:
        raise InvalidNonceLength(len(raw), "bytes")
    return tuple(le_bytes_to_words(raw))


def _key_words(key) -> tuple[int, ...]:
    if isinstance(key, Key):
        return key.key()
    words = tuple(key)
    if len(words) != KEY_WORDS:
        raise InvalidKeyLength(len(words), "words")
    return tuple(check_word(w, "key word") for w in words)


def _nonce_words(nonce) -> tuple[int, ...]:
    if isinstance(nonce, (bytes, bytearray, memoryview)):
        return nonce_from_bytes(nonce)
    words = tuple(nonce)
    if len(words) != NONCE_WORDS:
        raise InvalidNonceLength(len(words))
    return tuple(check_word(w, "nonce word") for w in words)


def setup_state(key, nonce, counter: int) -> tuple[int, ...]:
    """
    Build the 16-word ChaCha20 input state.

    key     : Key, or a sequence of 8 words
    nonce   : sequence of 3 words (or the 12 raw nonce bytes)
    counter : 32-bit block counter; 0xffffffff is a valid value

    Everything is validated before the state is assembled.
    """
    k = _key_words(key)
    n = _nonce_words(nonce)
    ctr = check_word(counter, "counter")
    return CONSTANTS + k + (ctr,) + n


def format_state(words, label: str = "", hide_key: bool = False) -> str:
    """Render 16 words as the 4x4 matrix (one row per line)."""
    lines = [f"[{label}] 4x4 state (little-endian 32-bit words):"]
    for r in range(4):
        row = words[4 * r:4 * r + 4]
        if hide_key and r in (1, 2):
            lines.append("  " + " ".join("********" for _ in row))
        else:
            lines.append("  " + " ".join(f"{w:08x}" for w in row))
    return "\n".join(lines)
