# words.py - 32-bit word helpers and little-endian packing
import struct

from .errors import InvalidWord

WORD_MASK = 0xFFFFFFFF

def check_word(value, what: str = "word") -> int:
    # bool is an int subclass but never a meaningful word
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWord(value, what)
    if not 0 <= value <= WORD_MASK:
        raise InvalidWord(value, what)
    return value

def le_bytes_to_words(b: bytes) -> list[int]:
    """Split ``b`` into 32-bit words; byte 0 is the low byte of word 0."""
    if len(b) % 4 != 0:
        raise ValueError("byte length must be multiple of 4")
    return list(struct.unpack("<" + "I" * (len(b) // 4), b))

def words_to_le_bytes(*words: int) -> bytes:
    return struct.pack("<" + "I" * len(words), *[check_word(w) for w in words])
