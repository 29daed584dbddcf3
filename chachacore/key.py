# key.py - ChaCha20 256-bit key, packed as eight little-endian words
import hmac
from dataclasses import dataclass

from Crypto.Random import get_random_bytes

from .errors import InvalidKeyLength
from .words import check_word, le_bytes_to_words, words_to_le_bytes

KEY_SIZE = 32
KEY_WORDS = KEY_SIZE // 4


@dataclass(frozen=True, eq=False, repr=False)
class Key:
    """
    ChaCha20 key.

    Holds the eight 32-bit words the block function consumes. The words
    are kept in a tuple, so a Key never changes after construction.

    Build one with ``Key.from_bytes``, ``Key.from_hex``, ``Key.from_words``
    or ``Key.generate``; ``as_bytes`` is the exact inverse of ``from_bytes``.
    """

    words: tuple[int, ...]

    def __post_init__(self):
        words = tuple(self.words)
        if len(words) != KEY_WORDS:
            raise InvalidKeyLength(len(words), "words")
        for w in words:
            check_word(w, "key word")
        object.__setattr__(self, "words", words)

    @classmethod
    def from_bytes(cls, data) -> "Key":
        """
        Pack raw key bytes into words.

        Every 4-byte group becomes one word (first group -> word 0), read
        little-endian. Anything other than exactly 32 bytes is rejected
        with InvalidKeyLength; the key is never padded or truncated.
        """
        if isinstance(data, (int, str)):
            raise TypeError(f"key must be bytes-like, not {type(data).__name__}")
        raw = bytes(data)
        if len(raw) != KEY_SIZE:
            raise InvalidKeyLength(len(raw))
        return cls(tuple(le_bytes_to_words(raw)))

    @classmethod
    def from_words(cls, words) -> "Key":
        return cls(tuple(words))

    @classmethod
    def from_hex(cls, text: str) -> "Key":
        text = text.strip().replace(" ", "").replace("\n", "")
        return cls.from_bytes(bytes.fromhex(text))

    @classmethod
    def generate(cls) -> "Key":
        return cls.from_bytes(get_random_bytes(KEY_SIZE))

    def as_bytes(self) -> bytes:
        return words_to_le_bytes(*self.words)

    def key(self) -> tuple[int, ...]:
        return self.words

    def __len__(self):
        return KEY_WORDS

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return hmac.compare_digest(self.as_bytes(), other.as_bytes())

    def __hash__(self):
        return hash(self.words)

    def __repr__(self):
        # never leak key material into logs or tracebacks
        return "Key(<256-bit>)"
