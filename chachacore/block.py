# block.py - ChaCha20 block function (RFC 7539 section 2.3)
#
#   state   = constants || key || counter || nonce
#   working = 20 rounds over a copy of state
#   output  = state + working   (word-wise, mod 2^32)
import logging

from .rounds import rot20
from .state import format_state, setup_state
from .words import words_to_le_bytes

logger = logging.getLogger(__name__)

BLOCK_SIZE = 64


def chacha20_block(key, nonce, counter: int) -> tuple[int, ...]:
    """
    Compute one 16-word keystream block.

    key     : Key (or 8 words)
    nonce   : 3 words, or the 12 raw nonce bytes
    counter : 32-bit block counter

    Raises InvalidKeyLength, InvalidNonceLength or InvalidWord before any
    state is built. Same inputs always give the same block.
    """
    state = setup_state(key, nonce, counter)
    working = rot20(state)
    out_words = tuple((working[i] + state[i]) & 0xffffffff for i in range(16))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s", format_state(state, f"initial (counter={counter})", hide_key=True))
        logger.debug("%s", format_state(out_words, "final (before serialize)"))
    return out_words


def block_to_bytes(words) -> bytes:
    """Serialize 16 keystream words into the 64-byte block, little-endian."""
    return words_to_le_bytes(*words)


def chacha20_block_bytes(key, nonce, counter: int) -> bytes:
    return block_to_bytes(chacha20_block(key, nonce, counter))
