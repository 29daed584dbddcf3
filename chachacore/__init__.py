# -*- coding: utf-8 -*-
"""
ChaCha20 core block transform (RFC 7539 / RFC 8439).

key (32 B) + nonce (12 B) + 32-bit counter -> one 64-byte keystream block.
Stream encryption, AEAD and nonce management are left to the caller.
"""
import logging

from .block import BLOCK_SIZE, block_to_bytes, chacha20_block, chacha20_block_bytes
from .errors import (
    ChaChaError,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidStateLength,
    InvalidWord,
)
from .key import KEY_SIZE, Key
from .rounds import DOUBLE_ROUNDS, double_round, qround, quarter_round, rot20, rotl32
from .state import CONSTANTS, NONCE_SIZE, SIGMA, STATE_WORDS, format_state, nonce_from_bytes, setup_state
from .words import WORD_MASK, le_bytes_to_words, words_to_le_bytes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BLOCK_SIZE", "CONSTANTS", "DOUBLE_ROUNDS", "KEY_SIZE", "NONCE_SIZE", "SIGMA",
    "STATE_WORDS", "WORD_MASK",
    "ChaChaError", "InvalidKeyLength", "InvalidNonceLength", "InvalidStateLength", "InvalidWord",
    "Key",
    "block_to_bytes", "chacha20_block", "chacha20_block_bytes", "double_round",
    "format_state", "le_bytes_to_words", "nonce_from_bytes", "qround", "quarter_round",
    "rot20", "rotl32", "setup_state", "words_to_le_bytes",
]
