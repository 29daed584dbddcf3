# rounds.py - ChaCha20 quarter-round and the 20-round permutation
#
# QUARTER-ROUND (on words a,b,c,d):
#   a = (a + b);  d ^= a;  d = ROTL32(d, 16)
#   c = (c + d);  b ^= c;  b = ROTL32(b, 12)
#   a = (a + b);  d ^= a;  d = ROTL32(d,  8)
#   c = (c + d);  b ^= c;  b = ROTL32(b,  7)
from .errors import InvalidStateLength
from .state import STATE_WORDS
from .words import check_word

DOUBLE_ROUNDS = 10  # 20 rounds

COLUMN_ROUND = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
DIAGONAL_ROUND = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & 0xffffffff


def quarter_round(a: int, b: int, c: int, d: int):
    a = (a + b) & 0xffffffff; d ^= a; d = rotl32(d, 16)
    c = (c + d) & 0xffffffff; b ^= c; b = rotl32(b, 12)
    a = (a + b) & 0xffffffff; d ^= a; d = rotl32(d, 8)
    c = (c + d) & 0xffffffff; b ^= c; b = rotl32(b, 7)
    return a, b, c, d


def qround(state: list, a: int, b: int, c: int, d: int) -> None:
    """Apply the quarter-round in place to ``state[a], state[b], state[c], state[d]``."""
    state[a], state[b], state[c], state[d] = quarter_round(state[a], state[b], state[c], state[d])


def double_round(w: list) -> None:
    for a, b, c, d in COLUMN_ROUND:
        qround(w, a, b, c, d)
    for a, b, c, d in DIAGONAL_ROUND:
        qround(w, a, b, c, d)


def rot20(state) -> tuple[int, ...]:
    """
    Run the 20 ChaCha rounds (10 double-rounds) over a copy of ``state``.

    The caller's state is left untouched; the permuted words come back as
    a new 16-tuple. No feed-forward here, that is chacha20_block's job.
    """
    working = list(state)
    if len(working) != STATE_WORDS:
        raise InvalidStateLength(len(working))
    for w in working:
        check_word(w, "state word")
    for _ in range(DOUBLE_ROUNDS):
        double_round(working)
    return tuple(working)
