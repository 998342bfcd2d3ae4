"""ChaCha quarter round and double round (RFC 7539 sections 2.1, 2.3)."""

from __future__ import annotations

from typing import MutableSequence

from ccchacha.core.bits import add32, rotl32

COLUMN_ROUNDS: tuple[tuple[int, int, int, int], ...] = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
)

DIAGONAL_ROUNDS: tuple[tuple[int, int, int, int], ...] = (
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def quarter_round(x: MutableSequence[int], a: int, b: int, c: int, d: int) -> None:
    """Apply the add-rotate-xor quarter round to ``x`` in place."""
    x[a] = add32(x[a], x[b])
    x[d] = rotl32(x[d] ^ x[a], 16)
    x[c] = add32(x[c], x[d])
    x[b] = rotl32(x[b] ^ x[c], 12)
    x[a] = add32(x[a], x[b])
    x[d] = rotl32(x[d] ^ x[a], 8)
    x[c] = add32(x[c], x[d])
    x[b] = rotl32(x[b] ^ x[c], 7)


def double_round(x: MutableSequence[int]) -> None:
    """One column round followed by one diagonal round."""
    for a, b, c, d in COLUMN_ROUNDS:
        quarter_round(x, a, b, c, d)
    for a, b, c, d in DIAGONAL_ROUNDS:
        quarter_round(x, a, b, c, d)
