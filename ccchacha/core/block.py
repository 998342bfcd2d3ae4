"""ChaCha block function (RFC 7539 section 2.3)."""

from __future__ import annotations

from typing import Sequence

from ccchacha.core.bits import add32
from ccchacha.core.endian import words_to_le_bytes
from ccchacha.core.rounds import double_round
from ccchacha.core.state import STATE_WORDS, ChaChaState
from ccchacha.exceptions import InvalidRoundCountError, ValidationError

BLOCK_SIZE = 64
DEFAULT_ROUNDS = 20


def validate_rounds(rounds: int) -> None:
    """Raise InvalidRoundCountError unless ``rounds`` is positive and even."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        msg = f"Round count must be an integer, got {type(rounds).__name__}"
        raise InvalidRoundCountError(msg)
    if rounds <= 0 or rounds % 2:
        msg = f"Round count must be a positive even number, got {rounds}"
        raise InvalidRoundCountError(msg, {"rounds": rounds})


def chacha20_block(
    state: ChaChaState | Sequence[int], rounds: int = DEFAULT_ROUNDS
) -> bytes:
    """Produce one 64-byte keystream block from ``state``.

    The caller's state is left untouched: rounds run on a working copy
    which is then added word-wise to the input (feedforward).
    """
    validate_rounds(rounds)
    words = state.words if isinstance(state, ChaChaState) else state
    if len(words) != STATE_WORDS:
        msg = f"State must hold {STATE_WORDS} words, got {len(words)}"
        raise ValidationError(msg)

    x = list(words)
    for _ in range(rounds // 2):
        double_round(x)

    return words_to_le_bytes(add32(x[i], words[i]) for i in range(STATE_WORDS))
