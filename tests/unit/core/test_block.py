"""Tests for the ChaCha block function."""

from __future__ import annotations

import pytest

from ccchacha.core import vectors
from ccchacha.core.block import BLOCK_SIZE, chacha20_block
from ccchacha.core.state import ChaChaState
from ccchacha.exceptions import InvalidRoundCountError, ValidationError

pytestmark = [pytest.mark.unit, pytest.mark.core]


def test_block_rfc_2_3_2(rfc_key):
    """Serialized block matches RFC 7539 2.3.2."""
    state = ChaChaState.from_key(rfc_key, vectors.BLOCK_COUNTER, vectors.BLOCK_NONCE)
    block = chacha20_block(state)

    assert len(block) == BLOCK_SIZE
    assert block == vectors.BLOCK_OUTPUT


def test_block_all_zero_input():
    """All-zero key, nonce and counter (RFC 7539 A.1 test vector 1)."""
    state = ChaChaState.from_key(bytes(32), 0, bytes(12))
    assert chacha20_block(state) == bytes.fromhex(
        "76b8e0ada0f13d90405d6ae55386bd28bdd219b8a08ded1aa836efcc8b770dc7"
        "da41597c5157488d7724e03fb8d84a376a43b8f41518a11cc387b669b2ee6586"
    )


def test_block_accepts_plain_word_sequence():
    words = list(vectors.BLOCK_INITIAL_STATE)
    assert chacha20_block(words) == vectors.BLOCK_OUTPUT
    assert chacha20_block(tuple(words)) == vectors.BLOCK_OUTPUT


def test_block_does_not_mutate_state(rfc_key):
    state = ChaChaState.from_key(rfc_key, 1, vectors.BLOCK_NONCE)
    before = list(state.words)
    chacha20_block(state)
    assert state.words == before


def test_zero_state_gives_zero_block():
    """With no feedforward input, every round keeps zeros at zero."""
    assert chacha20_block([0] * 16) == bytes(64)


def test_round_count_changes_output(rfc_key):
    state = ChaChaState.from_key(rfc_key, 1, vectors.BLOCK_NONCE)
    outputs = {chacha20_block(state, rounds) for rounds in (8, 12, 20)}
    assert len(outputs) == 3


@pytest.mark.parametrize("rounds", [0, -2, 7, 21])
def test_invalid_round_count(rounds):
    with pytest.raises(InvalidRoundCountError):
        chacha20_block([0] * 16, rounds)


def test_non_integer_round_count():
    with pytest.raises(InvalidRoundCountError, match="integer"):
        chacha20_block([0] * 16, 20.0)


def test_wrong_state_length():
    with pytest.raises(ValidationError, match="16 words"):
        chacha20_block([0] * 12)
