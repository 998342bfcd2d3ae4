"""Tests for parallel keystream generation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from ccchacha.core.keystream import chacha20_xor
from ccchacha.core.parallel import parallel_chacha20_xor
from ccchacha.exceptions import (
    CounterOverflowError,
    InvalidKeyLengthError,
    ValidationError,
)

pytestmark = [pytest.mark.unit, pytest.mark.core]

KEY = bytes(range(32))
NONCE = bytes(11) + b"\x01"


@pytest.mark.parametrize("length", [0, 1, 64, 129, 1000, 4097])
@pytest.mark.parametrize("blocks_per_task", [1, 3, 16])
def test_matches_sequential(length, blocks_per_task, make_bytes):
    data = make_bytes(length)
    expected = chacha20_xor(KEY, 9, NONCE, data)
    result = parallel_chacha20_xor(
        KEY, 9, NONCE, data, workers=4, blocks_per_task=blocks_per_task
    )
    assert result == expected


def test_caller_executor_is_left_running(make_bytes):
    data = make_bytes(2048)
    with ThreadPoolExecutor(max_workers=2) as executor:
        first = parallel_chacha20_xor(
            KEY, 0, NONCE, data, executor=executor, blocks_per_task=2
        )
        second = parallel_chacha20_xor(
            KEY, 0, NONCE, first, executor=executor, blocks_per_task=5
        )
    assert second == data


def test_segments_near_counter_limit(make_bytes):
    data = make_bytes(64 * 8)
    counter = 2**32 - 8
    assert parallel_chacha20_xor(
        KEY, counter, NONCE, data, blocks_per_task=3
    ) == chacha20_xor(KEY, counter, NONCE, data)


def test_counter_overflow_checked_up_front():
    with pytest.raises(CounterOverflowError):
        parallel_chacha20_xor(KEY, 2**32 - 1, NONCE, bytes(65), blocks_per_task=1)


def test_invalid_key():
    with pytest.raises(InvalidKeyLengthError):
        parallel_chacha20_xor(bytes(10), 0, NONCE, bytes(10))


def test_blocks_per_task_must_be_positive():
    with pytest.raises(ValidationError, match="blocks_per_task"):
        parallel_chacha20_xor(KEY, 0, NONCE, bytes(10), blocks_per_task=0)
