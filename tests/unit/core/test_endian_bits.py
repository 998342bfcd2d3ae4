"""Tests for the little-endian codec and 32-bit word arithmetic."""

from __future__ import annotations

import pytest

from ccchacha.core.bits import MASK32, add32, rotl32
from ccchacha.core.endian import (
    le_bytes_to_word,
    le_bytes_to_words,
    word_to_le_bytes,
    words_to_le_bytes,
)
from ccchacha.exceptions import ValidationError

pytestmark = [pytest.mark.unit, pytest.mark.core]


def test_word_to_le_bytes_orders_least_significant_first():
    """Byte i of the output is (value >> 8*i) & 0xff."""
    assert word_to_le_bytes(0x01020304) == b"\x04\x03\x02\x01"
    assert word_to_le_bytes(0x61707865) == b"expa"


def test_word_to_le_bytes_masks_to_32_bits():
    assert word_to_le_bytes(0x1_0000_0001) == b"\x01\x00\x00\x00"


def test_le_bytes_to_word_inverse():
    for value in (0, 1, 0xFF, 0x100, 0xDEADBEEF, MASK32):
        assert le_bytes_to_word(word_to_le_bytes(value)) == value


def test_le_bytes_to_word_rejects_wrong_length():
    with pytest.raises(ValidationError, match="Expected 4 bytes"):
        le_bytes_to_word(b"\x00\x01\x02")


def test_bulk_conversion():
    """Constant words spell "expand 32-byte k" in little-endian order."""
    words = le_bytes_to_words(b"expand 32-byte k")
    assert words == [0x61707865, 0x3320646E, 0x79622D32, 0x6B206574]
    assert words_to_le_bytes(words) == b"expand 32-byte k"


def test_le_bytes_to_words_rejects_partial_word():
    with pytest.raises(ValidationError, match="multiple of 4"):
        le_bytes_to_words(b"\x00" * 5)


def test_words_to_le_bytes_empty():
    assert words_to_le_bytes([]) == b""


@pytest.mark.parametrize(
    ("value", "shift", "expected"),
    [
        (0x80000000, 1, 0x00000001),
        (0x00000001, 31, 0x80000000),
        (0x12345678, 8, 0x34567812),
        (0x12345678, 16, 0x56781234),
        (0xDEADBEEF, 0, 0xDEADBEEF),
        (0x7998BFDA, 7, 0xCC5FED3C),
    ],
)
def test_rotl32(value, shift, expected):
    assert rotl32(value, shift) == expected


def test_rotl32_full_turn_is_identity():
    assert rotl32(0xCAFEBABE, 32) == 0xCAFEBABE


def test_add32_wraps():
    assert add32(MASK32, 1) == 0
    assert add32(0x80000000, 0x80000000) == 0
    assert add32(2, 3) == 5
