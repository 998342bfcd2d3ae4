"""Little-endian conversion between 32-bit words and bytes."""

from __future__ import annotations

import struct
from typing import Iterable, Sequence

from ccchacha.core.bits import MASK32
from ccchacha.exceptions import ValidationError

_WORD = struct.Struct("<I")


def word_to_le_bytes(value: int) -> bytes:
    """Encode a 32-bit word as 4 little-endian bytes."""
    return _WORD.pack(value & MASK32)


def le_bytes_to_word(data: bytes | bytearray | memoryview) -> int:
    """Decode 4 little-endian bytes into a 32-bit word.

    Raises:
        ValidationError: If ``data`` is not exactly 4 bytes

    """
    if len(data) != 4:
        msg = f"Expected 4 bytes, got {len(data)}"
        raise ValidationError(msg)
    return _WORD.unpack(data)[0]


def le_bytes_to_words(data: bytes | bytearray | memoryview) -> list[int]:
    """Decode a byte string into little-endian 32-bit words."""
    if len(data) % 4:
        msg = f"Length must be a multiple of 4, got {len(data)}"
        raise ValidationError(msg)
    return list(struct.unpack(f"<{len(data) // 4}I", data))


def words_to_le_bytes(words: Sequence[int] | Iterable[int]) -> bytes:
    """Encode words as little-endian bytes, word 0 first."""
    words = [w & MASK32 for w in words]
    return struct.pack(f"<{len(words)}I", *words)
