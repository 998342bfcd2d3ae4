"""32-bit word arithmetic used by the ChaCha rounds."""

from __future__ import annotations

MASK32 = 0xFFFFFFFF


def rotl32(x: int, n: int) -> int:
    """Rotate a 32-bit word left by ``n`` bits.

    The right shift uses ``(-n) mod 32`` so a rotation by 0 is the identity
    instead of a 32-bit shift.
    """
    n &= 31
    x &= MASK32
    return ((x << n) & MASK32) | (x >> (-n & 31))


def add32(a: int, b: int) -> int:
    """Add two words modulo 2**32."""
    return (a + b) & MASK32
