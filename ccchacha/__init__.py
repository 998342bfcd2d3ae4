"""ccChaCha - a pure Python ChaCha20 stream cipher (RFC 7539)."""

from __future__ import annotations

__version__ = "0.1.0"

from ccchacha.ciphers import ChaCha20Cipher, CipherSuite
from ccchacha.core import (
    BLOCK_SIZE,
    ChaChaState,
    chacha20_block,
    chacha20_xor,
    keystream,
    parallel_chacha20_xor,
)
from ccchacha.exceptions import (
    BufferLengthMismatchError,
    ChaChaError,
    CounterOverflowError,
    InvalidKeyLengthError,
    InvalidNonceLengthError,
    InvalidRoundCountError,
    ValidationError,
)

__all__ = [
    "BLOCK_SIZE",
    "BufferLengthMismatchError",
    "ChaCha20Cipher",
    "ChaChaError",
    "ChaChaState",
    "CipherSuite",
    "CounterOverflowError",
    "InvalidKeyLengthError",
    "InvalidNonceLengthError",
    "InvalidRoundCountError",
    "ValidationError",
    "__version__",
    "chacha20_block",
    "chacha20_xor",
    "keystream",
    "parallel_chacha20_xor",
]
