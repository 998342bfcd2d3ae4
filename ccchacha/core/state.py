"""ChaCha20 state layout (RFC 7539 section 2.3).

    cccccccc  cccccccc  cccccccc  cccccccc
    kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
    kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
    bbbbbbbb  nnnnnnnn  nnnnnnnn  nnnnnnnn

c = constant, k = key, b = block counter, n = nonce.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ccchacha.core.bits import MASK32
from ccchacha.core.endian import le_bytes_to_words
from ccchacha.exceptions import (
    CounterOverflowError,
    InvalidKeyLengthError,
    InvalidNonceLengthError,
    ValidationError,
)

KEY_SIZE = 32
NONCE_SIZE = 12
STATE_WORDS = 16
COUNTER_INDEX = 12

# "expand 32-byte k"
SIGMA: tuple[int, int, int, int] = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)


_BYTES_TYPES = (bytes, bytearray, memoryview)


def _require_bytes(value: object, what: str) -> None:
    if not isinstance(value, _BYTES_TYPES):
        msg = f"ChaCha20 {what} must be bytes-like, got {type(value).__name__}"
        raise ValidationError(msg, {"type": type(value).__name__})


def validate_key(key: bytes) -> None:
    """Raise InvalidKeyLengthError unless ``key`` is 32 bytes."""
    _require_bytes(key, "key")
    if len(key) != KEY_SIZE:
        msg = f"ChaCha20 key must be {KEY_SIZE} bytes, got {len(key)}"
        raise InvalidKeyLengthError(msg, {"length": len(key)})


def validate_nonce(nonce: bytes) -> None:
    """Raise InvalidNonceLengthError unless ``nonce`` is 12 bytes."""
    _require_bytes(nonce, "nonce")
    if len(nonce) != NONCE_SIZE:
        msg = f"ChaCha20 nonce must be {NONCE_SIZE} bytes, got {len(nonce)}"
        raise InvalidNonceLengthError(msg, {"length": len(nonce)})


def validate_counter(counter: int) -> None:
    """Raise CounterOverflowError unless ``counter`` fits in 32 bits."""
    if isinstance(counter, bool) or not isinstance(counter, int):
        msg = f"ChaCha20 counter must be an integer, got {type(counter).__name__}"
        raise ValidationError(msg, {"type": type(counter).__name__})
    if not 0 <= counter <= MASK32:
        msg = f"ChaCha20 counter must be in [0, 2**32), got {counter}"
        raise CounterOverflowError(msg, {"counter": counter})


@dataclass
class ChaChaState:
    """The 16-word cipher state.

    Only the counter word changes during a stream; key, nonce and
    constant words are fixed once built.
    """

    words: list[int] = field(default_factory=lambda: [0] * STATE_WORDS)

    def __post_init__(self) -> None:
        if len(self.words) != STATE_WORDS:
            msg = f"State must hold {STATE_WORDS} words, got {len(self.words)}"
            raise ValidationError(msg)
        self.words = [w & MASK32 for w in self.words]

    @classmethod
    def from_key(cls, key: bytes, counter: int, nonce: bytes) -> ChaChaState:
        """Build the initial state from key, block counter and nonce."""
        validate_key(key)
        validate_nonce(nonce)
        validate_counter(counter)
        return cls([*SIGMA, *le_bytes_to_words(key), counter, *le_bytes_to_words(nonce)])

    @property
    def constants(self) -> list[int]:
        return self.words[0:4]

    @property
    def key_words(self) -> list[int]:
        return self.words[4:12]

    @property
    def nonce_words(self) -> list[int]:
        return self.words[13:16]

    @property
    def counter(self) -> int:
        return self.words[COUNTER_INDEX]

    @counter.setter
    def counter(self, value: int) -> None:
        self.words[COUNTER_INDEX] = value & MASK32

    def advance(self, blocks: int = 1) -> None:
        """Move the counter forward, wrapping modulo 2**32."""
        self.counter = self.counter + blocks

    def copy(self) -> ChaChaState:
        return ChaChaState(list(self.words))

    def wipe(self) -> None:
        """Overwrite every word with zero."""
        for i in range(STATE_WORDS):
            self.words[i] = 0

    def __repr__(self) -> str:
        # Key material is never rendered
        return f"ChaChaState(counter={self.counter})"


def init_state(key: bytes, counter: int, nonce: bytes) -> ChaChaState:
    """Build the initial state; see ChaChaState.from_key."""
    return ChaChaState.from_key(key, counter, nonce)
