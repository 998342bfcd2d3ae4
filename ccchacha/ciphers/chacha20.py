"""Incremental ChaCha20 stream cipher.

Wraps the pure-Python core so that a stream can be processed in
arbitrary pieces. The ``cryptography`` backend produces the same
keystream through OpenSSL, using the RFC 7539 layout of its 16-byte
nonce argument: 4-byte little-endian counter followed by the 12-byte nonce.
"""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from ccchacha.ciphers.base import CipherSuite
from ccchacha.core.block import BLOCK_SIZE, DEFAULT_ROUNDS, chacha20_block, validate_rounds
from ccchacha.core.keystream import MAX_BLOCKS
from ccchacha.core.state import (
    KEY_SIZE,
    NONCE_SIZE,
    ChaChaState,
    validate_counter,
    validate_key,
    validate_nonce,
)
from ccchacha.exceptions import ConfigurationError, CounterOverflowError
from ccchacha.models import CipherBackend

logger = logging.getLogger(__name__)


class _StreamPosition:
    """Keystream cursor for one direction of a ChaCha20Cipher."""

    def __init__(
        self,
        key: bytes,
        nonce: bytes,
        counter: int,
        rounds: int,
        backend: CipherBackend,
    ):
        self.rounds = rounds
        self.limit = (MAX_BLOCKS - counter) * BLOCK_SIZE
        self.consumed = 0
        self._state: ChaChaState | None = None
        self._buffer = b""
        self._context = None

        if backend is CipherBackend.CRYPTOGRAPHY:
            full_nonce = counter.to_bytes(4, "little") + nonce
            cipher = Cipher(algorithms.ChaCha20(key, full_nonce), mode=None)
            self._context = cipher.encryptor()
        else:
            self._state = ChaChaState.from_key(key, counter, nonce)

    def _keystream(self, length: int) -> bytes:
        if len(self._buffer) < length:
            missing = length - len(self._buffer)
            blocks = []
            for _ in range(-(-missing // BLOCK_SIZE)):
                blocks.append(chacha20_block(self._state, self.rounds))
                self._state.advance()
            self._buffer += b"".join(blocks)
        stream, self._buffer = self._buffer[:length], self._buffer[length:]
        return stream

    def update(self, data: bytes) -> bytes:
        length = len(data)
        if self.consumed + length > self.limit:
            msg = (
                f"Stream position {self.consumed} + {length} bytes exceeds the "
                "32-bit block counter"
            )
            raise CounterOverflowError(
                msg, {"position": self.consumed, "length": length}
            )
        self.consumed += length

        if self._context is not None:
            return self._context.update(bytes(data))

        stream = self._keystream(length)
        return (
            int.from_bytes(data, "little") ^ int.from_bytes(stream, "little")
        ).to_bytes(length, "little")

    def wipe(self) -> None:
        if self._state is not None:
            self._state.wipe()
        self._buffer = b""
        self._context = None


class ChaCha20Cipher(CipherSuite):
    """ChaCha20 stream cipher implementation."""

    name = "chacha20"

    def __init__(
        self,
        key: bytes,
        nonce: bytes | None = None,
        counter: int = 0,
        rounds: int = DEFAULT_ROUNDS,
        backend: CipherBackend | str = CipherBackend.PYTHON,
    ):
        """Initialize ChaCha20 cipher.

        Args:
            key: Encryption key (32 bytes)
            nonce: Nonce (12 bytes). If None, generates a random nonce.
            counter: Initial 32-bit block counter
            rounds: Round count; the cryptography backend supports 20 only
            backend: "python" or "cryptography"

        Raises:
            InvalidKeyLengthError: If key is not 32 bytes
            InvalidNonceLengthError: If nonce is not 12 bytes
            CounterOverflowError: If counter does not fit in 32 bits
            ConfigurationError: If the backend cannot honour ``rounds``

        """
        validate_key(key)
        self.key = key
        self.nonce = secrets.token_bytes(NONCE_SIZE) if nonce is None else nonce
        validate_nonce(self.nonce)
        validate_counter(counter)
        validate_rounds(rounds)

        try:
            self.backend = CipherBackend(backend)
        except ValueError as e:
            msg = f"Unknown cipher backend: {backend}"
            raise ConfigurationError(msg) from e
        if self.backend is CipherBackend.CRYPTOGRAPHY and rounds != DEFAULT_ROUNDS:
            msg = f"The cryptography backend only supports 20 rounds, got {rounds}"
            raise ConfigurationError(msg, {"rounds": rounds})

        self.counter = counter
        self.rounds = rounds

        # Store encryption/decryption positions
        self._encryptor: _StreamPosition | None = None
        self._decryptor: _StreamPosition | None = None

    def _new_position(self) -> _StreamPosition:
        if self.key is None:
            msg = "Cipher has been wiped"
            raise ConfigurationError(msg)
        return _StreamPosition(
            self.key, self.nonce, self.counter, self.rounds, self.backend
        )

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt data using ChaCha20.

        Args:
            data: Plaintext data to encrypt

        Returns:
            Encrypted data

        """
        if not data:
            return b""

        if self._encryptor is None:
            self._encryptor = self._new_position()

        return self._encryptor.update(data)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt data using ChaCha20.

        Args:
            data: Encrypted data to decrypt

        Returns:
            Decrypted plaintext data

        """
        if not data:
            return b""

        if self._decryptor is None:
            self._decryptor = self._new_position()

        return self._decryptor.update(data)

    def key_size(self) -> int:
        return KEY_SIZE

    def nonce_size(self) -> int:
        return NONCE_SIZE

    def wipe(self) -> None:
        """Drop the key and both keystream positions."""
        for position in (self._encryptor, self._decryptor):
            if position is not None:
                position.wipe()
        self._encryptor = None
        self._decryptor = None
        self.key = None
        logger.debug("ChaCha20 cipher wiped")
