"""Base interface for incremental stream ciphers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CipherSuite(ABC):
    """Abstract base class for stream cipher implementations.

    Successive ``encrypt`` calls continue one keystream; ``decrypt`` keeps
    its own position so a single object can undo its own output.
    Instances are context managers that wipe key material on exit.
    """

    name: str = "cipher"

    @abstractmethod
    def encrypt(self, data: bytes) -> bytes:
        """Encrypt the next ``len(data)`` bytes of the stream."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt the next ``len(data)`` bytes of the stream."""

    @abstractmethod
    def key_size(self) -> int:
        """Key size in bytes."""

    @abstractmethod
    def nonce_size(self) -> int:
        """Nonce size in bytes."""

    def wipe(self) -> None:  # noqa: B027
        """Drop key material held by the cipher."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.wipe()
        return False
