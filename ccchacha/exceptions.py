"""Exception hierarchy for ccChaCha.

All precondition failures of the cipher are raised before any keystream
is generated, so a caller never receives truncated or garbage output.
"""

from __future__ import annotations

from typing import Any


class ChaChaError(Exception):
    """Base exception for all ccChaCha errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize ccChaCha error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ValidationError(ChaChaError, ValueError):
    """Input validation errors."""


class InvalidKeyLengthError(ValidationError):
    """Key is not exactly 32 bytes."""


class InvalidNonceLengthError(ValidationError):
    """Nonce is not exactly 12 bytes."""


class BufferLengthMismatchError(ValidationError):
    """Output buffer is smaller than the input."""


class CounterOverflowError(ValidationError):
    """Block counter would leave the 32-bit range."""


class InvalidRoundCountError(ValidationError):
    """Round count is not a positive even number."""


class ConfigurationError(ValidationError):
    """Configuration validation errors."""
