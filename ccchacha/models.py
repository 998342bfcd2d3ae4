"""Pydantic models for ccChaCha.

Provides validated configuration models for type safety and runtime validation.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CipherBackend(str, Enum):
    """Keystream generation backends."""

    PYTHON = "python"
    CRYPTOGRAPHY = "cryptography"


class CipherConfig(BaseModel):
    """Cipher configuration."""

    rounds: int = Field(default=20, ge=2, le=40, description="ChaCha round count")
    backend: CipherBackend = Field(
        default=CipherBackend.PYTHON,
        description="Keystream backend used by the stream cipher",
    )
    parallel_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Worker count for parallel keystream generation (1 = sequential)",
    )
    parallel_threshold_kib: int = Field(
        default=64,
        ge=1,
        le=1024 * 1024,
        description="Minimum input size in KiB before the parallel path is used",
    )
    blocks_per_task: int = Field(
        default=256,
        ge=1,
        le=1 << 20,
        description="64-byte blocks handed to each parallel task",
    )
    wipe_state: bool = Field(
        default=True,
        description="Overwrite the cipher state with zeros after each call",
    )

    @field_validator("rounds")
    @classmethod
    def validate_rounds(cls, v: int) -> int:
        """Validate that the round count is even."""
        if v % 2:
            msg = f"rounds must be even, got {v}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_backend_rounds(self) -> CipherConfig:
        """Validate that the cryptography backend runs 20 rounds."""
        if self.backend is CipherBackend.CRYPTOGRAPHY and self.rounds != 20:
            msg = f"The cryptography backend only supports 20 rounds, got {self.rounds}"
            raise ValueError(msg)
        return self


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Log level")
    log_file: str | None = Field(None, description="Log file path")
    structured_logging: bool = Field(
        default=False, description="Use structured (JSON) logging"
    )
    log_correlation_id: bool = Field(
        default=True,
        description="Include correlation IDs",
    )
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string for plain file output",
    )


class Config(BaseModel):
    """Main configuration model."""

    cipher: CipherConfig = Field(default_factory=CipherConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
