"""Pytest configuration and shared fixtures for ccChaCha tests."""

from __future__ import annotations

import logging
import os
import random

import pytest

from ccchacha import config as config_module


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("unit", "marks tests as unit tests"),
        ("core", "marks tests as cipher core tests"),
        ("cli", "marks tests as CLI tests"),
        ("config", "marks tests as configuration tests"),
        ("security", "marks tests as security tests"),
        ("property", "marks tests as property-based tests"),
        ("performance", "marks tests as performance tests"),
        ("slow", "marks tests as slow (deselect with '-m \"not slow\"')"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep user config files and CCCHACHA_* variables out of tests."""
    for name in list(os.environ):
        if name.startswith("CCCHACHA_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    # setup_logging() detaches the package logger from the root logger
    package_logger = logging.getLogger("ccchacha")
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def seed_rng() -> None:
    """Seed RNG for deterministic test data."""
    random.seed(1337)


@pytest.fixture
def rfc_key() -> bytes:
    """Key used throughout RFC 7539 section 2: bytes 0x00..0x1f."""
    return bytes(range(32))


@pytest.fixture
def rfc_nonce() -> bytes:
    """Nonce from RFC 7539 section 2.4.2."""
    return bytes.fromhex("000000000000004a00000000")


@pytest.fixture
def make_bytes():
    """Factory for deterministic pseudo-random bytes (seeded by ``seed_rng``)."""

    def _make(length: int) -> bytes:
        return bytes(random.getrandbits(8) for _ in range(length))

    return _make
