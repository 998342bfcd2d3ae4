"""Command line interface for ccChaCha."""

from __future__ import annotations

from ccchacha.cli.main import cli, main

__all__ = ["cli", "main"]
