"""Utility helpers for ccChaCha."""

from __future__ import annotations

from ccchacha.utils.hexdump import dump_hex, format_hex

__all__ = ["dump_hex", "format_hex"]
