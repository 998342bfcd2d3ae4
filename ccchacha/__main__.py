#!/usr/bin/env python3
"""ccChaCha - ChaCha20 stream cipher tool."""

from __future__ import annotations

from ccchacha.cli.main import main

if __name__ == "__main__":
    main()
