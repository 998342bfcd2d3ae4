"""Stream cipher suites built on the ChaCha20 core.

Provides incremental cipher objects for callers that encrypt a stream
piece by piece:
- ChaCha20 stream cipher (pure Python or ``cryptography`` backend)
"""

from __future__ import annotations

from ccchacha.ciphers.base import CipherSuite
from ccchacha.ciphers.chacha20 import ChaCha20Cipher

__all__ = ["ChaCha20Cipher", "CipherSuite"]
