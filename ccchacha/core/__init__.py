"""ChaCha20 stream cipher core.

Provides the pure-Python ChaCha20 transform (RFC 7539):
- Endian codec and 32-bit word arithmetic
- Quarter round and double round
- Block function with feedforward
- Counter-mode keystream XOR, sequential and parallel
"""

from __future__ import annotations

from ccchacha.core.block import BLOCK_SIZE, DEFAULT_ROUNDS, chacha20_block
from ccchacha.core.keystream import (
    blocks_required,
    chacha20_xor,
    check_counter_range,
    keystream,
    xor_keystream,
)
from ccchacha.core.parallel import parallel_chacha20_xor
from ccchacha.core.rounds import double_round, quarter_round
from ccchacha.core.state import KEY_SIZE, NONCE_SIZE, SIGMA, ChaChaState, init_state

__all__ = [
    "BLOCK_SIZE",
    "DEFAULT_ROUNDS",
    "KEY_SIZE",
    "NONCE_SIZE",
    "SIGMA",
    "ChaChaState",
    "blocks_required",
    "chacha20_block",
    "chacha20_xor",
    "check_counter_range",
    "double_round",
    "init_state",
    "keystream",
    "parallel_chacha20_xor",
    "quarter_round",
    "xor_keystream",
]
