"""Published ChaCha20 test vectors (RFC 7539) and a self-test runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ccchacha.core.block import chacha20_block
from ccchacha.core.keystream import chacha20_xor
from ccchacha.core.rounds import quarter_round
from ccchacha.core.state import ChaChaState

logger = logging.getLogger(__name__)

RFC_KEY = bytes(range(32))

# Section 2.1.1
QUARTER_ROUND_INPUT = (0x11111111, 0x01020304, 0x9B8D6F43, 0x01234567)
QUARTER_ROUND_OUTPUT = (0xEA2A92F4, 0xCB1CF8CE, 0x4581472E, 0x5881C4BB)

# Section 2.2.1, quarter round applied to indices (2, 7, 8, 13)
STATE_QUARTER_ROUND_INPUT = (
    0x879531E0, 0xC5ECF37D, 0x516461B1, 0xC9A62F8A,
    0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0x2A5F714C,
    0x53372767, 0xB00A5631, 0x974C541A, 0x359E9963,
    0x5C971061, 0x3D631689, 0x2098D9D6, 0x91DBD320,
)  # fmt: skip
STATE_QUARTER_ROUND_OUTPUT = (
    0x879531E0, 0xC5ECF37D, 0xBDB886DC, 0xC9A62F8A,
    0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0xCFACAFD2,
    0xE46BEA80, 0xB00A5631, 0x974C541A, 0x359E9963,
    0x5C971061, 0xCCC07C79, 0x2098D9D6, 0x91DBD320,
)  # fmt: skip

# Section 2.3.2
BLOCK_NONCE = bytes.fromhex("000000090000004a00000000")
BLOCK_COUNTER = 1
BLOCK_INITIAL_STATE = (
    0x61707865, 0x3320646E, 0x79622D32, 0x6B206574,
    0x03020100, 0x07060504, 0x0B0A0908, 0x0F0E0D0C,
    0x13121110, 0x17161514, 0x1B1A1918, 0x1F1E1D1C,
    0x00000001, 0x09000000, 0x4A000000, 0x00000000,
)  # fmt: skip
BLOCK_OUTPUT = bytes.fromhex(
    "10f1e7e4d13b5915500fdd1fa32071c4"
    "c7d1f4c733c068030422aa9ac3d46c4e"
    "d2826446079faa0914c2d705d98b02a2"
    "b5129cd1de164eb9cbd083e8a2503c4e"
)

# Section 2.4.2
ENCRYPTION_NONCE = bytes.fromhex("000000000000004a00000000")
ENCRYPTION_COUNTER = 1
ENCRYPTION_PLAINTEXT = (
    b"Ladies and Gentlemen of the class of '99: If I could offer you "
    b"only one tip for the future, sunscreen would be it."
)
ENCRYPTION_CIPHERTEXT = bytes.fromhex(
    "6e2e359a2568f98041ba0728dd0d6981"
    "e97e7aec1d4360c20a27afccfd9fae0b"
    "f91b65c5524733ab8f593dabcd62b357"
    "1639d624e65152ab8f530c359f0861d8"
    "07ca0dbf500d6a6156a38e088a22b65e"
    "52bc514d16ccf806818ce91ab7793736"
    "5af90bbf74a35be6b40b8eedf2785e42"
    "874d"
)

# Appendix A.1, test vector 1: all-zero key, nonce and counter
ZERO_KEY_BLOCK = bytes.fromhex(
    "76b8e0ada0f13d90405d6ae55386bd28"
    "bdd219b8a08ded1aa836efcc8b770dc7"
    "da41597c5157488d7724e03fb8d84a37"
    "6a43b8f41518a11cc387b669b2ee6586"
)


@dataclass(frozen=True)
class VectorResult:
    """Outcome of one known-answer test."""

    name: str
    passed: bool


def _check_quarter_round() -> bool:
    x = list(QUARTER_ROUND_INPUT)
    quarter_round(x, 0, 1, 2, 3)
    return tuple(x) == QUARTER_ROUND_OUTPUT


def _check_state_quarter_round() -> bool:
    x = list(STATE_QUARTER_ROUND_INPUT)
    quarter_round(x, 2, 7, 8, 13)
    return tuple(x) == STATE_QUARTER_ROUND_OUTPUT


def _check_block() -> bool:
    state = ChaChaState.from_key(RFC_KEY, BLOCK_COUNTER, BLOCK_NONCE)
    if tuple(state.words) != BLOCK_INITIAL_STATE:
        return False
    return chacha20_block(state) == BLOCK_OUTPUT


def _check_encryption() -> bool:
    ciphertext = chacha20_xor(
        RFC_KEY, ENCRYPTION_COUNTER, ENCRYPTION_NONCE, ENCRYPTION_PLAINTEXT
    )
    return ciphertext == ENCRYPTION_CIPHERTEXT


def _check_zero_block() -> bool:
    state = ChaChaState.from_key(bytes(32), 0, bytes(12))
    return chacha20_block(state) == ZERO_KEY_BLOCK


SELF_TESTS = (
    ("quarter round (2.1.1)", _check_quarter_round),
    ("state quarter round (2.2.1)", _check_state_quarter_round),
    ("block function (2.3.2)", _check_block),
    ("encryption (2.4.2)", _check_encryption),
    ("zero key block (A.1 #1)", _check_zero_block),
)


def run_self_test() -> list[VectorResult]:
    """Run every known-answer test against the pure Python core."""
    results = []
    for name, check in SELF_TESTS:
        passed = check()
        if not passed:
            logger.warning("Known-answer test failed: %s", name)
        results.append(VectorResult(name, passed))
    return results
