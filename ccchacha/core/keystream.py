"""ChaCha20 counter-mode encryption (RFC 7539 section 2.4).

Encryption and decryption are the same operation: the input is XORed
with the keystream generated from (key, nonce, counter).
"""

from __future__ import annotations

import logging
from typing import Union

from ccchacha.core.bits import MASK32
from ccchacha.core.block import BLOCK_SIZE, DEFAULT_ROUNDS, chacha20_block, validate_rounds
from ccchacha.core.state import ChaChaState, validate_counter, validate_key, validate_nonce
from ccchacha.exceptions import (
    BufferLengthMismatchError,
    CounterOverflowError,
    ValidationError,
)

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

# Number of blocks a single (key, nonce) pair can produce
MAX_BLOCKS = MASK32 + 1


def blocks_required(length: int) -> int:
    """Number of 64-byte blocks needed to cover ``length`` bytes."""
    return -(-length // BLOCK_SIZE)


def check_counter_range(counter: int, length: int) -> None:
    """Ensure ``length`` bytes starting at block ``counter`` stay in 32 bits.

    Raises:
        CounterOverflowError: If the counter is out of range or the stream
            would need blocks past 2**32 - 1

    """
    validate_counter(counter)
    needed = blocks_required(length)
    if counter + needed > MAX_BLOCKS:
        msg = (
            f"Input of {length} bytes needs {needed} blocks from counter {counter}, "
            "which exceeds the 32-bit block counter"
        )
        raise CounterOverflowError(msg, {"counter": counter, "blocks": needed})


def _check_output(out: WritableBuffer | None, length: int) -> None:
    if out is not None and len(out) < length:
        msg = f"Output buffer holds {len(out)} bytes, input is {length} bytes"
        raise BufferLengthMismatchError(
            msg, {"output_length": len(out), "input_length": length}
        )


def xor_keystream(
    state: ChaChaState,
    data: BytesLike,
    out: WritableBuffer | None = None,
    rounds: int = DEFAULT_ROUNDS,
) -> WritableBuffer:
    """XOR ``data`` with the keystream of ``state`` and advance its counter.

    One block is generated per 64-byte chunk; the final chunk uses only
    as many keystream bytes as remain. ``state.counter`` ends up
    ``ceil(len(data) / 64)`` past its starting value.

    Returns:
        ``out`` if given, otherwise a new bytearray of ``len(data)`` bytes

    """
    validate_rounds(rounds)
    view = memoryview(data).cast("B")
    length = len(view)
    _check_output(out, length)
    if out is None:
        out = bytearray(length)

    for offset in range(0, length, BLOCK_SIZE):
        block = chacha20_block(state, rounds)
        state.advance()

        end = min(offset + BLOCK_SIZE, length)
        size = end - offset
        chunk = int.from_bytes(view[offset:end], "little")
        stream = int.from_bytes(block[:size], "little")
        out[offset:end] = (chunk ^ stream).to_bytes(size, "little")

    return out


def chacha20_xor(
    key: bytes,
    counter: int,
    nonce: bytes,
    data: BytesLike,
    *,
    out: WritableBuffer | None = None,
    rounds: int = DEFAULT_ROUNDS,
    wipe: bool = True,
) -> bytes | WritableBuffer:
    """Encrypt or decrypt ``data`` with ChaCha20.

    Args:
        key: 32-byte key
        counter: Initial 32-bit block counter
        nonce: 12-byte nonce
        data: Plaintext or ciphertext
        out: Optional buffer receiving the result; may be ``data`` itself
        rounds: Round count (20 for ChaCha20)
        wipe: Zero the working state once the call returns

    Returns:
        ``out`` when given, otherwise the result as bytes

    Raises:
        InvalidKeyLengthError: If key is not 32 bytes
        InvalidNonceLengthError: If nonce is not 12 bytes
        BufferLengthMismatchError: If ``out`` is shorter than ``data``
        CounterOverflowError: If the input needs blocks past the 32-bit counter
        InvalidRoundCountError: If ``rounds`` is not a positive even number

    """
    validate_key(key)
    validate_nonce(nonce)
    validate_rounds(rounds)
    length = len(memoryview(data).cast("B"))
    check_counter_range(counter, length)
    _check_output(out, length)

    state = ChaChaState.from_key(key, counter, nonce)
    logger.debug(
        "ChaCha%d XOR of %d bytes (%d blocks) from counter %d",
        rounds,
        length,
        blocks_required(length),
        counter,
    )
    try:
        result = xor_keystream(state, data, out, rounds)
    finally:
        if wipe:
            state.wipe()

    if out is None:
        return bytes(result)
    return result


def keystream(
    key: bytes,
    counter: int,
    nonce: bytes,
    length: int,
    rounds: int = DEFAULT_ROUNDS,
) -> bytes:
    """Return ``length`` raw keystream bytes."""
    if length < 0:
        msg = f"Keystream length must be non-negative, got {length}"
        raise ValidationError(msg)
    return bytes(chacha20_xor(key, counter, nonce, bytes(length), rounds=rounds))
