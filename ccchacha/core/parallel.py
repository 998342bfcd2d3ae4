"""Parallel keystream generation.

Block ``i`` of a stream depends only on (key, nonce, counter + i), so the
input can be split into block-aligned segments that are encrypted
independently and written into disjoint regions of the output.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, ThreadPoolExecutor

from ccchacha.core.block import BLOCK_SIZE, DEFAULT_ROUNDS, validate_rounds
from ccchacha.core.keystream import (
    BytesLike,
    blocks_required,
    chacha20_xor,
    check_counter_range,
)
from ccchacha.core.state import validate_key, validate_nonce
from ccchacha.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BLOCKS_PER_TASK = 256


def _xor_segment(
    key: bytes, counter: int, nonce: bytes, segment: bytes, rounds: int
) -> bytes:
    # Module level so process pools can pickle it
    return bytes(chacha20_xor(key, counter, nonce, segment, rounds=rounds))


def parallel_chacha20_xor(
    key: bytes,
    counter: int,
    nonce: bytes,
    data: BytesLike,
    *,
    workers: int | None = None,
    blocks_per_task: int = DEFAULT_BLOCKS_PER_TASK,
    executor: Executor | None = None,
    rounds: int = DEFAULT_ROUNDS,
) -> bytes:
    """Encrypt or decrypt ``data`` across a pool of workers.

    The result is byte-identical to :func:`chacha20_xor` with the same
    arguments.

    Args:
        key: 32-byte key
        counter: Initial 32-bit block counter
        nonce: 12-byte nonce
        data: Plaintext or ciphertext
        workers: Thread count for the internal pool (ignored with ``executor``)
        blocks_per_task: 64-byte blocks per submitted segment
        executor: Caller-owned executor; it is not shut down here
        rounds: Round count

    """
    validate_key(key)
    validate_nonce(nonce)
    validate_rounds(rounds)
    if blocks_per_task < 1:
        msg = f"blocks_per_task must be positive, got {blocks_per_task}"
        raise ValidationError(msg)

    view = memoryview(data).cast("B")
    length = len(view)
    check_counter_range(counter, length)

    segment_size = blocks_per_task * BLOCK_SIZE
    offsets = range(0, length, segment_size)
    if len(offsets) <= 1:
        return bytes(chacha20_xor(key, counter, nonce, view, rounds=rounds))

    output = bytearray(length)

    own_executor = executor is None
    if own_executor:
        max_workers = workers or min(len(offsets), os.cpu_count() or 1)
        executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="chacha-xor"
        )

    logger.debug(
        "Parallel ChaCha%d XOR of %d bytes in %d segments (%d blocks)",
        rounds,
        length,
        len(offsets),
        blocks_required(length),
    )
    try:
        futures = [
            (
                offset,
                executor.submit(
                    _xor_segment,
                    key,
                    counter + offset // BLOCK_SIZE,
                    nonce,
                    bytes(view[offset : offset + segment_size]),
                    rounds,
                ),
            )
            for offset in offsets
        ]
        for offset, future in futures:
            segment = future.result()
            output[offset : offset + len(segment)] = segment
    finally:
        if own_executor:
            executor.shutdown(wait=True)

    return bytes(output)
