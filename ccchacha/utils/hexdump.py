"""Hexadecimal rendering of byte ranges for debugging.

Formatting is pure; writing the text somewhere is left to a caller-chosen
sink such as ``logger.debug``, ``print`` or ``Console.print``.
"""

from __future__ import annotations

from typing import Callable

from ccchacha.exceptions import ValidationError

BytesLike = bytes | bytearray | memoryview


def format_hex(
    buffer: BytesLike | None,
    start: int = 0,
    end: int | None = None,
    *,
    width: int | None = None,
) -> str:
    """Render ``buffer[start:end]`` as space separated lowercase hex pairs.

    Args:
        buffer: Bytes to render; ``None`` renders as ``"NULL"``
        start: First index, with slice semantics
        end: Stop index, with slice semantics; ``None`` means the end
        width: Bytes per line; ``None`` keeps everything on one line

    """
    if buffer is None:
        return "NULL"
    if width is not None and width < 1:
        msg = f"width must be positive, got {width}"
        raise ValidationError(msg)

    data = bytes(memoryview(buffer).cast("B")[start:end])
    if width is None:
        return data.hex(" ")
    return "\n".join(
        data[i : i + width].hex(" ") for i in range(0, len(data), width)
    )


def dump_hex(
    buffer: BytesLike | None,
    start: int = 0,
    end: int | None = None,
    sink: Callable[[str], object] = print,
    *,
    width: int | None = None,
) -> None:
    """Send ``format_hex`` output for the range to ``sink``."""
    sink(format_hex(buffer, start, end, width=width))
