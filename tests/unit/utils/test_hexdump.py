"""Tests for the hex dump formatter."""

from __future__ import annotations

import logging

import pytest

from ccchacha.exceptions import ValidationError
from ccchacha.utils.hexdump import dump_hex, format_hex

pytestmark = [pytest.mark.unit]


def test_format_whole_buffer():
    assert format_hex(b"\x00\x01\xab\xff") == "00 01 ab ff"


def test_format_range():
    data = bytes(range(10))
    assert format_hex(data, 2, 5) == "02 03 04"
    assert format_hex(data, 8) == "08 09"


def test_format_range_uses_slice_semantics():
    data = bytes(range(4))
    assert format_hex(data, 3, 100) == "03"
    assert format_hex(data, 5, 10) == ""
    assert format_hex(data, -2) == "02 03"


def test_format_none_buffer():
    assert format_hex(None) == "NULL"


def test_format_empty():
    assert format_hex(b"") == ""


def test_format_with_width():
    data = bytes(range(20))
    lines = format_hex(data, width=8).splitlines()
    assert lines == [
        "00 01 02 03 04 05 06 07",
        "08 09 0a 0b 0c 0d 0e 0f",
        "10 11 12 13",
    ]


def test_format_accepts_bytearray_and_memoryview():
    assert format_hex(bytearray(b"\x10\x20")) == "10 20"
    assert format_hex(memoryview(b"\x10\x20\x30"), 1) == "20 30"


def test_invalid_width():
    with pytest.raises(ValidationError):
        format_hex(b"\x00", width=0)


def test_dump_hex_writes_to_sink():
    lines = []
    dump_hex(b"\xde\xad\xbe\xef", 1, 3, sink=lines.append)
    assert lines == ["ad be"]


def test_dump_hex_to_logger(caplog):
    logger = logging.getLogger("ccchacha.test.hexdump")
    with caplog.at_level(logging.DEBUG, logger="ccchacha.test.hexdump"):
        dump_hex(b"\x01\x02", sink=logger.debug)
    assert "01 02" in caplog.text
