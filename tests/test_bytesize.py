"""
Byte Size Tests
"""

import pytest

from utilkit.errors import ArgumentError, ParseError
from utilkit.helpers.bytesize import (
    ByteUnit,
    Bytes,
    BytesOptions,
    format_bytes,
    parse_bytes,
)


def test_unit_multipliers():
    assert ByteUnit.B.multiplier == 1
    assert ByteUnit.KB.multiplier == 1024
    assert ByteUnit.PB.multiplier == 1 << 50
    assert str(ByteUnit.MB) == "MB"
    assert ByteUnit.parse("gb") is ByteUnit.GB

    with pytest.raises(ArgumentError):
        ByteUnit.parse("XB")


@pytest.mark.parametrize("value, expected", [
    (0, "0B"),
    (512, "512B"),
    (1024, "1KB"),
    (1536, "1.5KB"),
    (536870912, "512MB"),
    (1 << 40, "1TB"),
])
def test_format_auto_unit(value, expected):
    assert format_bytes(value) == expected


def test_format_options():
    assert format_bytes(1234567, BytesOptions(unit=ByteUnit.B, thousands_separator=",")) == "1,234,567B"
    assert format_bytes(1048576, BytesOptions(decimal_places=3, fixed_decimals=True)) == "1.000MB"
    assert format_bytes(1024, BytesOptions(unit_separator=" ")) == "1 KB"
    assert format_bytes(1000, BytesOptions(decimal_places=1)) == "1000B"
    assert format_bytes(1100, BytesOptions(decimal_places=1)) == "1.1KB"


def test_format_negative_rejected():
    with pytest.raises(ArgumentError):
        Bytes().format(-1)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_format_non_finite_rejected(value):
    with pytest.raises(ArgumentError):
        format_bytes(value)


@pytest.mark.parametrize("text, expected", [
    ("1024", 1024),
    ("1.5KB", 1536),
    ("1 kb", 1024),
    ("2MB", 2 * 1024 * 1024),
    ("10b", 10),
    ("  3GB  ", 3 * 1024 ** 3),
    ("12.9", 12),
])
def test_parse(text, expected):
    assert parse_bytes(text) == expected


@pytest.mark.parametrize("text", ["1XB", "invalid", "", "-5", "-1KB", "1e400", "1" + "0" * 400 + "PB"])
def test_parse_errors(text):
    with pytest.raises(ParseError):
        parse_bytes(text)
