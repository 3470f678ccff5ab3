"""
utilkit Byte Sizes
==================

Human-readable byte sizes using binary (1024-based) units.

Example:
    >>> format_bytes(1536)
    '1.5KB'
    >>> parse_bytes("2 MB")
    2097152
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from utilkit.errors import ArgumentError, ParseError


_SIZE_PATTERN = re.compile(r"^([-+]?\d+(?:\.\d+)?)\s*(b|kb|mb|gb|tb|pb)?$", re.IGNORECASE)

_PLAIN_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")


class ByteUnit(Enum):
    """Byte units with their multipliers."""

    B = 1
    KB = 1 << 10
    MB = 1 << 20
    GB = 1 << 30
    TB = 1 << 40
    PB = 1 << 50

    @property
    def multiplier(self) -> int:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "ByteUnit":
        """
        Look up a unit by name, case-insensitively.

        Raises:
            ArgumentError: If the unit is unknown
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ArgumentError(f"Invalid unit: {text}") from None

    def __str__(self) -> str:
        return self.name


_UNITS_DESCENDING = sorted(ByteUnit, key=lambda u: u.multiplier, reverse=True)


@dataclass
class BytesOptions:
    """
    Formatting options.

    Attributes:
        unit: Fixed unit, or None to pick the largest unit not above the value
        decimal_places: Decimals to round to
        fixed_decimals: Keep trailing zeros
        thousands_separator: Separator between digit groups
        unit_separator: Text between number and unit
    """

    unit: Optional[ByteUnit] = None
    decimal_places: int = 2
    fixed_decimals: bool = False
    thousands_separator: str = ""
    unit_separator: str = ""


class Bytes:
    """Byte size parser and formatter."""

    def parse(self, text: str) -> int:
        """
        Parse a size like ``"1.5KB"`` or ``"1024"`` into bytes.

        Fractional byte counts are floored.

        Raises:
            ParseError: Malformed or negative input
        """
        value = text.strip()

        if _PLAIN_NUMBER.match(value):
            number = float(value)
            if not math.isfinite(number):
                raise ParseError(text, "finite size")
            if number < 0:
                raise ParseError(text, "non-negative size")
            return math.floor(number)

        match = _SIZE_PATTERN.match(value)
        if match is None:
            raise ParseError(text, "size such as '10KB'")

        number = float(match.group(1))
        if number < 0:
            raise ParseError(text, "non-negative size")

        unit = ByteUnit.parse(match.group(2) or "b")
        size = number * unit.multiplier
        if not math.isfinite(size):
            raise ParseError(text, "finite size")
        return math.floor(size)

    def format(self, value: Union[int, float], options: Optional[BytesOptions] = None) -> str:
        """
        Format a byte count.

        Raises:
            ArgumentError: If value is negative or not finite
        """
        if not math.isfinite(value):
            raise ArgumentError(f"Byte count must be finite, got {value}")
        if value < 0:
            raise ArgumentError("Byte count must not be negative")

        options = options or BytesOptions()
        unit = options.unit or self._pick_unit(value)

        text = f"{value / unit.multiplier:.{options.decimal_places}f}"

        if not options.fixed_decimals and "." in text:
            text = text.rstrip("0").rstrip(".")

        if options.thousands_separator:
            text = self._group_thousands(text, options.thousands_separator)

        return f"{text}{options.unit_separator}{unit}"

    def _pick_unit(self, value: Union[int, float]) -> ByteUnit:
        for unit in _UNITS_DESCENDING:
            if value >= unit.multiplier:
                return unit
        return ByteUnit.B

    def _group_thousands(self, text: str, separator: str) -> str:
        integer, dot, fraction = text.partition(".")
        grouped = f"{int(integer):,}".replace(",", separator)
        return f"{grouped}{dot}{fraction}"


_bytes = Bytes()


def format_bytes(value: Union[int, float], options: Optional[BytesOptions] = None) -> str:
    """Format a byte count with the shared formatter."""
    return _bytes.format(value, options)


def parse_bytes(text: str) -> int:
    """Parse a size string with the shared parser."""
    return _bytes.parse(text)
