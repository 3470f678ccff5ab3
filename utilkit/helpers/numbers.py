"""
utilkit Number Helpers
======================

Lenient number parsing, fixed/exponential formatting, interpolation
and random selection.

Parsing follows the familiar browser rules: leading whitespace is
ignored and the longest valid prefix wins, so ``parse_float("42.5px")``
is ``42.5``.
"""

from __future__ import annotations

import math
import random
import re
import string
from decimal import Decimal
from typing import Optional, Sequence, TypeVar, Union

from utilkit.errors import ArgumentError, ParseError


T = TypeVar("T")
Number = Union[int, float]

MAX_SAFE_INTEGER = 2 ** 53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_DIGITS = string.digits + string.ascii_lowercase


# =============================================================================
# Predicates
# =============================================================================

def is_finite(n: Number) -> bool:
    return math.isfinite(n)


def is_nan(n: Number) -> bool:
    return isinstance(n, float) and math.isnan(n)


def is_integer(n: Number) -> bool:
    """True for finite values without a fractional part (``5.0`` included)."""
    return math.isfinite(n) and float(n).is_integer()


def is_safe_integer(n: Number) -> bool:
    return is_integer(n) and abs(n) <= MAX_SAFE_INTEGER


# =============================================================================
# Parsing
# =============================================================================

def parse_float(text: str) -> float:
    """
    Parse the longest numeric prefix of text.

    Raises:
        ParseError: If no number starts the text

    Example:
        >>> parse_float("  1E+5 apples")
        100000.0
    """
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        raise ParseError(text, "number")
    return float(match.group(0))


def parse_int(text: str, radix: int = 10) -> int:
    """
    Parse the longest run of valid digits in the given radix.

    Args:
        text: Input text, optionally signed
        radix: Base between 2 and 36

    Raises:
        ArgumentError: If radix is out of range
        ParseError: If no valid digit starts the text

    Example:
        >>> parse_int("ff; rest", 16)
        255
    """
    if not 2 <= radix <= 36:
        raise ArgumentError("Radix must be between 2 and 36")

    trimmed = text.strip()
    sign = 1
    start = 0

    if trimmed[:1] in ("+", "-"):
        sign = -1 if trimmed[0] == "-" else 1
        start = 1

    valid = _DIGITS[:radix]
    end = start
    while end < len(trimmed) and trimmed[end].lower() in valid:
        end += 1

    if end == start:
        raise ParseError(text, f"base-{radix} digits", position=start)

    return sign * int(trimmed[start:end], radix)


# =============================================================================
# Formatting
# =============================================================================

def _exponent_notation(formatted: str) -> str:
    """Rewrite ``1.5e+03`` as ``1.5e+3``."""
    mantissa, _, exponent = formatted.partition("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"


def _shortest(n: float) -> str:
    if float(n).is_integer() and abs(n) <= MAX_SAFE_INTEGER:
        return str(int(n))
    return repr(float(n))


def to_fixed(n: Number, digits: int = 0) -> str:
    """
    Format with a fixed number of decimals.

    Example:
        >>> to_fixed(3.14159, 2)
        '3.14'
    """
    if not 0 <= digits <= 100:
        raise ArgumentError("digits must be between 0 and 100")
    return f"{n:.{digits}f}"


def to_exponential(n: Number, fraction_digits: Optional[int] = None) -> str:
    """
    Format in exponential notation.

    Without ``fraction_digits`` as many digits as needed are used.

    Example:
        >>> to_exponential(12345, 2)
        '1.23e+4'
    """
    if not math.isfinite(n):
        return _shortest(n)

    if fraction_digits is None:
        digits = Decimal(repr(float(n))).normalize().as_tuple().digits
        fraction_digits = max(len(digits) - 1, 0)
    elif not 0 <= fraction_digits <= 100:
        raise ArgumentError("fraction_digits must be between 0 and 100")

    return _exponent_notation(f"{n:.{fraction_digits}e}")


def to_precision(n: Number, precision: Optional[int] = None) -> str:
    """
    Format with a number of significant digits.

    Exponential notation is used when the exponent is below -6 or not
    smaller than the precision.

    Example:
        >>> to_precision(123.456, 4)
        '123.5'
        >>> to_precision(123456, 2)
        '1.2e+5'
    """
    if precision is None or not math.isfinite(n):
        return _shortest(n)

    if not 1 <= precision <= 100:
        raise ArgumentError("precision must be between 1 and 100")

    rounded = f"{n:.{precision - 1}e}"
    exponent = int(rounded.partition("e")[2])

    if exponent < -6 or exponent >= precision:
        return _exponent_notation(rounded)

    return f"{n:.{precision - exponent - 1}f}"


# =============================================================================
# Interpolation
# =============================================================================

def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """
    Constrain value to ``[minimum, maximum]``.

    Raises:
        ArgumentError: If minimum is greater than maximum
    """
    if minimum > maximum:
        raise ArgumentError("minimum must not be greater than maximum")
    return max(minimum, min(value, maximum))


def lerp(start: Number, end: Number, t: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * t


def map_range(
    value: Number,
    in_min: Number,
    in_max: Number,
    out_min: Number,
    out_max: Number,
) -> float:
    """
    Re-map value from one range onto another.

    Example:
        >>> map_range(5, 0, 10, 0, 100)
        50.0
    """
    if in_max == in_min:
        raise ArgumentError("input range must not be empty")
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


# =============================================================================
# Random
# =============================================================================

def random_int(start: int, end: int) -> int:
    """
    Random integer in ``[start, end)``.

    Raises:
        ArgumentError: If start is not less than end
    """
    if start >= end:
        raise ArgumentError("start should be less than end")
    return random.randrange(start, end)


def random_int_max(maximum: int) -> int:
    """Random integer in ``[0, maximum)``."""
    if maximum <= 0:
        raise ArgumentError("max should be greater than 0")
    return random_int(0, maximum)


def random_item(items: Sequence[T]) -> T:
    """
    Random element of a non-empty sequence.

    Raises:
        ArgumentError: If items is empty
    """
    if not items:
        raise ArgumentError("array should not be empty")
    return random.choice(items)
