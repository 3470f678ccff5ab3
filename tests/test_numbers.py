"""
Number Helper Tests
"""

import math

import pytest

from utilkit.errors import ArgumentError, ParseError
from utilkit.helpers.numbers import (
    MAX_SAFE_INTEGER,
    clamp,
    is_finite,
    is_integer,
    is_nan,
    is_safe_integer,
    lerp,
    map_range,
    parse_float,
    parse_int,
    random_int,
    random_int_max,
    random_item,
    to_exponential,
    to_fixed,
    to_precision,
)


def test_predicates():
    assert is_finite(1.5)
    assert not is_finite(math.inf)
    assert is_nan(math.nan)
    assert not is_nan(1)
    assert is_integer(5.0)
    assert not is_integer(5.5)
    assert not is_integer(math.inf)
    assert is_safe_integer(MAX_SAFE_INTEGER)
    assert not is_safe_integer(MAX_SAFE_INTEGER + 1)


def test_parse_float_prefix():
    """The longest numeric prefix is parsed."""
    assert parse_float("42.5abc") == 42.5
    assert parse_float("  -3.25 ") == -3.25
    assert parse_float("1E+5") == 100000.0
    assert parse_float(".5") == 0.5
    assert parse_float("7.") == 7.0


@pytest.mark.parametrize("text", ["", "   ", "+", "-", "abc"])
def test_parse_float_errors(text):
    with pytest.raises(ParseError) as exc_info:
        parse_float(text)

    assert exc_info.value.input == text


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("  -17xyz") == -17
    assert parse_int("ff; rest", 16) == 255
    assert parse_int("FF", 16) == 255
    assert parse_int("1012", 2) == 5
    assert parse_int("z", 36) == 35


def test_parse_int_errors():
    with pytest.raises(ParseError) as exc_info:
        parse_int("-abc")
    assert exc_info.value.position == 1

    with pytest.raises(ParseError):
        parse_int("")
    with pytest.raises(ArgumentError):
        parse_int("10", 1)
    with pytest.raises(ArgumentError):
        parse_int("10", 37)


def test_to_fixed():
    assert to_fixed(3.14159, 2) == "3.14"
    assert to_fixed(2.5) == "2"
    assert to_fixed(1, 3) == "1.000"

    with pytest.raises(ArgumentError):
        to_fixed(1, -1)


def test_to_exponential():
    assert to_exponential(12345, 2) == "1.23e+4"
    assert to_exponential(12345) == "1.2345e+4"
    assert to_exponential(100) == "1e+2"
    assert to_exponential(0.00032, 1) == "3.2e-4"


def test_to_precision():
    assert to_precision(123.456, 4) == "123.5"
    assert to_precision(123456, 2) == "1.2e+5"
    assert to_precision(0.000123, 2) == "0.00012"
    assert to_precision(1.5) == "1.5"
    assert to_precision(42.0) == "42"

    with pytest.raises(ArgumentError):
        to_precision(1, 0)


def test_clamp():
    assert clamp(15, 0, 10) == 10
    assert clamp(-5, 0, 10) == 0
    assert clamp(5, 0, 10) == 5

    with pytest.raises(ArgumentError):
        clamp(5, 10, 0)


def test_lerp_and_map_range():
    assert lerp(0, 10, 0.5) == 5
    assert lerp(10, 20, 0) == 10
    assert map_range(5, 0, 10, 0, 100) == 50.0
    assert map_range(0, 0, 10, 100, 200) == 100.0

    with pytest.raises(ArgumentError):
        map_range(1, 3, 3, 0, 1)


def test_random_int():
    values = {random_int(5, 8) for _ in range(200)}

    assert values <= {5, 6, 7}
    assert all(0 <= random_int_max(3) < 3 for _ in range(50))

    with pytest.raises(ArgumentError):
        random_int(3, 3)
    with pytest.raises(ArgumentError):
        random_int_max(0)


def test_random_item():
    items = ["a", "b", "c"]

    assert random_item(items) in items

    with pytest.raises(ArgumentError):
        random_item([])
