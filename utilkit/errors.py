"""
utilkit Errors
==============

Exception hierarchy shared by every utilkit module.

All library errors derive from ``UtilsError`` so callers can catch
the whole family with a single ``except`` clause:

    try:
        size = parse_bytes(text)
    except UtilsError as e:
        logger.warning("Bad input", error=str(e))
"""

from __future__ import annotations

from typing import Optional


class UtilsError(Exception):
    """Base utilkit error."""
    pass


class ArgumentError(UtilsError):
    """Invalid function argument."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Argument error: {message}")


class ValidationError(UtilsError):
    """
    Data validation failure.

    Attributes:
        field: Field that failed validation
        message: Failure description
        value: Offending value, if known
    """

    def __init__(
        self,
        field: str,
        message: str,
        value: Optional[str] = None,
    ):
        self.field = field
        self.message = message
        self.value = value

        text = f"Validation error for field '{field}': {message}"
        if value is not None:
            text += f" (value: '{value}')"
        super().__init__(text)


class ConfigError(UtilsError):
    """Configuration or environment problem."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"Configuration error for key '{key}': {message}")


class ParseError(UtilsError):
    """
    Input could not be parsed.

    Attributes:
        input: Text that failed to parse
        expected: What the parser expected
        position: Offset of the failure, if known
    """

    def __init__(
        self,
        input: str,
        expected: str,
        position: Optional[int] = None,
    ):
        self.input = input
        self.expected = expected
        self.position = position

        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Parse error{where}: expected '{expected}', got '{input}'")


# =============================================================================
# Factories
# =============================================================================

def argument_error(message: str) -> ArgumentError:
    """Create an argument error."""
    return ArgumentError(message)


def validation_error(
    field: str,
    message: str,
    value: Optional[str] = None,
) -> ValidationError:
    """Create a validation error."""
    return ValidationError(field, message, value)


def config_error(key: str, message: str) -> ConfigError:
    """Create a configuration error."""
    return ConfigError(key, message)


def parse_error(
    input: str,
    expected: str,
    position: Optional[int] = None,
) -> ParseError:
    """Create a parse error."""
    return ParseError(input, expected, position)
