"""
utilkit Language Helpers
========================

Value inspection predicates.
"""

from __future__ import annotations

from typing import Any, Sized


def is_empty(value: Any) -> bool:
    """
    True for None and for empty strings or containers.

    Example:
        >>> is_empty(None), is_empty(""), is_empty([0])
        (True, True, False)
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_zero(value: Any) -> bool:
    return value == 0


def get_type_name(value: Any) -> str:
    """
    Qualified type name; builtins are not prefixed.

    Example:
        >>> get_type_name(1.5)
        'float'
    """
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def is_numeric(text: str) -> bool:
    """Non-empty and ASCII digits only."""
    return bool(text) and text.isascii() and text.isdigit()


def is_alphabetic(text: str) -> bool:
    return text.isalpha()


def is_alphanumeric(text: str) -> bool:
    return text.isalnum()


def is_identifier(text: str) -> bool:
    """
    Letter or underscore followed by letters, digits or underscores.

    Example:
        >>> is_identifier("_private1"), is_identifier("1st")
        (True, False)
    """
    if not text:
        return False
    head, rest = text[0], text[1:]
    if not (head.isalpha() or head == "_"):
        return False
    return all(c.isalnum() or c == "_" for c in rest)
