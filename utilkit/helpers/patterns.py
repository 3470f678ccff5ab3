"""
utilkit Patterns
================

Precompiled validation patterns, password strength scoring and thin
regex helpers.

Every validator matches the whole string.

Example:
    >>> is_valid_email("dev@example.com")
    True
    >>> calculate_password_strength_level("Passw0rd!")
    4
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from utilkit.errors import ArgumentError


# =============================================================================
# Validation Patterns
# =============================================================================

USERNAME = re.compile(r"[a-zA-Z0-9_-]{4,16}")
EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
EMAIL_CN = re.compile(r"[A-Za-z0-9\u4e00-\u9fa5]+@[a-zA-Z0-9_-]+(\.[a-zA-Z0-9_-]+)+")
MOBILE_CN = re.compile(r"1[34578][0-9]{9}")
POSITIVE_NUMBER = re.compile(r"[0-9]*\.?[0-9]+")
NEGATIVE_NUMBER = re.compile(r"-[0-9]*\.?[0-9]+")
URL = re.compile(r"https?://[^\s/$.?#].[^\s]*")
IPV4 = re.compile(
    r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)
IPV6 = re.compile(r"(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")
HEX_COLOR = re.compile(r"#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
CREDIT_CARD = re.compile(
    r"(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13}"
    r"|3[0-9]{13}|6(?:011|5[0-9]{2})[0-9]{12})"
)
PHONE_US = re.compile(r"\+?1?[-.\s]?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})")


def _full(pattern: re.Pattern[str], text: str) -> bool:
    return pattern.fullmatch(text) is not None


def is_valid_username(text: str) -> bool:
    """4 to 16 letters, digits, underscores or dashes."""
    return _full(USERNAME, text)


def is_valid_email(text: str) -> bool:
    return _full(EMAIL, text)


def is_valid_email_cn(text: str) -> bool:
    """Email whose local part may contain CJK characters."""
    return _full(EMAIL_CN, text)


def is_valid_mobile_cn(text: str) -> bool:
    return _full(MOBILE_CN, text)


def is_valid_phone_us(text: str) -> bool:
    return _full(PHONE_US, text)


def is_positive_number(text: str) -> bool:
    return _full(POSITIVE_NUMBER, text)


def is_negative_number(text: str) -> bool:
    return _full(NEGATIVE_NUMBER, text)


def is_valid_url(text: str) -> bool:
    """http(s) URL without whitespace."""
    return _full(URL, text)


def is_valid_ipv4(text: str) -> bool:
    return _full(IPV4, text)


def is_valid_ipv6(text: str) -> bool:
    """Full (uncompressed) eight-group IPv6 address."""
    return _full(IPV6, text)


def is_valid_hex_color(text: str) -> bool:
    return _full(HEX_COLOR, text)


def is_valid_credit_card(text: str) -> bool:
    """Visa, MasterCard, Amex, Diners or Discover number without spaces."""
    return _full(CREDIT_CARD, text)


# =============================================================================
# Password Strength
# =============================================================================

MIN_PASSWORD_LENGTH = 8

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[!@#$%^&*()_+\-=\[\]{}|;':,.<>?]")


@dataclass(frozen=True)
class PasswordStrength:
    """Which strength rules a password satisfies."""

    min_length: bool
    has_lowercase: bool
    has_uppercase: bool
    has_digit: bool
    has_special_char: bool

    @property
    def score(self) -> int:
        """Number of satisfied rules (0 to 5)."""
        return sum((
            self.min_length,
            self.has_lowercase,
            self.has_uppercase,
            self.has_digit,
            self.has_special_char,
        ))


def analyze_password_strength(password: str) -> PasswordStrength:
    return PasswordStrength(
        min_length=len(password) >= MIN_PASSWORD_LENGTH,
        has_lowercase=_LOWERCASE.search(password) is not None,
        has_uppercase=_UPPERCASE.search(password) is not None,
        has_digit=_DIGIT.search(password) is not None,
        has_special_char=_SPECIAL.search(password) is not None,
    )


def calculate_password_strength_level(password: str) -> int:
    """
    Strength level from 0 to 4.

    Passwords shorter than the minimum length are always level 0;
    otherwise each character class present adds one.
    """
    strength = analyze_password_strength(password)
    if not strength.min_length:
        return 0
    return strength.score - 1


# =============================================================================
# Regex Helpers
# =============================================================================

def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ArgumentError(f"Invalid pattern {pattern!r}: {e}") from e


def extract_matches(text: str, pattern: str) -> List[str]:
    """All non-overlapping matches of pattern."""
    return [m.group(0) for m in _compile(pattern).finditer(text)]


def replace_all_matches(text: str, pattern: str, replacement: str) -> str:
    """
    Replace every match; ``replacement`` may use ``\\1`` group references.

    Example:
        >>> replace_all_matches("a1b22", r"[0-9]+", "#")
        'a#b#'
    """
    return _compile(pattern).sub(replacement, text)


def split_by_pattern(text: str, pattern: str) -> List[str]:
    return _compile(pattern).split(text)


def matches_pattern(text: str, pattern: str) -> bool:
    """True if pattern matches anywhere in text."""
    return _compile(pattern).search(text) is not None
