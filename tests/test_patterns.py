"""
Pattern Helper Tests
"""

import pytest

from utilkit.errors import ArgumentError
from utilkit.helpers.patterns import (
    analyze_password_strength,
    calculate_password_strength_level,
    extract_matches,
    is_negative_number,
    is_positive_number,
    is_valid_credit_card,
    is_valid_email,
    is_valid_email_cn,
    is_valid_hex_color,
    is_valid_ipv4,
    is_valid_ipv6,
    is_valid_mobile_cn,
    is_valid_phone_us,
    is_valid_url,
    is_valid_username,
    matches_pattern,
    replace_all_matches,
    split_by_pattern,
)


def test_username():
    assert is_valid_username("user_01")
    assert not is_valid_username("abc")
    assert not is_valid_username("has space")


def test_email():
    assert is_valid_email("test@example.com")
    assert not is_valid_email("invalid.email")
    assert not is_valid_email("a@b.c")
    assert is_valid_email_cn("用户@example.cn")


def test_phone_numbers():
    assert is_valid_mobile_cn("13812345678")
    assert not is_valid_mobile_cn("12812345678")
    assert is_valid_phone_us("(555) 123-4567")
    assert is_valid_phone_us("+1 555.123.4567")
    assert not is_valid_phone_us("555-1234")


def test_signed_numbers():
    assert is_positive_number("3.14")
    assert is_positive_number(".5")
    assert not is_positive_number("-1")
    assert is_negative_number("-42")
    assert not is_negative_number("42")


def test_url():
    assert is_valid_url("https://example.com/path?q=1")
    assert not is_valid_url("ftp://example.com")
    assert not is_valid_url("https://exa mple.com")


def test_ip_addresses():
    assert is_valid_ipv4("192.168.0.1")
    assert not is_valid_ipv4("256.1.1.1")
    assert is_valid_ipv6("2001:0db8:85a3:0000:0000:8a2e:0370:7334")
    assert not is_valid_ipv6("2001:db8::1")


def test_hex_color_and_card():
    assert is_valid_hex_color("#fff")
    assert is_valid_hex_color("#A1B2C3")
    assert not is_valid_hex_color("#abcd")
    assert is_valid_credit_card("4111111111111111")
    assert not is_valid_credit_card("1234567890123456")


def test_password_strength():
    strength = analyze_password_strength("Passw0rd!")

    assert strength.min_length and strength.has_special_char
    assert strength.score == 5
    assert calculate_password_strength_level("Passw0rd!") == 4
    assert calculate_password_strength_level("password") == 1
    assert calculate_password_strength_level("Pa1!") == 0


def test_regex_helpers():
    assert extract_matches("a1b22c333", r"[0-9]+") == ["1", "22", "333"]
    assert replace_all_matches("2024-01-31", r"(\d+)-(\d+)-(\d+)", r"\3/\2/\1") == "31/01/2024"
    assert split_by_pattern("a, b;c", r"[,;]\s*") == ["a", "b", "c"]
    assert matches_pattern("hello world", r"wor")
    assert not matches_pattern("hello", r"^world")


def test_invalid_pattern():
    with pytest.raises(ArgumentError):
        extract_matches("text", "(unclosed")
