"""
utilkit String Helpers
======================

Case conversion, trimming, templating and random identifiers.
"""

from __future__ import annotations

import random
import re
import string
import uuid
from typing import Dict, List, Mapping, Optional, Sequence

from utilkit.errors import ArgumentError


BASE62_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits

WORD_DELIMITERS = frozenset(".-_")

DEFAULT_TEMPLATE_PATTERN = r"\{\{(.+?)\}\}"


# =============================================================================
# Case Conversion
# =============================================================================

def split_words(text: str) -> List[str]:
    """
    Split text into words.

    Whitespace, ``.``, ``-`` and ``_`` delimit words. An upper-case
    letter followed by a lower-case one starts a new word, so acronyms
    stay together.

    Example:
        >>> split_words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
    """
    words: List[str] = []
    current = ""

    for index, char in enumerate(text):
        if char.isspace() or char in WORD_DELIMITERS:
            if current:
                words.append(current)
                current = ""
            continue

        if char.isupper() and current:
            following = text[index + 1:index + 2]
            if following and following.islower():
                words.append(current)
                current = ""

        current += char

    if current:
        words.append(current)

    return words


def capitalize(text: str) -> str:
    """
    Upper-case the first character and lower-case the rest.

    Example:
        >>> capitalize("HELLO")
        'Hello'
    """
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Example:
        >>> camel_case("va va-VOOM")
        'vaVaVoom'
    """
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize(w) for w in words[1:])


def snake_case(text: str) -> str:
    """
    Convert text to snake_case.

    Example:
        >>> snake_case("helloWorld")
        'hello_world'
    """
    return "_".join(w.lower() for w in split_words(text))


def dash_case(text: str) -> str:
    """
    Convert text to dash-case.

    Example:
        >>> dash_case("helloWorld")
        'hello-world'
    """
    return "-".join(w.lower() for w in split_words(text))


kebab_case = dash_case


def pascal_case(text: str) -> str:
    """
    Convert text to PascalCase.

    Example:
        >>> pascal_case("hello_world")
        'HelloWorld'
    """
    return "".join(capitalize(w) for w in split_words(text))


def gen_all_cases_combination(text: str) -> List[str]:
    """
    Every upper/lower-case variant of the letters in text.

    Non-letters are kept as-is. Variants are ordered lower before upper,
    left to right.

    Example:
        >>> gen_all_cases_combination("mb")
        ['mb', 'mB', 'Mb', 'MB']
    """
    results = [""]

    for char in text:
        if char.isalpha():
            results = [
                prefix + variant
                for prefix in results
                for variant in (char.lower(), char.upper())
            ]
        else:
            results = [prefix + char for prefix in results]

    return results


# =============================================================================
# Identifiers
# =============================================================================

def generate_uuid() -> str:
    """Random UUID4 in canonical 36-character form."""
    return str(uuid.uuid4())


def generate_base62_code(length: int = 6) -> str:
    """
    Random code drawn from ``[A-Za-z0-9]``.

    Raises:
        ArgumentError: If length is not positive
    """
    if length <= 0:
        raise ArgumentError("Length must be greater than 0")

    return "".join(random.choice(BASE62_CHARS) for _ in range(length))


# =============================================================================
# Matching & Parsing
# =============================================================================

def fuzzy_match(search: str, target: str) -> bool:
    """Case-insensitive substring match."""
    return search.lower() in target.lower()


def get_file_ext(filename: str) -> str:
    """
    Extension after the last dot, or an empty string.

    Example:
        >>> get_file_ext("archive.tar.gz")
        'gz'
    """
    _, dot, ext = filename.rpartition(".")
    return ext if dot else ""


def parse_template(
    template: str,
    data: Mapping[str, str],
    pattern: Optional[str] = None,
) -> str:
    """
    Substitute placeholders in a template.

    Args:
        template: Template text
        data: Placeholder values
        pattern: Regex whose first group is the placeholder key

    Returns:
        Rendered text; unknown placeholders are left untouched

    Example:
        >>> parse_template("Hello {{name}}!", {"name": "World"})
        'Hello World!'
    """
    regex = re.compile(pattern or DEFAULT_TEMPLATE_PATTERN)

    def replace(match: "re.Match[str]") -> str:
        key = match.group(1)
        return str(data[key]) if key in data else match.group(0)

    return regex.sub(replace, template)


# =============================================================================
# Trimming
# =============================================================================

def trim(text: str, chars: Optional[str] = None) -> str:
    """
    Strip characters from both ends.

    Example:
        >>> trim("-!-hello-!-", "-!")
        'hello'
    """
    return text.strip(chars or " ")


def trim_start(text: str, chars: Optional[str] = None) -> str:
    return text.lstrip(chars or " ")


def trim_end(text: str, chars: Optional[str] = None) -> str:
    return text.rstrip(chars or " ")


def remove_prefix(text: str, prefix: str) -> str:
    """Remove prefix once if present."""
    if prefix and text.startswith(prefix):
        return text[len(prefix):]
    return text


def generate_merge_paths(branches: Sequence[str]) -> List[List[str]]:
    """
    Consecutive pairs of branches to merge in order.

    Example:
        >>> generate_merge_paths(["feature", "dev", "main"])
        [['feature', 'dev'], ['dev', 'main']]
    """
    return [[a, b] for a, b in zip(branches, branches[1:])]


# =============================================================================
# Formatting
# =============================================================================

_ACCENTS: Dict[str, str] = {
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "è": "e", "é": "e", "ê": "e", "ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o",
    "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "ñ": "n", "ç": "c",
}


def slugify(text: str, separator: str = "-") -> str:
    """
    Convert text to URL-safe slug.

    Args:
        text: Input text
        separator: Word separator

    Returns:
        Slugified text

    Example:
        >>> slugify("Héllo Wörld!")
        'hello-world'
    """
    text = text.lower()

    for old, new in _ACCENTS.items():
        text = text.replace(old, new)

    text = re.sub(r"[^a-z0-9]+", separator, text)

    return text.strip(separator)


def truncate(
    text: str,
    length: int,
    suffix: str = "...",
    word_boundary: bool = True,
) -> str:
    """
    Truncate text to specified length.

    Args:
        text: Input text
        length: Maximum length, suffix included
        suffix: Truncation indicator
        word_boundary: Break at word boundary

    Returns:
        Truncated text
    """
    if len(text) <= length:
        return text

    target_length = max(length - len(suffix), 0)
    truncated = text[:target_length]

    if word_boundary:
        last_space = truncated.rfind(" ")
        if last_space > 0:
            truncated = truncated[:last_space]
        return truncated.rstrip() + suffix

    return truncated + suffix
