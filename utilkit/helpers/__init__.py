"""
utilkit Helpers Package
=======================

Pure helper functions: strings, sequences, dicts, numbers, byte sizes,
validation patterns and value predicates.
"""

from __future__ import annotations

from utilkit.helpers.arrays import (
    chunk,
    count_by,
    diff,
    find,
    find_index,
    first,
    flatten,
    fork,
    last,
    max_by,
    min_by,
    range_list,
    shuffle,
    sum_by,
    unique,
)
from utilkit.helpers.bytesize import (
    ByteUnit,
    Bytes,
    BytesOptions,
    format_bytes,
    parse_bytes,
)
from utilkit.helpers.lang import (
    get_type_name,
    is_alphabetic,
    is_alphanumeric,
    is_empty,
    is_identifier,
    is_numeric,
    is_zero,
)
from utilkit.helpers.numbers import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
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
from utilkit.helpers.objects import (
    get_nested,
    invert,
    map_keys,
    map_values,
    merge,
    omit,
    omit_by,
    pick,
    pick_by,
    remove_non_serializable_props,
    safe_json_stringify,
    set_nested,
)
from utilkit.helpers.patterns import (
    PasswordStrength,
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
from utilkit.helpers.strings import (
    camel_case,
    capitalize,
    dash_case,
    fuzzy_match,
    gen_all_cases_combination,
    generate_base62_code,
    generate_merge_paths,
    generate_uuid,
    get_file_ext,
    kebab_case,
    parse_template,
    pascal_case,
    remove_prefix,
    slugify,
    snake_case,
    split_words,
    trim,
    trim_end,
    trim_start,
    truncate,
)

__all__ = [
    # String helpers
    "split_words",
    "capitalize",
    "camel_case",
    "snake_case",
    "dash_case",
    "kebab_case",
    "pascal_case",
    "gen_all_cases_combination",
    "generate_uuid",
    "generate_base62_code",
    "fuzzy_match",
    "get_file_ext",
    "parse_template",
    "trim",
    "trim_start",
    "trim_end",
    "remove_prefix",
    "generate_merge_paths",
    "slugify",
    "truncate",
    # Sequence helpers
    "range_list",
    "chunk",
    "first",
    "last",
    "count_by",
    "diff",
    "fork",
    "max_by",
    "min_by",
    "sum_by",
    "unique",
    "shuffle",
    "find",
    "find_index",
    "flatten",
    # Dict helpers
    "pick",
    "pick_by",
    "omit",
    "omit_by",
    "map_keys",
    "map_values",
    "merge",
    "invert",
    "remove_non_serializable_props",
    "safe_json_stringify",
    "get_nested",
    "set_nested",
    # Number helpers
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "is_finite",
    "is_nan",
    "is_integer",
    "is_safe_integer",
    "parse_float",
    "parse_int",
    "to_fixed",
    "to_exponential",
    "to_precision",
    "clamp",
    "lerp",
    "map_range",
    "random_int",
    "random_int_max",
    "random_item",
    # Byte sizes
    "ByteUnit",
    "Bytes",
    "BytesOptions",
    "format_bytes",
    "parse_bytes",
    # Patterns
    "is_valid_username",
    "is_valid_email",
    "is_valid_email_cn",
    "is_valid_mobile_cn",
    "is_valid_phone_us",
    "is_positive_number",
    "is_negative_number",
    "is_valid_url",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_hex_color",
    "is_valid_credit_card",
    "PasswordStrength",
    "analyze_password_strength",
    "calculate_password_strength_level",
    "extract_matches",
    "replace_all_matches",
    "split_by_pattern",
    "matches_pattern",
    # Value predicates
    "is_empty",
    "is_zero",
    "get_type_name",
    "is_numeric",
    "is_alphabetic",
    "is_alphanumeric",
    "is_identifier",
]
