"""
utilkit Object Helpers
======================

Dictionary selection, transformation and JSON-safe serialization.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from utilkit.errors import ArgumentError


JSON_SCALARS = (str, int, float, bool, type(None))


# =============================================================================
# Selection
# =============================================================================

def pick(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    Copy of obj restricted to keys.

    Example:
        >>> pick({"name": "Ada", "age": 36, "city": "London"}, ["name", "age"])
        {'name': 'Ada', 'age': 36}
    """
    wanted = set(keys)
    return {k: v for k, v in obj.items() if k in wanted}


def pick_by(obj: Mapping[str, Any], predicate: Callable[[Any], bool]) -> Dict[str, Any]:
    """Copy of obj keeping entries whose value satisfies predicate."""
    return {k: v for k, v in obj.items() if predicate(v)}


def omit(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    unwanted = set(keys)
    return {k: v for k, v in obj.items() if k not in unwanted}


def omit_by(obj: Mapping[str, Any], predicate: Callable[[Any], bool]) -> Dict[str, Any]:
    return {k: v for k, v in obj.items() if not predicate(v)}


# =============================================================================
# Transformation
# =============================================================================

def map_keys(obj: Mapping[str, Any], mapper: Callable[[str], str]) -> Dict[str, Any]:
    """
    Rename every key through mapper.

    Later entries win when two keys map to the same name.
    """
    return {mapper(k): v for k, v in obj.items()}


def map_values(obj: Mapping[str, Any], mapper: Callable[[Any], Any]) -> Dict[str, Any]:
    return {k: mapper(v) for k, v in obj.items()}


def merge(target: Dict[str, Any], *sources: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge sources into target in place.

    Nested dicts are merged recursively; any other value replaces the
    target's.

    Returns:
        The target dict

    Example:
        >>> merge({"a": 1, "b": {"x": 1}}, {"b": {"y": 2}}, {"c": 3})
        {'a': 1, 'b': {'x': 1, 'y': 2}, 'c': 3}
    """
    for source in sources:
        for key, value in source.items():
            current = target.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                merge(current, value)
            else:
                target[key] = value
    return target


def _invert_key(value: Any) -> Union[str, None]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def invert(obj: Mapping[str, Any]) -> Dict[str, str]:
    """
    Swap keys and values.

    Scalar values become keys in their JSON spelling (``true``,
    ``null``, ``42``). Containers are skipped.

    Example:
        >>> invert({"a": "x", "b": True, "c": [1]})
        {'x': 'a', 'true': 'b'}
    """
    result: Dict[str, str] = {}
    for key, value in obj.items():
        new_key = _invert_key(value)
        if new_key is not None:
            result[new_key] = key
    return result


# =============================================================================
# Serialization
# =============================================================================

def remove_non_serializable_props(obj: Any) -> Any:
    """
    Deep copy of obj with JSON-incompatible values dropped.

    Dict entries and list items that are not JSON scalars, dicts,
    lists or tuples (functions, sets, arbitrary objects) are removed.
    """
    if isinstance(obj, Mapping):
        return {
            k: remove_non_serializable_props(v)
            for k, v in obj.items()
            if isinstance(k, JSON_SCALARS) and _serializable(v)
        }
    if isinstance(obj, (list, tuple)):
        return [remove_non_serializable_props(v) for v in obj if _serializable(v)]
    return obj


def _serializable(value: Any) -> bool:
    return isinstance(value, JSON_SCALARS + (Mapping, list, tuple))


def safe_json_stringify(obj: Any, indent: Union[int, None] = None) -> str:
    """
    Serialize obj to JSON after removing unsupported values.

    Raises:
        ArgumentError: If the cleaned value still cannot be encoded
    """
    cleaned = remove_non_serializable_props(obj)
    try:
        return json.dumps(cleaned, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ArgumentError(f"Value is not JSON serializable: {e}") from e


# =============================================================================
# Nested Access
# =============================================================================

def get_nested(
    obj: Union[Dict, List, Any],
    path: str,
    default: Any = None,
    separator: str = ".",
) -> Any:
    """
    Get nested value from dict/list using dot notation.

    Args:
        obj: Source object
        path: Dot-separated path
        default: Default if not found
        separator: Path separator

    Returns:
        Value at path or default

    Example:
        >>> get_nested({"a": {"b": [10, 20]}}, "a.b.1")
        20
    """
    current = obj

    for key in path.split(separator):
        try:
            if isinstance(current, dict):
                current = current[key]
            elif isinstance(current, (list, tuple)) and key.isdigit():
                current = current[int(key)]
            else:
                return default
        except (KeyError, IndexError):
            return default

    return current


def set_nested(
    obj: Dict,
    path: str,
    value: Any,
    separator: str = ".",
) -> Dict:
    """
    Set nested value in dict using dot notation.

    Missing intermediate dicts are created.

    Example:
        >>> set_nested({}, "a.b.c", 1)
        {'a': {'b': {'c': 1}}}
    """
    keys = path.split(separator)
    current = obj

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return obj
