"""
utilkit Array Helpers
=====================

Sequence helpers: ranges, chunking, grouping and selection.
"""

from __future__ import annotations

import random
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from utilkit.errors import ArgumentError


T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def range_list(start: int, end: Optional[int] = None, step: int = 1) -> List[int]:
    """
    Integer range as a list.

    A single argument counts from zero, like the builtin ``range``.

    Raises:
        ArgumentError: If step is zero

    Example:
        >>> range_list(10, 0, -2)
        [10, 8, 6, 4, 2]
    """
    if step == 0:
        raise ArgumentError("Step cannot be zero")

    if end is None:
        start, end = 0, start

    return list(range(start, end, step))


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split a sequence into chunks.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if size <= 0 or not items:
        return []
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def first(items: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    return items[0] if items else default


def last(items: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    return items[-1] if items else default


def count_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, int]:
    """
    Count items per key.

    Example:
        >>> count_by(["apple", "banana", "apricot"], lambda s: s[0])
        {'a': 2, 'b': 1}
    """
    counts: Dict[K, int] = {}
    for item in items:
        k = key(item)
        counts[k] = counts.get(k, 0) + 1
    return counts


def diff(
    root: Iterable[T],
    other: Iterable[T],
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """Items of ``root`` whose key does not appear in ``other``."""
    key = key or (lambda item: item)
    other_keys = {key(item) for item in other}
    return [item for item in root if key(item) not in other_keys]


def fork(items: Iterable[T], condition: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """
    Partition items into (matching, not matching).

    Example:
        >>> fork([1, 2, 3, 4], lambda x: x % 2 == 0)
        ([2, 4], [1, 3])
    """
    matching: List[T] = []
    rest: List[T] = []
    for item in items:
        (matching if condition(item) else rest).append(item)
    return matching, rest


def max_by(items: Iterable[T], getter: Optional[Callable[[T], Any]] = None) -> Optional[T]:
    """Largest item (by getter), or None when empty."""
    return max(items, key=getter, default=None) if getter else max(items, default=None)


def min_by(items: Iterable[T], getter: Optional[Callable[[T], Any]] = None) -> Optional[T]:
    """Smallest item (by getter), or None when empty."""
    return min(items, key=getter, default=None) if getter else min(items, default=None)


def sum_by(items: Iterable[T], getter: Optional[Callable[[T], Any]] = None) -> Any:
    """
    Sum items, optionally through a getter.

    Example:
        >>> sum_by([{"n": 1}, {"n": 2}], lambda d: d["n"])
        3
    """
    if getter is None:
        return sum(items)  # type: ignore[arg-type]
    return sum(getter(item) for item in items)


def unique(
    items: Iterable[T],
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Get unique items preserving order.

    Args:
        items: Input iterable
        key: Optional key function

    Returns:
        List of unique items

    Example:
        >>> unique([1, 2, 1, 3, 2])
        [1, 2, 3]
    """
    seen = set()
    result = []

    for item in items:
        k = key(item) if key else item
        if k not in seen:
            seen.add(k)
            result.append(item)

    return result


def shuffle(items: Iterable[T]) -> List[T]:
    """Shuffled copy; the input is left untouched."""
    result = list(items)
    random.shuffle(result)
    return result


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    return next((item for item in items if predicate(item)), None)


def find_index(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[int]:
    return next((i for i, item in enumerate(items) if predicate(item)), None)


def flatten(
    items: Iterable,
    depth: int = -1,
) -> List:
    """
    Flatten nested lists and tuples.

    Args:
        items: Nested iterable
        depth: Max depth (-1 for unlimited)

    Returns:
        Flattened list

    Example:
        >>> flatten([[1, [2]], [3]])
        [1, 2, 3]
    """
    result = []

    for item in items:
        if isinstance(item, (list, tuple)) and depth != 0:
            result.extend(flatten(item, depth - 1 if depth > 0 else -1))
        else:
            result.append(item)

    return result
