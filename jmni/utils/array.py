"""List helpers: de-duplication, sorting, flattening and set-like operations."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

__all__ = [
    "unique_array",
    "sort_array",
    "flatten_array",
    "difference",
    "intersection",
]

T = TypeVar("T")


def unique_array(items: Iterable[T]) -> List[T]:
    """Return the items in first-occurrence order without duplicates."""

    result: List[T] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def sort_array(items: Iterable[T], compare_fn: Optional[Callable[[T, T], int]] = None) -> List[T]:
    """Return a sorted copy; ``compare_fn(a, b)`` orders like a classic comparator."""

    if compare_fn is None:
        return sorted(items)  # type: ignore[type-var]
    return sorted(items, key=cmp_to_key(compare_fn))


def flatten_array(items: Iterable[Any]) -> List[Any]:
    """Flatten arbitrarily nested lists and tuples into one list."""

    result: List[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(flatten_array(item))
        else:
            result.append(item)
    return result


def difference(first: Sequence[T], second: Sequence[T]) -> List[T]:
    return [item for item in first if item not in second]


def intersection(first: Sequence[T], second: Sequence[T]) -> List[T]:
    return [item for item in first if item in second]
