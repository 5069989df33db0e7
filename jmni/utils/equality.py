"""Structural (deep) equality across primitives and nested containers."""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Set, Tuple

__all__ = ["is_equal"]


_NUMBER_TYPES = (int, float, complex, Decimal, Fraction)
_PRIMITIVES = frozenset({"bool", "number", "str", "bytes"})


def _category(value: Any) -> Optional[str]:
    if value is None:
        return "none"
    # bool before number: bool is an int subclass.
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, _NUMBER_TYPES):
        return "number"
    if isinstance(value, str):
        return "str"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, list):
        return "list"
    if isinstance(value, tuple):
        return "tuple"
    # datetime before date: datetime is a date subclass.
    if isinstance(value, _dt.datetime):
        return "datetime"
    if isinstance(value, _dt.date):
        return "date"
    if isinstance(value, re.Pattern):
        return "pattern"
    if isinstance(value, Mapping):
        return "mapping"
    return None


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    try:
        return value != value
    except (TypeError, ArithmeticError):
        return False


def _primitive_eq(a: Any, b: Any) -> bool:
    # Signalling Decimal NaNs raise on comparison.
    try:
        return bool(a == b)
    except ArithmeticError:
        return False


def is_equal(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are structurally equal.

    Sequences compare element by element in order, mappings by key set and
    values, dates by instant and compiled patterns by source and flags. NaN
    equals NaN. Values of different kinds (``True`` and ``1``, a list and a
    tuple, a date and a number) are never equal, and objects outside the
    supported kinds are only equal to themselves.
    """

    return _compare(a, b, set())


def _compare(a: Any, b: Any, seen: Set[Tuple[int, int]]) -> bool:
    if a is b:
        return True

    kind_a = _category(a)
    kind_b = _category(b)

    if kind_a == kind_b and kind_a in _PRIMITIVES and _primitive_eq(a, b):
        return True

    if kind_a == "number" and kind_b == "number":
        return _is_nan(a) and _is_nan(b)

    if a is None or b is None:
        return False

    if kind_a is None or kind_b is None or kind_a != kind_b:
        return False

    if kind_a in _PRIMITIVES:
        return False

    if kind_a in ("datetime", "date"):
        return a == b

    if kind_a == "pattern":
        return a.pattern == b.pattern and a.flags == b.flags

    key = (id(a), id(b))
    if key in seen:
        return True
    seen.add(key)
    try:
        if kind_a in ("list", "tuple"):
            if len(a) != len(b):
                return False
            return all(_compare(x, y, seen) for x, y in zip(a, b))

        if len(a) != len(b) or set(a.keys()) != set(b.keys()):
            return False
        return all(_compare(a[name], b[name], seen) for name in a)
    finally:
        seen.discard(key)
