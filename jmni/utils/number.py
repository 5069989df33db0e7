"""Number formatting helpers."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Union

__all__ = ["INVALID_INPUT", "pad_zero"]


log = logging.getLogger(__name__)

INVALID_INPUT = "Invalid Input"

_PREFIXED_INT = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def _to_number(value: Union[int, float, str]) -> Optional[float]:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return 0
    if _PREFIXED_INT.fullmatch(text):
        return int(text, 0)
    try:
        return float(text)
    except ValueError:
        return None


def _render(number: float) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def pad_zero(value: Union[int, float, str]) -> str:
    """Pad a single-digit number to two digits (``5`` -> ``"05"``).

    Larger numbers are returned unchanged as text. Strings may use the
    ``0x``/``0o``/``0b`` prefixes, and infinities render as ``"Infinity"``.
    Input that is not numeric is logged and yields ``"Invalid Input"``.
    """

    number = _to_number(value)
    if number is None or number != number:
        log.error("Invalid Input: %r", value)
        return INVALID_INPUT
    return _render(number).rjust(2, "0")
