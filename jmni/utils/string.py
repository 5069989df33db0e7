"""String helpers: identifiers, random text and case conversion."""

from __future__ import annotations

import random
import re
import string as _string
from typing import Optional

from core import config
from core.clock import now_ms

__all__ = [
    "to_base36",
    "generate_uid",
    "random_string",
    "capitalize",
    "snake_to_camel",
    "camel_to_snake",
]


_BASE36 = _string.digits + _string.ascii_lowercase
_SNAKE_RE = re.compile(r"_([a-z])")
_UPPER_RE = re.compile(r"[A-Z]")
_rng = random.SystemRandom()


def to_base36(value: int) -> str:
    """Encode a non-negative integer with digits ``0-9a-z``."""

    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def random_string(length: int) -> str:
    """Return ``length`` random characters from ``0-9a-z``."""

    if length <= 0:
        return ""
    return "".join(_rng.choices(_BASE36, k=length))


def generate_uid(random_length: Optional[int] = None) -> str:
    """Return a base-36 millisecond timestamp followed by a random suffix.

    Identifiers produced in later milliseconds sort after earlier ones as long
    as the timestamp part keeps its width.
    """

    if random_length is None:
        random_length = config.DEFAULT_SETTINGS.uid_random_length
    return to_base36(now_ms()) + random_string(random_length)


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""

    return text[:1].upper() + text[1:]


def snake_to_camel(text: str) -> str:
    return _SNAKE_RE.sub(lambda match: match.group(1).upper(), text)


def camel_to_snake(text: str) -> str:
    return _UPPER_RE.sub(lambda match: "_" + match.group(0).lower(), text)
