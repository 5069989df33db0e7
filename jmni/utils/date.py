"""Date formatting helpers for timestamps, ISO strings and datetimes."""

from __future__ import annotations

import datetime as _dt
import math
import re
from typing import Dict, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core import config

__all__ = [
    "InvalidDateError",
    "InvalidTimezoneError",
    "DateInput",
    "format_date",
    "format_timezone_offset",
    "format_with_timezone",
]


DateInput = Union[str, int, float, _dt.date, _dt.datetime]

_TOKEN_RE = re.compile("yyyy|yy|MM|dd|HH|hh|mm|ss|M|d|H|h|m|s")


class InvalidDateError(ValueError):
    """Raised when a value cannot be interpreted as a point in time."""


class InvalidTimezoneError(ValueError):
    """Raised for time zone names unknown to the IANA database."""

    def __init__(self, timezone: str) -> None:
        super().__init__(f'Invalid timezone: "{timezone}"')
        self.timezone = timezone


def _to_datetime(value: DateInput) -> _dt.datetime:
    """Coerce supported inputs; epoch timestamps are milliseconds and come back aware."""

    if isinstance(value, _dt.datetime):
        return value
    if isinstance(value, _dt.date):
        return _dt.datetime.combine(value, _dt.time())
    if isinstance(value, bool):
        raise InvalidDateError("Invalid date input")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidDateError("Invalid date input")
        try:
            return _dt.datetime.fromtimestamp(value / 1000.0, tz=_dt.timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError("Invalid date input") from exc
    if isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            return _dt.datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidDateError("Invalid date input") from exc
    raise InvalidDateError("Invalid date input")


def _local(value: _dt.datetime) -> _dt.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone()


def format_date(value: DateInput, fmt: Optional[str] = None) -> str:
    """Render ``value`` in local time using ``yyyy-MM-dd HH:mm:ss`` style tokens.

    Supported tokens are ``yyyy yy MM M dd d HH H hh h mm m ss s``; the
    longest token wins, so ``MM`` is never read as two ``M``. ``hh``/``h``
    are on the 12-hour clock with midnight and noon shown as 12. Any other
    text is copied through.

    Raises:
        InvalidDateError: ``value`` is not a usable date.
    """

    moment = _local(_to_datetime(value))
    if fmt is None:
        fmt = config.DEFAULT_SETTINGS.date_format
    hour12 = moment.hour % 12 or 12
    parts: Dict[str, str] = {
        "yyyy": str(moment.year),
        "yy": str(moment.year)[-2:],
        "MM": f"{moment.month:02d}",
        "M": str(moment.month),
        "dd": f"{moment.day:02d}",
        "d": str(moment.day),
        "HH": f"{moment.hour:02d}",
        "H": str(moment.hour),
        "hh": f"{hour12:02d}",
        "h": str(hour12),
        "mm": f"{moment.minute:02d}",
        "m": str(moment.minute),
        "ss": f"{moment.second:02d}",
        "s": str(moment.second),
    }
    return _TOKEN_RE.sub(lambda match: parts[match.group(0)], fmt)


def format_timezone_offset(value: Optional[DateInput] = None) -> str:
    """Return the local UTC offset as ``UTC+hh:mm`` / ``UTC-hh:mm``."""

    moment = _dt.datetime.now() if value is None else _to_datetime(value)
    offset = moment.astimezone().utcoffset() or _dt.timedelta(0)
    total_minutes = int(offset.total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def format_with_timezone(
    value: Optional[DateInput] = None,
    timezone: Optional[str] = None,
) -> str:
    """Return ``yyyy-MM-dd HH:mm:ss`` for ``value`` as seen in ``timezone``.

    ``value`` defaults to now and ``timezone`` to the configured zone
    (``Asia/Shanghai`` unless overridden). Naive datetimes are taken as local
    time.
    """

    moment = _dt.datetime.now().astimezone() if value is None else _to_datetime(value)
    zone_name = timezone or config.DEFAULT_SETTINGS.timezone
    try:
        zone = ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(zone_name) from exc
    return moment.astimezone(zone).strftime("%Y-%m-%d %H:%M:%S")
