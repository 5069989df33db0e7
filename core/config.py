"""Central configuration for the utility helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = [
    "UtilSettings",
    "DEFAULT_SETTINGS",
]


log = logging.getLogger(__name__)


def _coerce_int(value: str | None, default: int, *, name: str = "") -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        log.warning("Ignoring invalid integer for %s: %r", name or "setting", value)
        return default


def _coerce_str(value: str | None, default: str) -> str:
    if value is None:
        return default
    cleaned = value.strip()
    if not cleaned:
        return default
    return cleaned


@dataclass(frozen=True)
class UtilSettings:
    """Defaults shared by the date, string and signature helpers."""

    signature_secret: str = "jmni-until"
    nonce_size: int = 16
    timezone: str = "Asia/Shanghai"
    date_format: str = "yyyy-MM-dd HH:mm:ss"
    uid_random_length: int = 8

    @classmethod
    def from_env(cls, prefix: str = "JMNI_") -> "UtilSettings":
        defaults = cls()
        return cls(
            signature_secret=_coerce_str(
                os.environ.get(prefix + "SIGNATURE_SECRET"), defaults.signature_secret
            ),
            nonce_size=max(
                1,
                _coerce_int(
                    os.environ.get(prefix + "NONCE_SIZE"),
                    defaults.nonce_size,
                    name=prefix + "NONCE_SIZE",
                ),
            ),
            timezone=_coerce_str(os.environ.get(prefix + "TIMEZONE"), defaults.timezone),
            date_format=_coerce_str(
                os.environ.get(prefix + "DATE_FORMAT"), defaults.date_format
            ),
            uid_random_length=max(
                0,
                _coerce_int(
                    os.environ.get(prefix + "UID_RANDOM_LENGTH"),
                    defaults.uid_random_length,
                    name=prefix + "UID_RANDOM_LENGTH",
                ),
            ),
        )


DEFAULT_SETTINGS = UtilSettings.from_env()
"""Settings resolved from the environment at import time."""
