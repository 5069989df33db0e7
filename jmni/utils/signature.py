"""HMAC-SHA256 request signatures built from a timestamp and a random nonce."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Dict, Optional, Union

from core import config
from core.clock import now_ms

__all__ = [
    "SignatureParams",
    "gen_ran_hex",
    "str_to_bytes",
    "buffer_to_hex",
    "string_to_sign",
    "generate_signature",
    "verify_signature",
]


@dataclass(frozen=True)
class SignatureParams:
    """Values a client sends alongside a signed request."""

    timestamp: int
    nonce: str
    signature: str

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return {
            "timestamp": self.timestamp,
            "nonce": self.nonce,
            "signature": self.signature,
        }


def gen_ran_hex(size: int) -> str:
    """Return ``size`` random lowercase hex characters."""

    if size <= 0:
        return ""
    return secrets.token_hex((size + 1) // 2)[:size]


def str_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def buffer_to_hex(data: Union[bytes, bytearray, memoryview]) -> str:
    return bytes(data).hex()


def string_to_sign(timestamp: int, nonce: str) -> str:
    return f"timestamp={timestamp}&nonce={nonce}"


def _sign(secret_key: str, timestamp: int, nonce: str) -> str:
    digest = hmac.new(
        str_to_bytes(secret_key),
        str_to_bytes(string_to_sign(timestamp, nonce)),
        hashlib.sha256,
    ).digest()
    return buffer_to_hex(digest)


def generate_signature(
    secret_key: Optional[str] = None,
    *,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> SignatureParams:
    """Sign ``timestamp=<ms>&nonce=<hex>`` with HMAC-SHA256.

    The timestamp defaults to the current epoch time in milliseconds and the
    nonce to ``nonce_size`` (16) random hex characters. The secret falls back
    to the configured ``signature_secret``. The signature is the 64 character
    hex digest.
    """

    settings = config.DEFAULT_SETTINGS
    key = settings.signature_secret if secret_key is None else secret_key
    ts = now_ms() if timestamp is None else int(timestamp)
    nonce_value = gen_ran_hex(settings.nonce_size) if nonce is None else nonce
    return SignatureParams(timestamp=ts, nonce=nonce_value, signature=_sign(key, ts, nonce_value))


def verify_signature(
    timestamp: int,
    nonce: str,
    signature: str,
    secret_key: Optional[str] = None,
) -> bool:
    """Recompute the signature and compare it in constant time."""

    key = config.DEFAULT_SETTINGS.signature_secret if secret_key is None else secret_key
    expected = _sign(key, int(timestamp), nonce)
    return hmac.compare_digest(str_to_bytes(expected), str_to_bytes(signature.lower()))
