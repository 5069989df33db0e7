"""MIME-type inference from file names and leading content bytes."""

from __future__ import annotations

import mimetypes
from typing import Optional, Tuple
from urllib.parse import urlsplit

__all__ = [
    "DEFAULT_MIME_TYPE",
    "guess_mime_type",
    "sniff_mime_type",
    "infer_mime_type",
]


DEFAULT_MIME_TYPE = "application/octet-stream"

_MAGIC: Tuple[Tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"%PDF-", "application/pdf"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
    (b"ID3", "audio/mpeg"),
    (b"BM", "image/bmp"),
)


def guess_mime_type(name: str, default: Optional[str] = DEFAULT_MIME_TYPE) -> Optional[str]:
    """Guess from the extension of a file name, path or URL."""

    if not name:
        return default
    path = urlsplit(name).path if "://" in name else name
    mime_type, _ = mimetypes.guess_type(path, strict=False)
    return mime_type or default


def sniff_mime_type(data: bytes) -> Optional[str]:
    """Identify common formats from their leading bytes; None if unknown."""

    if not data:
        return None
    head = bytes(data[:512])
    for signature, mime_type in _MAGIC:
        if head.startswith(signature):
            return mime_type
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    if head[:4] == b"RIFF" and head[8:12] == b"WAVE":
        return "audio/wav"
    if head[4:8] == b"ftyp":
        return "video/mp4"
    text = head.lstrip(b"\xef\xbb\xbf").lstrip()
    if text.startswith(b"<svg") or (text.startswith(b"<?xml") and b"<svg" in text):
        return "image/svg+xml"
    if text.startswith(b"<?xml"):
        return "application/xml"
    if text[:1] in (b"{", b"["):
        return "application/json"
    return None


def infer_mime_type(
    name: Optional[str] = None,
    data: Optional[bytes] = None,
    default: Optional[str] = DEFAULT_MIME_TYPE,
) -> Optional[str]:
    """Prefer the content signature, then the name, then ``default``."""

    if data:
        sniffed = sniff_mime_type(data)
        if sniffed:
            return sniffed
    if name:
        guessed = guess_mime_type(name, default=None)
        if guessed:
            return guessed
    return default
