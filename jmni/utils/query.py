"""Read and rewrite query parameters of a URL."""

from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

__all__ = [
    "parse_query",
    "query_params",
    "set_query_param",
    "remove_query_param",
]


def _is_bare_query(url: str) -> bool:
    return "?" not in url and "://" not in url and "=" in url


def _query_string(url: str) -> str:
    if not url:
        return ""
    if _is_bare_query(url):
        return url
    return urlsplit(url).query


def parse_query(url: str) -> List[Tuple[str, str]]:
    """Return the ``(key, value)`` pairs of the URL's query string in order.

    ``url`` may also be a bare query string such as ``"?page=2"`` or
    ``"page=2&size=10"``.
    """

    query = _query_string(url)
    if not query:
        return []
    return [(key, value) for key, value in parse_qsl(query, keep_blank_values=True)]


def query_params(key: str, url: str) -> Optional[str]:
    """Return the first value of ``key`` in ``url``, or None if it is absent."""

    for name, value in parse_query(url):
        if name == key:
            return value
    return None


def _replace_query(url: str, pairs: List[Tuple[str, str]]) -> str:
    if _is_bare_query(url):
        return urlencode(pairs)
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def set_query_param(url: str, key: str, value: Optional[object]) -> str:
    """Return ``url`` with ``key`` set to ``value``.

    The first occurrence keeps its position, later duplicates are dropped and
    a new key is appended. ``value=None`` removes the key.
    """

    if value is None:
        return remove_query_param(url, key)
    pairs: List[Tuple[str, str]] = []
    replaced = False
    for name, current in parse_query(url):
        if name != key:
            pairs.append((name, current))
        elif not replaced:
            pairs.append((key, str(value)))
            replaced = True
    if not replaced:
        pairs.append((key, str(value)))
    return _replace_query(url, pairs)


def remove_query_param(url: str, key: str) -> str:
    pairs = [(name, value) for name, value in parse_query(url) if name != key]
    return _replace_query(url, pairs)
