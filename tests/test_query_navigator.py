"""Tests for the URL query and user-agent helpers."""

from __future__ import annotations

import pytest

from jmni.utils.navigator import is_mobile
from jmni.utils.query import parse_query, query_params, remove_query_param, set_query_param

URL = "http://example.com/list?page=2&size=10#top"


def test_query_params_reads_values() -> None:
    assert query_params("page", URL) == "2"
    assert query_params("size", URL) == "10"
    assert query_params("nonExistent", URL) is None


def test_query_params_first_value_blank_and_plus() -> None:
    url = "https://example.com/?tag=a&tag=b&empty=&q=hello+world%21"
    assert query_params("tag", url) == "a"
    assert query_params("empty", url) == ""
    assert query_params("q", url) == "hello world!"


def test_query_params_accepts_bare_query_strings() -> None:
    assert query_params("page", "?page=3") == "3"
    assert query_params("page", "page=4&size=1") == "4"
    assert query_params("page", "") is None
    assert query_params("page", "http://example.com/") is None


def test_bare_query_values_may_contain_slashes() -> None:
    assert query_params("next", "next=/home") == "/home"
    assert parse_query("next=/home&tab=1") == [("next", "/home"), ("tab", "1")]
    assert remove_query_param("next=/home&tab=1", "tab") == "next=%2Fhome"
    assert set_query_param("next=/home", "tab", 2) == "next=%2Fhome&tab=2"


def test_parse_query_keeps_order() -> None:
    assert parse_query(URL) == [("page", "2"), ("size", "10")]


def test_set_query_param_replaces_in_place() -> None:
    assert set_query_param(URL, "page", 3) == "http://example.com/list?page=3&size=10#top"


def test_set_query_param_appends_new_key() -> None:
    assert set_query_param("http://example.com/", "q", "a b") == "http://example.com/?q=a+b"


def test_set_query_param_collapses_duplicates() -> None:
    url = "http://example.com/?tag=a&x=1&tag=b"
    assert set_query_param(url, "tag", "c") == "http://example.com/?tag=c&x=1"


def test_set_query_param_none_removes() -> None:
    assert set_query_param(URL, "page", None) == "http://example.com/list?size=10#top"


def test_remove_query_param() -> None:
    assert remove_query_param(URL, "size") == "http://example.com/list?page=2#top"
    assert remove_query_param("http://example.com/?a=1", "a") == "http://example.com/"
    assert remove_query_param("a=1&b=2", "a") == "b=2"


@pytest.mark.parametrize(
    "user_agent",
    [
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148",
        "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile Safari/537.36",
        "Mozilla/5.0 (iPad; CPU OS 16_0 like Mac OS X)",
        "Mozilla/5.0 (Windows Phone 10.0; Android 6.0.1; Microsoft; Lumia 950)",
        "BlackBerry9700/5.0.0.351 Profile/MIDP-2.1",
    ],
)
def test_is_mobile_detects_mobile_agents(user_agent: str) -> None:
    assert is_mobile(user_agent)


@pytest.mark.parametrize(
    "user_agent",
    [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
        "",
        None,
    ],
)
def test_is_mobile_rejects_desktop_agents(user_agent: object) -> None:
    assert not is_mobile(user_agent)  # type: ignore[arg-type]
