from __future__ import annotations

import pytest

from smashcast.utils import build_url, env_str, expand_env, validate_url


def test_expand_env_walks_nested_values(monkeypatch) -> None:
    monkeypatch.setenv("SMASHCAST_TEST_VALUE", "expanded")

    result = expand_env({"a": "$SMASHCAST_TEST_VALUE", "b": ["${SMASHCAST_TEST_VALUE}", 3]})

    assert result == {"a": "expanded", "b": ["expanded", 3]}


def test_env_str_strips_and_drops_blank(monkeypatch) -> None:
    monkeypatch.setenv("SMASHCAST_TEST_VALUE", "  value ")
    assert env_str("SMASHCAST_TEST_VALUE") == "value"

    monkeypatch.setenv("SMASHCAST_TEST_VALUE", "   ")
    assert env_str("SMASHCAST_TEST_VALUE") is None

    monkeypatch.delenv("SMASHCAST_TEST_VALUE")
    assert env_str("SMASHCAST_TEST_VALUE") is None


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://api.smashcast.tv/", True),
        ("http://localhost:8080", True),
        ("api.smashcast.tv", False),
        ("file:///etc/passwd", False),
        ("", False),
        (None, False),
        ("http://", False),
    ],
)
def test_validate_url(url, expected: bool) -> None:
    assert validate_url(url) is expected


def test_build_url_normalizes_slashes() -> None:
    assert build_url("https://api.smashcast.tv", "/editors/jens1o") == "https://api.smashcast.tv/editors/jens1o"
    assert build_url("https://example.com/api/", "media/views/x") == "https://example.com/api/media/views/x"
