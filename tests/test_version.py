from __future__ import annotations

from smashcast.version import get_version


def test_build_version_env_wins(monkeypatch) -> None:
    monkeypatch.setenv("BUILD_VERSION", " 1.2.3 ")
    assert get_version() == "1.2.3"


def test_version_is_string(monkeypatch) -> None:
    monkeypatch.delenv("BUILD_VERSION", raising=False)
    assert isinstance(get_version(), str)
