"""Shared fixtures: every test runs against a throwaway home directory."""

from pathlib import Path

import pytest

from tusk.core.app_cache import AppCache
from tusk.core.config import Config


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "usr" / "share"))
    monkeypatch.delenv("XDG_SESSION_ID", raising=False)
    return home


@pytest.fixture
def cache(tmp_path) -> AppCache:
    return AppCache(tmp_path / "app_cache.txt")


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(tmp_path / "settings.json")


def write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
