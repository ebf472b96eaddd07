"""XDG base directories and the well-known roots searched for apps and icons.

Every function reads the environment at call time so that a changed
``$HOME`` or ``$XDG_*`` variable is honoured without re-importing.
"""

from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "tusk-launcher"

SYSTEM_PIXMAPS_DIR = Path("/usr/share/pixmaps")
SYSTEM_FLATPAK_ICONS_DIR = Path("/var/lib/flatpak/exports/share/icons")

_DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"


def user_home() -> Path:
    """Return the user's home directory, or the cwd when it cannot be found."""
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        return Path.cwd()


def _xdg_dir(var: str, *default: str) -> Path:
    value = os.environ.get(var, "")
    if value and os.path.isabs(value):
        return Path(value)
    return user_home().joinpath(*default)


def data_home() -> Path:
    return _xdg_dir("XDG_DATA_HOME", ".local", "share")


def config_root() -> Path:
    return _xdg_dir("XDG_CONFIG_HOME", ".config")


def cache_root() -> Path:
    return _xdg_dir("XDG_CACHE_HOME", ".cache")


def system_data_dirs() -> list[Path]:
    raw = os.environ.get("XDG_DATA_DIRS") or _DEFAULT_DATA_DIRS
    return [Path(p) for p in raw.split(":") if p and os.path.isabs(p)]


def user_flatpak_share() -> Path:
    return data_home() / "flatpak" / "exports" / "share"


def data_roots() -> list[Path]:
    """Ordered data roots: user first, then system, then fixed fallbacks."""
    roots = [data_home(), user_flatpak_share()]
    roots.extend(system_data_dirs())
    roots.extend([SYSTEM_PIXMAPS_DIR, SYSTEM_FLATPAK_ICONS_DIR])
    return _unique(roots)


def app_config_dir() -> Path:
    """Return ``<config_root>/tusk-launcher``, creating it if needed."""
    path = config_root() / APP_DIR_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    return path


def app_cache_dir() -> Path:
    return cache_root() / APP_DIR_NAME


def application_dirs() -> list[Path]:
    """Directories that may hold ``.desktop`` descriptor files."""
    dirs = [root / "applications" for root in data_roots()]
    dirs.append(data_home() / "applications" / "steam")
    return _unique(dirs)


def steam_root() -> Path | None:
    """Return the first Steam installation found under the user's home."""
    home = user_home()
    for candidate in (
        data_home() / "Steam",
        home / ".steam" / "steam",
        home / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam",
    ):
        if candidate.is_dir():
            return candidate
    return None


def icon_roots() -> list[Path]:
    """Roots searched for themed icons and Steam artwork, in priority order."""
    roots = [data_home() / "icons"]
    steam = steam_root()
    if steam is not None:
        roots.append(steam / "appcache" / "librarycache")
    for d in system_data_dirs():
        roots.append(d / "icons")
        roots.append(d / "pixmaps")
    roots.append(SYSTEM_PIXMAPS_DIR)
    roots.append(SYSTEM_FLATPAK_ICONS_DIR)
    home = user_home()
    for extra in (user_flatpak_share() / "icons", home / ".icons"):
        if extra.is_dir():
            roots.append(extra)
    return _unique(roots)


def _unique(paths: list[Path]) -> list[Path]:
    seen: set[Path] = set()
    out: list[Path] = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out
