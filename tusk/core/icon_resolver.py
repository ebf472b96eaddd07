"""Multi-source icon resolution chain, memoized in the app cache.

Resolution order (first hit wins):
  1. Icon previously recorded for the app in the app cache
  2. Icon hint that is itself an existing file
  3. ``platform_icon:<appid>`` hint: Steam artwork, then the bare appid
  4. Icon hint that is a directory: first image file inside it
  5. System icon theme search (roots x themes x sizes x categories x extensions)

Hits from 2-5 are written back to the cache. Theme hits record the
containing directory; the others record the file itself, so readers of
``icon_directory`` must accept both.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from tusk.core.app_cache import AppCache
from tusk.core.logger import get_logger
from tusk.core.paths import icon_roots
from tusk.core.steam_scanner import PLATFORM_ICON_PREFIX

_log = get_logger("icon_resolver")

THEME_SEARCH_ORDER = ["hicolor", "Adwaita", "gnome", "breeze", "oxygen"]
ICON_SIZES = [
    "512x512", "256x256", "128x128", "64x64", "48x48", "32x32", "24x24", "16x16", "scalable",
]
ICON_CATEGORIES = ["apps", "devices", "places", "mimetypes", "status", "actions"]
ICON_EXTENSIONS = ["png", "svg", "xpm", "jpg", "jpeg", "ico"]

DIRECTORY_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".svg", ".ico"}

STEAM_ICON_PATTERNS = [
    "{appid}_header.jpg",
    "{appid}_library_600x900.jpg",
    "{appid}_library.png",
    "{appid}_icon.png",
    "{appid}.png",
    "{appid}.jpg",
    "{appid}.ico",
]


def resolve_icon_path(
    app_name: str,
    icon_hint: str,
    cache: AppCache,
    enabled: bool = True,
    roots: Sequence[Path] | None = None,
) -> str | None:
    """Resolve an icon hint to an existing file path, or None."""
    if not icon_hint or not enabled:
        return None
    if roots is None:
        roots = icon_roots()

    cached = _check_cache(app_name, icon_hint, cache)
    if cached:
        return cached

    hint_path = Path(icon_hint)
    if hint_path.is_absolute() and hint_path.is_file():
        cache.set_icon_directory(app_name, str(hint_path))
        return str(hint_path)

    if icon_hint.startswith(PLATFORM_ICON_PREFIX):
        appid = icon_hint[len(PLATFORM_ICON_PREFIX):]
        found = _search_steam_icon(appid, roots)
        if found:
            cache.set_icon_directory(app_name, found)
            return found
        if not appid:
            return None
        return resolve_icon_path(app_name, appid, cache, enabled, roots)

    if hint_path.is_absolute() and hint_path.is_dir():
        found = _first_image_in(hint_path)
        if found:
            cache.set_icon_directory(app_name, found)
        return found

    found = _search_themes(icon_hint, roots)
    if found:
        cache.set_icon_directory(app_name, str(Path(found).parent))
        return found

    _log.debug("No icon found for %s (%s)", app_name, icon_hint)
    return None


def _check_cache(app_name: str, icon_hint: str, cache: AppCache) -> str | None:
    record = cache.get(app_name)
    if record is None or not record.icon_directory:
        return None
    recorded = Path(record.icon_directory)
    if recorded.is_file():
        return str(recorded)
    if recorded.is_dir():
        for ext in ICON_EXTENSIONS:
            candidate = recorded / f"{icon_hint}.{ext}"
            if candidate.is_file():
                return str(candidate)
    return None


def _first_image_in(directory: Path) -> str | None:
    try:
        files = sorted(directory.iterdir())
    except OSError:
        return None
    for f in files:
        if f.is_file() and f.suffix.lower() in DIRECTORY_IMAGE_EXTENSIONS:
            return str(f)
    return None


def _search_themes(icon_name: str, roots: Sequence[Path]) -> str | None:
    for base_dir in roots:
        if not base_dir.is_dir():
            continue
        for theme in THEME_SEARCH_ORDER:
            theme_dir = base_dir / theme
            if not theme_dir.is_dir():
                continue
            for size in ICON_SIZES:
                for category in ICON_CATEGORIES:
                    for ext in ICON_EXTENSIONS:
                        candidate = theme_dir / size / category / f"{icon_name}.{ext}"
                        if candidate.is_file():
                            return str(candidate)
    return None


def _search_steam_icon(appid: str, roots: Sequence[Path]) -> str | None:
    if not appid:
        return None
    for base_dir in roots:
        if not base_dir.is_dir():
            continue
        for pattern in STEAM_ICON_PATTERNS:
            candidate = base_dir / pattern.format(appid=appid)
            if candidate.is_file():
                return str(candidate)
    return None
