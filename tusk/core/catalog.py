"""Application catalog: desktop entries and Steam games merged by display name."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from tusk.core.desktop_parser import DesktopEntry, scan_directory
from tusk.core.logger import get_logger
from tusk.core.paths import application_dirs
from tusk.core.steam_scanner import SteamGame, scan_steam_games

_log = get_logger("catalog")

_MAX_WORKERS = 8


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    exec_cmd: str
    icon_hint: str


def merge_entries(
    desktop_entries: Iterable[DesktopEntry],
    games: Iterable[SteamGame],
) -> list[CatalogEntry]:
    """Concatenate desktop entries and games; the first entry for a name wins."""
    merged: dict[str, CatalogEntry] = {}
    for entry in desktop_entries:
        merged.setdefault(entry.name, CatalogEntry(entry.name, entry.exec_cmd, entry.icon))
    for game in games:
        merged.setdefault(game.name, CatalogEntry(game.name, game.exec_cmd, game.icon_hint))
    return list(merged.values())


def build_catalog(
    app_dirs: Sequence[Path] | None = None,
    steam_scan: Callable[[], list[SteamGame]] = scan_steam_games,
) -> list[CatalogEntry]:
    """Enumerate every application directory and the Steam library in parallel.

    Directory order is preserved in the result regardless of which worker
    finishes first.
    """
    if app_dirs is None:
        app_dirs = application_dirs()

    with ThreadPoolExecutor(max_workers=_MAX_WORKERS) as pool:
        games_future = pool.submit(steam_scan)
        dir_results = list(pool.map(scan_directory, app_dirs))
        try:
            games = games_future.result()
        except OSError as e:
            _log.warning("Steam scan failed: %s", e)
            games = []

    desktop_entries = [entry for entries in dir_results for entry in entries]
    catalog = merge_entries(desktop_entries, games)
    _log.info(
        "Catalog built: %d apps (%d desktop entries, %d games)",
        len(catalog), len(desktop_entries), len(games),
    )
    return catalog
