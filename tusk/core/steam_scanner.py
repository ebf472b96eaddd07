"""Steam library scanner: turns installed app manifests into launchable entries.

Library roots come from ``steamapps/libraryfolders.vdf`` plus the primary
Steam root itself. Each ``steamapps/appmanifest_*.acf`` contributes one
game; an appid seen in an earlier library wins over later duplicates.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from tusk.core.logger import get_logger
from tusk.core.paths import steam_root

_log = get_logger("steam_scanner")

STEAM_CLI = "steam"
STEAM_URL_SCHEME = "steam"
PLATFORM_ICON_PREFIX = "platform_icon:"
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".svg", ".ico"}

_PATH_RE = re.compile(r'^\s*"path"\s+"([^"]*)"', re.MULTILINE)
_MANIFEST_KEYS = ("appid", "name", "installdir")


@dataclass
class SteamGame:
    appid: str
    name: str
    installdir: str
    exec_cmd: str
    icon_hint: str


def library_roots(root: Path) -> list[Path]:
    """Return ``root`` followed by the libraries listed in libraryfolders.vdf."""
    libs: list[Path] = [root]
    vdf = root / "steamapps" / "libraryfolders.vdf"
    try:
        content = vdf.read_text(encoding="utf-8", errors="replace")
        libs.extend(Path(p) for p in _PATH_RE.findall(content) if p)
    except FileNotFoundError:
        pass
    except OSError as e:
        _log.warning("Cannot read %s: %s", vdf, e)

    unique: list[Path] = []
    seen: set[str] = set()
    for lib in libs:
        try:
            key = str(lib.resolve())
        except OSError:
            key = str(lib)
        if key not in seen:
            seen.add(key)
            unique.append(lib)
    return unique


def parse_manifest(path: Path) -> dict[str, str] | None:
    """Extract appid/name/installdir from an appmanifest file."""
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        _log.warning("Cannot read %s: %s", path, e)
        return None

    values: dict[str, str] = {}
    for key in _MANIFEST_KEYS:
        match = re.search(rf'^\s*"{key}"\s+"([^"]*)"', content, re.MULTILINE)
        if match is None:
            return None
        values[key] = match.group(1)
    if not values["appid"] or not values["name"]:
        return None
    return values


def _has_image(directory: Path) -> bool:
    try:
        return any(
            p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
            for p in directory.iterdir()
        )
    except OSError:
        return False


def icon_hint_for(library: Path, appid: str, installdir: str) -> str:
    """Install dir when it carries artwork, otherwise the ``platform_icon:`` sentinel."""
    game_dir = library / "steamapps" / "common" / installdir
    if installdir and game_dir.is_dir() and _has_image(game_dir):
        return str(game_dir.absolute())
    return f"{PLATFORM_ICON_PREFIX}{appid}"


def scan_steam_games(root: Path | None = None) -> list[SteamGame]:
    """Enumerate installed Steam games. Returns [] when Steam is absent."""
    root = root or steam_root()
    if root is None:
        return []

    games: list[SteamGame] = []
    seen_ids: set[str] = set()
    for lib in library_roots(root):
        steamapps = lib / "steamapps"
        try:
            manifests = sorted(
                p for p in steamapps.iterdir() if p.name.startswith("appmanifest_")
            )
        except OSError:
            continue

        for manifest in manifests:
            meta = parse_manifest(manifest)
            if meta is None or meta["appid"] in seen_ids:
                continue
            appid = meta["appid"]
            seen_ids.add(appid)
            games.append(SteamGame(
                appid=appid,
                name=meta["name"],
                installdir=meta["installdir"],
                exec_cmd=f"{STEAM_CLI} {STEAM_URL_SCHEME}://rungameid/{appid}",
                icon_hint=icon_hint_for(lib, appid, meta["installdir"]),
            ))

    _log.debug("Found %d Steam games under %s", len(games), root)
    return games
