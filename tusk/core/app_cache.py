"""Persistent per-app records: recency order, launch options, resolved icon dir.

The store is an ordered list of ``(name, AppRecord)``; index 0 is the most
recently launched app. It lives in ``~/.config/tusk-launcher/app_cache.txt``::

    APP_CACHE_V1
    <name>\\t<launch options or empty>\\t<icon dir or empty>

Fields are escaped (``\\\\``, ``\\t``, ``\\n``). Files written by older
releases are TOML documents with ``recent_apps``, ``launch_options`` and
``icon_directories``; they are migrated once and rewritten in V1 form.
"""

from __future__ import annotations

import os
import threading
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from tusk.core import launch_options as lo
from tusk.core.launch_options import LaunchOptions
from tusk.core.logger import get_logger
from tusk.core.paths import app_config_dir

_log = get_logger("app_cache")

CACHE_FILENAME = "app_cache.txt"
CACHE_HEADER = "APP_CACHE_V1"
BACKUP_SUFFIX = ".bak"
MAX_RECENT_APPS = 10


@dataclass
class AppRecord:
    launch_options: LaunchOptions | None = None
    icon_directory: str | None = None


# ── Line format ──

def escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


def unescape(s: str) -> str:
    out: list[str] = []
    chars = iter(s)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        nxt = next(chars, None)
        if nxt is None:
            out.append("\\")
        elif nxt == "\\":
            out.append("\\")
        elif nxt == "t":
            out.append("\t")
        elif nxt == "n":
            out.append("\n")
        else:
            out.append("\\" + nxt)
    return "".join(out)


def serialize(apps: list[tuple[str, AppRecord]]) -> str:
    lines = [CACHE_HEADER]
    for name, record in apps:
        opts = escape(lo.encode(record.launch_options)) if record.launch_options else ""
        icon = escape(record.icon_directory) if record.icon_directory else ""
        lines.append(f"{escape(name)}\t{opts}\t{icon}")
    return "\n".join(lines) + "\n"


def deserialize(text: str) -> list[tuple[str, AppRecord]]:
    """Parse a V1 document. Raises ValueError if the header is missing."""
    lines = text.split("\n")
    if not lines or lines[0].rstrip("\r") != CACHE_HEADER:
        raise ValueError("Unsupported cache file version")

    apps: list[tuple[str, AppRecord]] = []
    seen: set[str] = set()
    for line in lines[1:]:
        if not line.strip():
            continue
        parts = line.rstrip("\r").split("\t")
        if len(parts) != 3:
            continue
        name = unescape(parts[0])
        if name in seen:
            continue
        options = None
        if parts[1]:
            options = lo.decode(unescape(parts[1]))
            if options is None:
                _log.warning("Skipping cache record with bad launch options: %r", name)
                continue
        icon_dir = unescape(parts[2]) or None
        seen.add(name)
        apps.append((name, AppRecord(launch_options=options, icon_directory=icon_dir)))
    return apps


def migrate_legacy(text: str) -> list[tuple[str, AppRecord]]:
    """Rebuild the ordered store from the pre-V1 TOML layout.

    Names from ``recent_apps`` come first in their stored order, followed by
    the remaining keys of ``launch_options`` and ``icon_directories`` sorted.
    Raises ValueError when the document is not a legacy cache.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Not a legacy cache: {e}") from e

    legacy_keys = ("recent_apps", "launch_options", "icon_directories")
    if not any(k in data for k in legacy_keys):
        raise ValueError("Not a legacy cache: no known keys")

    recent = data.get("recent_apps", [])
    options_map = data.get("launch_options", {})
    icons_map = data.get("icon_directories", {})
    if not isinstance(recent, list) or not isinstance(options_map, dict) \
            or not isinstance(icons_map, dict):
        raise ValueError("Not a legacy cache: unexpected value types")

    order: list[str] = []
    for name in recent:
        if isinstance(name, str) and name not in order:
            order.append(name)
    for name in sorted(set(options_map) | set(icons_map)):
        if name not in order:
            order.append(name)

    apps: list[tuple[str, AppRecord]] = []
    for name in order:
        record = AppRecord()
        raw_opts = options_map.get(name)
        if isinstance(raw_opts, dict):
            env = raw_opts.get("environment_vars", {})
            record.launch_options = LaunchOptions(
                custom_command=raw_opts.get("custom_command") or None,
                working_directory=raw_opts.get("working_directory") or None,
                environment_vars={str(k): str(v) for k, v in env.items()}
                if isinstance(env, dict) else {},
            )
        icon_dir = icons_map.get(name)
        if isinstance(icon_dir, str) and icon_dir:
            record.icon_directory = icon_dir
        apps.append((name, record))
    return apps


def _copy_options(options: LaunchOptions | None) -> LaunchOptions | None:
    if options is None:
        return None
    return replace(options, environment_vars=dict(options.environment_vars))


def _copy_record(record: AppRecord) -> AppRecord:
    return replace(record, launch_options=_copy_options(record.launch_options))


# ── Store ──

class AppCache:
    """Ordered, lock-guarded app record store backed by a single file.

    Every mutation is a read-modify-write under one lock followed by an
    atomic whole-file rewrite. Write failures are logged; the in-memory
    state stays authoritative for the rest of the session. A file that can
    be neither read nor migrated is moved to ``app_cache.txt.bak`` first;
    if that move fails the store never writes.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or app_config_dir() / CACHE_FILENAME
        self._lock = threading.Lock()
        self._writable = True
        self._apps: list[tuple[str, AppRecord]] = self._load()

    def _load(self) -> list[tuple[str, AppRecord]]:
        if not self.path.exists():
            return []
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _log.warning("Cannot read %s: %s", self.path, e)
            self._set_aside()
            return []

        try:
            return deserialize(text)
        except ValueError:
            pass

        try:
            apps = migrate_legacy(text)
        except ValueError as e:
            _log.warning("Cannot migrate %s, starting empty: %s", self.path, e)
            self._set_aside()
            return []
        _log.info("Migrated %d records from legacy cache format", len(apps))
        self._write(apps)
        return apps

    def _set_aside(self) -> None:
        backup = self.path.with_name(self.path.name + BACKUP_SUFFIX)
        try:
            os.replace(self.path, backup)
        except OSError as e:
            _log.warning("Cannot back up %s, cache will not be saved: %s", self.path, e)
            self._writable = False
            return
        _log.info("Moved unreadable cache to %s", backup)

    def _write(self, apps: list[tuple[str, AppRecord]]) -> None:
        if not self._writable:
            return
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(serialize(apps), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            _log.warning("Cannot write %s: %s", self.path, e)

    def _index(self, name: str) -> int | None:
        for i, (key, _) in enumerate(self._apps):
            if key == name:
                return i
        return None

    # ── Readers ──
    def get_all(self) -> list[tuple[str, AppRecord]]:
        with self._lock:
            return [(name, _copy_record(record)) for name, record in self._apps]

    def names(self) -> list[str]:
        with self._lock:
            return [name for name, _ in self._apps]

    def get(self, name: str) -> AppRecord | None:
        with self._lock:
            idx = self._index(name)
            return _copy_record(self._apps[idx][1]) if idx is not None else None

    def launch_options_map(self) -> dict[str, LaunchOptions]:
        with self._lock:
            return {
                name: _copy_options(record.launch_options)
                for name, record in self._apps
                if record.launch_options is not None
            }

    # ── Writers ──
    def promote_recency(self, name: str) -> None:
        """Move ``name`` to the front (inserting it if new) and keep the newest 10."""
        with self._lock:
            idx = self._index(name)
            record = self._apps.pop(idx)[1] if idx is not None else AppRecord()
            self._apps.insert(0, (name, record))
            del self._apps[MAX_RECENT_APPS:]
            self._write(self._apps)

    def set_launch_options(self, name: str, options: LaunchOptions | None) -> None:
        with self._lock:
            self._upsert(name).launch_options = _copy_options(options)
            self._write(self._apps)

    def set_icon_directory(self, name: str, icon_dir: str | None) -> None:
        with self._lock:
            self._upsert(name).icon_directory = icon_dir
            self._write(self._apps)

    def _upsert(self, name: str) -> AppRecord:
        idx = self._index(name)
        if idx is not None:
            return self._apps[idx][1]
        record = AppRecord()
        self._apps.append((name, record))
        return record
