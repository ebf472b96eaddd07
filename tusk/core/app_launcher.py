"""Launcher facade: the query/results/launch surface the GUI drives.

The GUI forwards every edit of the search field to :meth:`AppLauncher.handle_input`.
A few strings are verbs rather than queries:

    ESC                         quit
    ENTER                       launch the first result
    P / R / L                   power off / restart / log out (if enabled)
    LAUNCH_OPTIONS:<app>:<opts> save launch options for <app>

Names and options containing ``:`` cannot pass through that channel.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from tusk.core import power
from tusk.core.app_cache import AppCache
from tusk.core.catalog import CatalogEntry
from tusk.core.clock import get_current_time
from tusk.core.config import Config
from tusk.core.icon_resolver import resolve_icon_path
from tusk.core.launch import launch_app as spawn_app
from tusk.core.launch_options import (
    LaunchOptions,
    format_input,
    has_reserved_chars,
    parse_input,
)
from tusk.core.logger import get_logger

_log = get_logger("app_launcher")

LAUNCH_OPTIONS_PREFIX = "LAUNCH_OPTIONS:"


class AppLauncher:
    def __init__(
        self,
        config: Config,
        cache: AppCache | None = None,
        catalog: Sequence[CatalogEntry] | None = None,
        icon_roots: Sequence[Path] | None = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else AppCache()
        self._icon_roots = icon_roots
        self._catalog: list[CatalogEntry] = []
        self._by_name: dict[str, CatalogEntry] = {}
        self._results: list[CatalogEntry] = []
        self._query = ""
        self._quit = False
        self._launch_options: dict[str, LaunchOptions] = self.cache.launch_options_map()
        if catalog is not None:
            self.load_catalog(catalog)

    def load_catalog(self, catalog: Sequence[CatalogEntry]) -> None:
        """Install the (immutable) catalog and derive the initial results."""
        self._catalog = list(catalog)
        self._by_name = {entry.name: entry for entry in self._catalog}
        if self._query:
            self._refresh_results()
        elif self._recent_enabled():
            self._results = self._recent_results()
        else:
            self._results = []

    # ── Queries ──
    def get_query(self) -> str:
        return self._query

    def get_search_results(self) -> list[str]:
        return [entry.name for entry in self._results]

    def get_time(self) -> str:
        return get_current_time(self.config)

    def get_config(self) -> Config:
        return self.config

    def should_quit(self) -> bool:
        return self._quit

    def get_launch_options(self, app_name: str) -> LaunchOptions | None:
        return self._launch_options.get(app_name)

    def start_launch_options_edit(self, app_name: str) -> str:
        return format_input(self._launch_options.get(app_name))

    def get_icon_path(self, app_name: str) -> str | None:
        entry = self._find(app_name)
        if entry is None:
            return None
        return resolve_icon_path(
            entry.name,
            entry.icon_hint,
            self.cache,
            enabled=bool(self.config.get("enable_icons")),
            roots=self._icon_roots,
        )

    # ── Actions ──
    def update(self) -> None:
        if self._quit:
            sys.exit(0)

    def launch_app(self, app_name: str) -> bool:
        entry = self._find(app_name)
        if entry is None:
            _log.warning("Cannot launch unknown app %r", app_name)
            return False
        return self._launch(entry)

    def handle_input(self, text: str) -> None:
        if text.startswith(LAUNCH_OPTIONS_PREFIX):
            self._save_launch_options(text)
        elif text == "ESC":
            self._quit = True
        elif text == "ENTER":
            if self._results:
                self._launch(self._results[0])
        elif text in ("P", "R", "L") and self.config.get("enable_power_options"):
            self._power_action(text)
        else:
            self.set_query(text)

    def set_query(self, text: str) -> None:
        """Replace the query without interpreting verbs. Used for typed text."""
        self._query = text
        self._refresh_results()

    # ── Internals ──
    def _recent_enabled(self) -> bool:
        return bool(self.config.get("enable_recent_apps"))

    def _max_results(self) -> int:
        return max(int(self.config.get("max_search_results")), 0)

    def _find(self, app_name: str) -> CatalogEntry | None:
        for entry in self._results:
            if entry.name == app_name:
                return entry
        return self._by_name.get(app_name)

    def _recent_results(self) -> list[CatalogEntry]:
        recent = [self._by_name[n] for n in self.cache.names() if n in self._by_name]
        return recent[:self._max_results()]

    def _refresh_results(self) -> None:
        if not self._query.strip() and self._recent_enabled():
            self._results = self._recent_results()
            return
        needle = self._query.lower()
        limit = self._max_results()
        results: list[CatalogEntry] = []
        for entry in self._catalog:
            if len(results) >= limit:
                break
            if needle in entry.name.lower():
                results.append(entry)
        self._results = results

    def _launch(self, entry: CatalogEntry) -> bool:
        ok = spawn_app(
            entry.name,
            entry.exec_cmd,
            self._launch_options.get(entry.name),
            cache=self.cache,
            enable_recent_apps=self._recent_enabled(),
        )
        if ok:
            self._quit = True
        return ok

    def _save_launch_options(self, text: str) -> None:
        parts = text.split(":")
        if len(parts) < 3:
            _log.warning("Malformed launch options request: %r", text)
            return
        app_name, raw = parts[1], parts[2]
        options = parse_input(raw)
        if has_reserved_chars(options):
            _log.warning("Launch options for %s contain '|' or ','; not saved", app_name)
            return
        if options.is_empty():
            self._launch_options.pop(app_name, None)
            if self.cache.get(app_name) is not None:
                self.cache.set_launch_options(app_name, None)
        else:
            self._launch_options[app_name] = options
            self.cache.set_launch_options(app_name, options)
        self._query = ""
        self._refresh_results()

    def _power_action(self, verb: str) -> None:
        actions = {"P": power.power_off, "R": power.restart, "L": power.logout}
        actions[verb](self.config)
