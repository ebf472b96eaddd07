"""Configuration manager for Tusk Launcher. Persists settings to ~/.config/tusk-launcher/settings.json."""

import copy
import json
from pathlib import Path
from typing import Any

from tusk.core.paths import app_config_dir

SETTINGS_FILENAME = "settings.json"

DEFAULTS: dict[str, Any] = {
    "enable_recent_apps": True,
    "max_search_results": 5,
    "enable_icons": True,
    "enable_power_options": True,
    "show_time": True,
    "time_format": "%I:%M %p",
    "time_order": "MdyHms",
    "enable_audio_control": True,
    "max_volume": 1.5,
    "volume_update_interval_ms": 500,
    "power_commands": [
        "systemctl poweroff",
        "loginctl poweroff",
        "poweroff",
        "halt",
    ],
    "restart_commands": [
        "systemctl reboot",
        "loginctl reboot",
        "reboot",
    ],
    "logout_commands": [
        "loginctl terminate-session $XDG_SESSION_ID",
        "hyprctl dispatch exit",
        "swaymsg exit",
        "gnome-session-quit --logout --no-prompt",
        "qdbus org.kde.ksmserver /KSMServer logout 0 0 0",
    ],
    "theme": "dark",
    "window_width": 350,
    "window_height": 500,
}


class Config:
    """Settings manager with JSON persistence.

    ``settings_file`` defaults to ``<config_root>/tusk-launcher/settings.json``.
    A missing or unreadable file leaves every key at its default.
    """

    def __init__(self, settings_file: Path | None = None) -> None:
        self.settings_file = settings_file or app_config_dir() / SETTINGS_FILENAME
        self._data: dict[str, Any] = copy.deepcopy(DEFAULTS)
        self._load()

    def _load(self) -> None:
        if self.settings_file.exists():
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                if isinstance(saved, dict):
                    self._data.update(saved)
            except (json.JSONDecodeError, OSError):
                pass

    def save(self) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError:
            pass

    def get(self, key: str, fallback: Any = None) -> Any:
        return self._data.get(key, fallback if fallback is not None else DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def reset(self) -> None:
        self._data = copy.deepcopy(DEFAULTS)
        self.save()
