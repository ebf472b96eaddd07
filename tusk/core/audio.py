"""Default-sink volume control through PipeWire's ``wpctl``."""

from __future__ import annotations

import subprocess
from typing import Callable

from tusk.core.config import Config
from tusk.core.logger import get_logger

_log = get_logger("audio")

SINK = "@DEFAULT_AUDIO_SINK@"


class AudioController:
    """Caches the sink volume; inert when audio control is disabled.

    The GUI calls :meth:`refresh` on its own timer instead of this class
    running a polling thread.
    """

    def __init__(self, config: Config, runner: Callable = subprocess.run) -> None:
        self._run = runner
        self.enabled: bool = bool(config.get("enable_audio_control"))
        self.max_volume: float = float(config.get("max_volume"))
        self._volume = 0.0
        if self.enabled:
            self.refresh()

    def _read_volume(self) -> float | None:
        try:
            result = self._run(
                ["wpctl", "get-volume", SINK],
                capture_output=True, text=True, timeout=2,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            _log.debug("wpctl get-volume failed: %s", e)
            return None
        # Output looks like "Volume: 0.50" or "Volume: 0.50 [MUTED]"
        parts = result.stdout.split()
        if len(parts) < 2:
            return None
        try:
            return float(parts[1])
        except ValueError:
            return None

    def refresh(self) -> float:
        if self.enabled:
            volume = self._read_volume()
            if volume is not None:
                self._volume = volume
        return self.get_volume()

    def set_volume(self, new_volume: float) -> bool:
        if not self.enabled:
            return True
        clamped = min(max(new_volume, 0.0), self.max_volume)
        try:
            self._run(
                ["wpctl", "set-volume", SINK, f"{clamped:.2f}"],
                capture_output=True, text=True, timeout=2,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            _log.warning("Failed to set volume: %s", e)
            return False
        self._volume = clamped
        return True

    def get_volume(self) -> float:
        return self._volume if self.enabled else 0.0
