"""QApplication subclass handling the theme and single-instance locking."""

from pathlib import Path

from PyQt6.QtCore import QLockFile, QStandardPaths
from PyQt6.QtWidgets import QApplication

from tusk import __app_name__, __version__
from tusk.core.config import Config
from tusk.core.logger import get_logger

_log = get_logger("app")

THEMES_DIR = Path(__file__).parent / "themes"
DEFAULT_THEME = "dark"


class TuskApp(QApplication):
    """Main application for Tusk Launcher."""

    def __init__(self, argv: list[str]) -> None:
        super().__init__(argv)
        self.setApplicationName(__app_name__)
        self.setApplicationVersion(__version__)
        self.setDesktopFileName("tusk-launcher")
        self.setQuitOnLastWindowClosed(True)

        self.config = Config()
        self.apply_theme(self.config.get("theme"))

    # ── Lock file for single instance ──
    def acquire_lock(self) -> bool:
        tmp = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.TempLocation)
        self._lock = QLockFile(f"{tmp}/tusk-launcher.lock")
        return self._lock.tryLock(100)

    # ── Theme ──
    def apply_theme(self, theme_name: str) -> None:
        self.setStyleSheet(load_stylesheet(theme_name))


def load_stylesheet(theme_name: str) -> str:
    """Return the QSS for ``theme_name``, falling back to the dark theme."""
    qss_file = THEMES_DIR / f"{theme_name}.qss"
    if not qss_file.exists():
        qss_file = THEMES_DIR / f"{DEFAULT_THEME}.qss"
    try:
        return qss_file.read_text(encoding="utf-8")
    except OSError as e:
        _log.warning("Cannot read theme %s: %s", qss_file, e)
        return ""
