"""Entry point for Tusk Launcher."""

import os
import sys

os.environ.setdefault("QT_LOGGING_RULES", "qt.svg.warning=false;qt.qpa.services.warning=false")

from tusk.core.logger import get_logger, setup_logging

setup_logging()

from tusk.app import TuskApp
from tusk.ui.launcher_window import LauncherWindow

_log = get_logger("main")


def main() -> None:
    app = TuskApp(sys.argv)

    if not app.acquire_lock():
        _log.warning("Tusk Launcher is already running")
        sys.exit(1)

    window = LauncherWindow(app)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
