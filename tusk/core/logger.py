"""Logging setup for Tusk Launcher: file handler, stderr warnings, excepthook."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from tusk.core.paths import app_cache_dir

LOG_FILENAME = "tusk-launcher.log"
LOG_MAX_BYTES = 512 * 1024  # 512 KB
LOG_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> None:
    """Configure logging to file and stderr, and install an excepthook."""
    root = logging.getLogger("tusk")
    root.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if not root.handlers:
        formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
        try:
            from logging.handlers import RotatingFileHandler

            app_cache_dir().mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                get_log_path(),
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            root.addHandler(handler)
            threshold = logging.WARNING
        except OSError:
            threshold = logging.DEBUG

        stderr = logging.StreamHandler(sys.stderr)
        stderr.setLevel(threshold)
        stderr.setFormatter(formatter)
        root.addHandler(stderr)

    sys.excepthook = _excepthook


def _excepthook(exc_type: type, exc_value: BaseException, exc_tb) -> None:
    """Log uncaught exceptions to file and stderr."""
    lines = traceback.format_exception(exc_type, exc_value, exc_tb)
    msg = "".join(lines)
    logger = logging.getLogger("tusk")
    logger.critical("Uncaught exception:\n%s", msg)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"tusk.{name}")


def get_log_path() -> Path:
    """Return the path to the log file."""
    return app_cache_dir() / LOG_FILENAME
