"""QThread-based background task runner."""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QThread, pyqtSignal

from tusk.core.logger import get_logger

_log = get_logger("worker")


class TaskWorker(QThread):
    """Runs an arbitrary Python callable in a background thread.

    Signals:
        finished_sig(bool, object) - (success, result or exception)
    """

    finished_sig = pyqtSignal(bool, object)

    def __init__(self, task: Callable, *args, parent=None, **kwargs) -> None:
        super().__init__(parent)
        self._task = task
        self._args = args
        self._kwargs = kwargs

    def run(self) -> None:
        try:
            result = self._task(*self._args, **self._kwargs)
            self.finished_sig.emit(True, result)
        except Exception as e:
            _log.exception("TaskWorker: %s failed", getattr(self._task, "__name__", self._task))
            self.finished_sig.emit(False, e)
