"""Always-on-top launcher window: clock, search, results, volume and power."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QIcon, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QInputDialog,
)

from tusk.app import TuskApp
from tusk.core.app_launcher import AppLauncher, LAUNCH_OPTIONS_PREFIX
from tusk.core.audio import AudioController
from tusk.core.catalog import build_catalog
from tusk.core.logger import get_logger
from tusk.core.worker import TaskWorker
from tusk.ui.widgets.app_row import AppRow
from tusk.ui.widgets.search_bar import SearchBar

_log = get_logger("ui")

POWER_BUTTONS = [
    ("P", "system-shutdown", "Power off (Ctrl+Shift+P)"),
    ("R", "system-reboot", "Restart (Ctrl+Shift+R)"),
    ("L", "system-log-out", "Log out (Ctrl+Shift+L)"),
]

QUIT_POLL_MS = 100
CLOCK_INTERVAL_MS = 1000


class LauncherWindow(QWidget):
    def __init__(self, app: TuskApp) -> None:
        super().__init__()
        self.app = app
        self.config = app.config
        self.launcher = AppLauncher(self.config)
        self.audio = AudioController(self.config)
        self._icons: dict[str, QIcon] = {}
        self._rows: list[AppRow] = []

        self.setWindowTitle("Application Launcher")
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        self.resize(self.config.get("window_width"), self.config.get("window_height"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)

        layout.addLayout(self._build_header())

        self.search_bar = SearchBar("Search applications...")
        self.search_bar.search_changed.connect(self._on_search)
        self.search_bar.submitted.connect(lambda: self._send("ENTER"))
        layout.addWidget(self.search_bar)

        self._status = QLabel("Loading applications...")
        self._status.setObjectName("statusLabel")
        layout.addWidget(self._status)

        self._results_box = QVBoxLayout()
        self._results_box.setSpacing(2)
        layout.addLayout(self._results_box)
        layout.addStretch()

        if self.config.get("enable_power_options"):
            layout.addLayout(self._build_power_row())

        self._bind_keys()
        self._start_timers()
        self._load_catalog()
        self.search_bar.focus()

    # ── Layout ──
    def _build_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        self._clock = QLabel()
        self._clock.setObjectName("clockLabel")
        self._clock.setVisible(bool(self.config.get("show_time")))
        header.addWidget(self._clock)
        header.addStretch()

        if self.audio.enabled:
            self._volume = QSlider(Qt.Orientation.Horizontal)
            self._volume.setRange(0, int(self.audio.max_volume * 100))
            self._volume.setFixedWidth(120)
            self._volume.setToolTip("Volume")
            self._volume.setValue(int(self.audio.get_volume() * 100))
            self._volume.sliderReleased.connect(
                lambda: self.audio.set_volume(self._volume.value() / 100)
            )
            header.addWidget(self._volume)
        return header

    def _build_power_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch()
        for verb, icon_name, tooltip in POWER_BUTTONS:
            btn = QPushButton(verb)
            btn.setObjectName("secondaryBtn")
            btn.setIcon(QIcon.fromTheme(icon_name))
            btn.setToolTip(tooltip)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda _=False, v=verb: self._send(v))
            row.addWidget(btn)
        return row

    def _bind_keys(self) -> None:
        QShortcut(QKeySequence(Qt.Key.Key_Escape), self, activated=lambda: self._send("ESC"))
        if self.config.get("enable_power_options"):
            for verb, _, _ in POWER_BUTTONS:
                QShortcut(
                    QKeySequence(f"Ctrl+Shift+{verb}"), self,
                    activated=lambda v=verb: self._send(v),
                )

    def _start_timers(self) -> None:
        self._quit_timer = QTimer(self)
        self._quit_timer.setInterval(QUIT_POLL_MS)
        self._quit_timer.timeout.connect(self._check_quit)
        self._quit_timer.start()

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(CLOCK_INTERVAL_MS)
        self._clock_timer.timeout.connect(self._tick_clock)
        self._clock_timer.start()
        self._tick_clock()

        if self.audio.enabled:
            self._volume_timer = QTimer(self)
            self._volume_timer.setInterval(int(self.config.get("volume_update_interval_ms")))
            self._volume_timer.timeout.connect(self._tick_volume)
            self._volume_timer.start()

    def _load_catalog(self) -> None:
        self._catalog_worker = TaskWorker(build_catalog, parent=self)
        self._catalog_worker.finished_sig.connect(self._on_catalog_loaded)
        self._catalog_worker.start()

    # ── Slots ──
    def _on_catalog_loaded(self, ok: bool, result) -> None:
        if ok:
            self.launcher.load_catalog(result)
            self._status.setText(f"{len(result)} applications")
        else:
            self._status.setText("Could not load applications")
        self._refresh_results()

    def _on_search(self, text: str) -> None:
        # Verbs only arrive from shortcuts, buttons and the options dialog.
        self.launcher.set_query(text)
        self._refresh_results()

    def _send(self, verb: str) -> None:
        self.launcher.handle_input(verb)
        self._check_quit()

    def _launch(self, name: str) -> None:
        if not self.launcher.launch_app(name):
            self._status.setText(f"Failed to launch {name}")
        self._check_quit()

    def _edit_options(self, name: str) -> None:
        current = self.launcher.start_launch_options_edit(name)
        text, ok = QInputDialog.getText(
            self,
            f"Launch options: {name}",
            "-e KEY=VALUE  -w DIR  wrapper %command% args",
            text=current,
        )
        if not ok:
            return
        self.launcher.handle_input(f"{LAUNCH_OPTIONS_PREFIX}{name}:{text}")
        self.search_bar.set_text_silently(self.launcher.get_query())
        self._refresh_results()
        self.search_bar.focus()

    def _check_quit(self) -> None:
        if self.launcher.should_quit():
            self._quit_timer.stop()
            self.close()
            self.app.quit()

    def _tick_clock(self) -> None:
        if self.config.get("show_time"):
            self._clock.setText(self.launcher.get_time())

    def _tick_volume(self) -> None:
        if not self._volume.isSliderDown():
            self._volume.setValue(int(self.audio.refresh() * 100))

    # ── Results ──
    def _icon_for(self, name: str) -> QIcon | None:
        path = self.launcher.get_icon_path(name)
        if not path:
            return None
        if path not in self._icons:
            self._icons[path] = QIcon(path)
        return self._icons[path]

    def _refresh_results(self) -> None:
        for row in self._rows:
            self._results_box.removeWidget(row)
            row.deleteLater()
        self._rows = []

        for idx, name in enumerate(self.launcher.get_search_results()):
            row = AppRow(
                name,
                icon=self._icon_for(name),
                has_options=self.launcher.get_launch_options(name) is not None,
                selected=idx == 0,
            )
            row.launch_clicked.connect(self._launch)
            row.options_clicked.connect(self._edit_options)
            self._results_box.addWidget(row)
            self._rows.append(row)

    def closeEvent(self, event) -> None:
        if not self.launcher.should_quit():
            self.config.set("window_width", self.width())
            self.config.set("window_height", self.height())
        super().closeEvent(event)
