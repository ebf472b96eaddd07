"""One search result: icon, name and a launch-options button."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal, QSize
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QSizePolicy

ICON_SIZE = 32


class AppRow(QFrame):
    """Clickable result row.

    Signals:
        launch_clicked(str)  - app name
        options_clicked(str) - app name
    """

    launch_clicked = pyqtSignal(str)
    options_clicked = pyqtSignal(str)

    def __init__(
        self,
        name: str,
        icon: QIcon | None = None,
        has_options: bool = False,
        selected: bool = False,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.app_name = name
        self.setObjectName("appRowSelected" if selected else "appRow")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.setFixedHeight(ICON_SIZE + 16)

        root = QHBoxLayout(self)
        root.setContentsMargins(8, 4, 8, 4)
        root.setSpacing(10)

        self._icon_label = QLabel()
        self._icon_label.setFixedSize(ICON_SIZE, ICON_SIZE)
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.set_icon(icon)
        root.addWidget(self._icon_label)

        name_label = QLabel(name)
        name_label.setObjectName("appName")
        if selected:
            font = name_label.font()
            font.setBold(True)
            name_label.setFont(font)
        root.addWidget(name_label, 1)

        options_btn = QPushButton("⚙*" if has_options else "⚙")
        options_btn.setObjectName("secondaryBtn")
        options_btn.setToolTip("Launch options")
        options_btn.setFixedSize(36, 24)
        options_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        options_btn.clicked.connect(lambda: self.options_clicked.emit(self.app_name))
        root.addWidget(options_btn)

    def set_icon(self, icon: QIcon | None) -> None:
        if icon and not icon.isNull():
            self._icon_label.setPixmap(icon.pixmap(QSize(ICON_SIZE, ICON_SIZE)))
            self._icon_label.setStyleSheet("")
        else:
            self._icon_label.setText(self.app_name[:1].upper())
            self._icon_label.setStyleSheet(
                "background: #45475a; border-radius: 6px; color: #cdd6f4; font-weight: bold;"
            )

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.launch_clicked.emit(self.app_name)
        super().mouseReleaseEvent(event)
