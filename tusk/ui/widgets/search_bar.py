"""Search bar widget forwarding every edit and the Return key."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLineEdit


class SearchBar(QWidget):
    """Search input; emits on every keystroke, no debounce."""

    search_changed = pyqtSignal(str)
    submitted = pyqtSignal()

    def __init__(self, placeholder: str = "Search...", parent=None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.search_input = QLineEdit()
        self.search_input.setObjectName("searchBar")
        self.search_input.setPlaceholderText(placeholder)
        self.search_input.setClearButtonEnabled(True)
        layout.addWidget(self.search_input, 1)

        self.search_input.textChanged.connect(self.search_changed.emit)
        self.search_input.returnPressed.connect(self.submitted.emit)

    def text(self) -> str:
        return self.search_input.text()

    def set_text_silently(self, text: str) -> None:
        """Replace the text without emitting ``search_changed``."""
        self.search_input.blockSignals(True)
        self.search_input.setText(text)
        self.search_input.blockSignals(False)

    def focus(self) -> None:
        self.search_input.setFocus()
