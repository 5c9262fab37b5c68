from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QPushButton, QWidget, QSizePolicy

from barnmonitor.model.state import Control

ACTIVE_STYLE = """
    QPushButton {
        background-color: #34C759; color: white;
        border: 2px solid #34C759; border-radius: 16px;
        font-weight: bold;
    }
"""
INACTIVE_STYLE = """
    QPushButton {
        background-color: rgba(142, 142, 147, 50); color: gray;
        border: 2px solid rgba(142, 142, 147, 80); border-radius: 16px;
    }
"""


class ControlButton(QPushButton):
    """Large toggle tile: label on top, current value below."""
    control_toggled = Signal(object)  # Control

    def __init__(self, control: Control, value: str, active: bool = False, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.control = control
        self._value = value

        self.setCheckable(True)
        self.setChecked(active)
        self.setMinimumHeight(120)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.toggled.connect(self._on_toggled)
        self.refresh()

    def set_value(self, value: str) -> None:
        self._value = value
        self.refresh()

    def _on_toggled(self, _checked: bool) -> None:
        self.refresh()
        self.control_toggled.emit(self.control)

    def refresh(self) -> None:
        self.setText(f"{self.control.value}\n{self._value}")
        self.setStyleSheet(ACTIVE_STYLE if self.isChecked() else INACTIVE_STYLE)
