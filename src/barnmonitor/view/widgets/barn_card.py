"""
Barn Card Widget
Summary tile of a single barn on the dashboard list.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import (
    QFrame, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QProgressBar
)

from barnmonitor.model.barns import Barn, ppm_fill_fraction

SECONDARY_COLOR = "#8E8E93"
ACCENT_COLOR = "#34C759"


class StatItem(QWidget):
    """Caption over a small value, e.g. 'Humidity' / '55%'."""
    def __init__(self, caption: str, value: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        lbl_caption = QLabel(caption)
        lbl_caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        lbl_caption.setStyleSheet(f"color: {ACCENT_COLOR}; font-weight: bold; font-size: 11px;")
        layout.addWidget(lbl_caption)

        lbl_value = QLabel(value)
        lbl_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        lbl_value.setStyleSheet(f"color: {SECONDARY_COLOR}; font-size: 11px;")
        layout.addWidget(lbl_value)


class BarnCard(QFrame):
    clicked = Signal(object)  # Barn

    def __init__(self, barn: Barn, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.barn = barn
        status_color = barn.status.color

        self.setObjectName("BarnCard")
        self.setStyleSheet("""
            QFrame#BarnCard { background: white; border: 1px solid #E5E5EA; border-radius: 16px; }
        """)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        root = QHBoxLayout(self)
        root.setSpacing(16)

        # Photo placeholder (images are not downloaded)
        thumb = QLabel(barn.name.split()[-1] if barn.name.strip() else "?")
        thumb.setFixedSize(100, 100)
        thumb.setAlignment(Qt.AlignmentFlag.AlignCenter)
        thumb.setStyleSheet(
            "background: #D9C8A9; border-radius: 12px; color: #6B4F2A; font-size: 28px; font-weight: bold;"
        )
        root.addWidget(thumb)

        info = QVBoxLayout()
        info.setSpacing(8)
        root.addLayout(info, 1)

        # Header: name | ppm
        header = QHBoxLayout()
        lbl_name = QLabel(barn.name)
        lbl_name.setStyleSheet("font-size: 20px; font-weight: bold;")
        header.addWidget(lbl_name)
        header.addStretch()

        ppm_box = QVBoxLayout()
        ppm_box.setSpacing(2)
        self.lbl_ppm = QLabel(f"{barn.ammonia_ppm} ppm")
        self.lbl_ppm.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.lbl_ppm.setStyleSheet(f"color: {status_color}; font-size: 17px; font-weight: bold;")
        ppm_box.addWidget(self.lbl_ppm)
        lbl_nh3 = QLabel("NH₃")
        lbl_nh3.setAlignment(Qt.AlignmentFlag.AlignRight)
        lbl_nh3.setStyleSheet(f"color: {SECONDARY_COLOR}; font-size: 11px;")
        ppm_box.addWidget(lbl_nh3)
        header.addLayout(ppm_box)
        info.addLayout(header)

        # Progress bar, full at the critical limit
        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setValue(round(ppm_fill_fraction(barn.ammonia_ppm) * 100))
        self.progress.setTextVisible(False)
        self.progress.setFixedHeight(8)
        self.progress.setStyleSheet(f"""
            QProgressBar {{ background: rgba(142, 142, 147, 50); border: none; border-radius: 4px; }}
            QProgressBar::chunk {{ background: {status_color}; border-radius: 4px; }}
        """)
        info.addWidget(self.progress)

        stats = QHBoxLayout()
        stats.setSpacing(16)
        stats.addWidget(StatItem("Humidity", f"{barn.humidity}%"))
        stats.addWidget(StatItem("Target", f"{int(barn.target_temp)}°C"))
        stats.addWidget(StatItem("NH₃", f"{barn.ammonia_ppm} ppm"))
        stats.addWidget(StatItem("Fan", barn.vent_status.value))
        stats.addStretch()
        info.addLayout(stats)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.barn)
        super().mouseReleaseEvent(event)
