"""
Ammonia Tab
Slider settings and the weekly ammonia trend chart.
"""
from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QGroupBox, QScrollArea, QFrame
)

from barnmonitor.app.state import Store
from barnmonitor.config import VENT_DOWN_TEMP_RANGE, BEDDING_HEIGHT_RANGE, AMMONIA_LEVEL_RANGE
from barnmonitor.model.barns import AmmoniaStatus
from barnmonitor.model.state import AmmoniaSettings

logger = logging.getLogger(__name__)

GROUP_STYLE = "QGroupBox { background: #F2F2F7; border-radius: 12px; font-weight: bold; padding-top: 20px; }"


class ScaledSlider(QWidget):
    """
    Horizontal QSlider over a float range with min/max captions.

    QSlider is integer-only, so the value is stored multiplied by `scale`.
    """
    def __init__(
        self,
        bounds: tuple[float, float],
        value: float,
        on_change: Callable[[float], None],
        unit: str = "",
        scale: int = 1,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._scale = scale
        self._on_change = on_change
        low, high = bounds

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel(f"{low:g}{unit}"))

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(round(low * scale), round(high * scale))
        self.slider.setValue(round(value * scale))
        self.slider.valueChanged.connect(self._emit)
        layout.addWidget(self.slider, 1)

        layout.addWidget(QLabel(f"{high:g}{unit}"))

    def set_value(self, value: float) -> None:
        self.slider.blockSignals(True)
        self.slider.setValue(round(value * self._scale))
        self.slider.blockSignals(False)

    def value(self) -> float:
        return self.slider.value() / self._scale

    def _emit(self, _raw: int) -> None:
        self._on_change(self.value())


class AmmoniaTab(QWidget):
    def __init__(self, store: Store, parent=None) -> None:
        super().__init__(parent)
        self.store = store
        settings = store.state.settings

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        root.addWidget(scroll)

        content = QWidget()
        scroll.setWidget(content)
        layout = QVBoxLayout(content)
        layout.setSpacing(24)

        lbl_title = QLabel("Ammonia")
        lbl_title.setStyleSheet("font-size: 28px; font-weight: bold;")
        layout.addWidget(lbl_title)

        # --- Vent down temperature ---
        grp_vent = QGroupBox()
        grp_vent.setStyleSheet(GROUP_STYLE)
        l_vent = QVBoxLayout(grp_vent)
        self.lbl_vent = QLabel()
        self.lbl_vent.setStyleSheet("font-weight: bold;")
        l_vent.addWidget(self.lbl_vent)
        self.slider_vent = ScaledSlider(
            VENT_DOWN_TEMP_RANGE, settings.vent_down_temp, self.store.set_vent_down_temp, unit=" °C", scale=100
        )
        l_vent.addWidget(self.slider_vent)
        layout.addWidget(grp_vent)

        # --- Bedding height ---
        grp_bed = QGroupBox()
        grp_bed.setStyleSheet(GROUP_STYLE)
        l_bed = QVBoxLayout(grp_bed)
        lbl_bed = QLabel("Bedding height")
        lbl_bed.setStyleSheet("font-weight: bold;")
        l_bed.addWidget(lbl_bed)
        self.slider_bed = ScaledSlider(BEDDING_HEIGHT_RANGE, settings.bedding_height, self.store.set_bedding_height)
        l_bed.addWidget(self.slider_bed)
        layout.addWidget(grp_bed)

        # --- Ammonia level (percent) ---
        grp_level = QGroupBox()
        grp_level.setStyleSheet(GROUP_STYLE)
        l_level = QVBoxLayout(grp_level)
        lbl_level_title = QLabel("Ammonia level")
        lbl_level_title.setStyleSheet("font-weight: bold;")
        l_level.addWidget(lbl_level_title)
        self.lbl_level = QLabel()
        self.lbl_level.setStyleSheet("font-size: 28px; font-weight: bold;")
        l_level.addWidget(self.lbl_level)
        self.slider_level = ScaledSlider(
            AMMONIA_LEVEL_RANGE, settings.ammonia_level, self.store.set_ammonia_level, unit=" %"
        )
        l_level.addWidget(self.slider_level)
        layout.addWidget(grp_level)

        # --- Trend chart ---
        grp_trend = QGroupBox()
        grp_trend.setStyleSheet(GROUP_STYLE)
        l_trend = QVBoxLayout(grp_trend)
        lbl_trend = QLabel("Ammonia Trend")
        lbl_trend.setStyleSheet("font-weight: bold;")
        l_trend.addWidget(lbl_trend)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.setMinimumHeight(200)
        self.plot_widget.showGrid(x=False, y=True, alpha=0.3)
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setMouseEnabled(x=False, y=False)
        l_trend.addWidget(self.plot_widget)

        legend = QHBoxLayout()
        for status in AmmoniaStatus:
            dot = QLabel("●")
            dot.setStyleSheet(f"color: {status.color};")
            legend.addWidget(dot)
            legend.addWidget(QLabel(status.label))
        legend.addStretch()
        l_trend.addLayout(legend)

        layout.addWidget(grp_trend)
        layout.addStretch()

        self.store.settings_changed.connect(self.on_settings_changed)
        self.on_settings_changed(settings)
        self._plot_trend()

    def on_settings_changed(self, settings: AmmoniaSettings) -> None:
        self.lbl_vent.setText(f"Vent Down temperature: {settings.vent_down_temp:.2f}°C")
        self.lbl_level.setText(f"{int(settings.ammonia_level)} %")
        self.slider_vent.set_value(settings.vent_down_temp)
        self.slider_bed.set_value(settings.bedding_height)
        self.slider_level.set_value(settings.ammonia_level)

    def _plot_trend(self) -> None:
        readings = self.store.state.readings
        self.plot_widget.clear()
        if not readings:
            return

        x = np.arange(len(readings))
        series = (
            (AmmoniaStatus.HEALTHY, [r.safe for r in readings]),
            (AmmoniaStatus.MEDIUM, [r.warning for r in readings]),
            (AmmoniaStatus.CRITICAL, [r.critical for r in readings]),
        )
        for status, values in series:
            self.plot_widget.plot(x, values, pen=pg.mkPen(color=status.color, width=2))

        self.plot_widget.getAxis('bottom').setTicks([[(i, r.date) for i, r in enumerate(readings)]])
        logger.debug(f"Trend chart drawn with {len(readings)} readings.")
