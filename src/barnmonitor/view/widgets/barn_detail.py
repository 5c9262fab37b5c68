"""
Barn Detail Page
Header, 3D heat-map, control tiles and sensor list of one barn.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
    QScrollArea, QFrame, QMessageBox
)

from barnmonitor.app.state import Store
from barnmonitor.model.barns import Barn, Sensor, classify_ppm, default_sensors
from barnmonitor.model.heatmap import InvalidInputError
from barnmonitor.model.state import Control, ControlToggles
from barnmonitor.view.widgets.control_button import ControlButton
from barnmonitor.view.widgets.heatmap_3d import BarnHeatMapWidget

logger = logging.getLogger(__name__)


class SensorCard(QFrame):
    def __init__(self, sensor: Sensor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("SensorCard")
        self.setStyleSheet("QFrame#SensorCard { background: #F2F2F7; border-radius: 12px; }")

        layout = QHBoxLayout(self)

        text = QVBoxLayout()
        lbl_name = QLabel(sensor.name)
        lbl_name.setStyleSheet("font-weight: bold;")
        text.addWidget(lbl_name)
        lbl_status = QLabel(sensor.status.value)
        lbl_status.setStyleSheet("color: #8E8E93;")
        text.addWidget(lbl_status)
        layout.addLayout(text)
        layout.addStretch()

        # Switched-off sensors have no reading to show
        if sensor.is_on:
            lbl_ppm = QLabel(f"{sensor.ammonia_ppm} ppm")
            lbl_ppm.setStyleSheet(
                f"color: {classify_ppm(sensor.ammonia_ppm).color}; font-size: 17px; font-weight: 600;"
            )
            layout.addWidget(lbl_ppm)


class BarnDetailPage(QWidget):
    back_requested = Signal()

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.barn: Barn | None = None
        self.sensors: list[Sensor] = default_sensors()

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        # --- Navigation bar ---
        nav = QHBoxLayout()
        btn_back = QPushButton("‹ Dashboard")
        btn_back.setFlat(True)
        btn_back.clicked.connect(self.back_requested.emit)
        nav.addWidget(btn_back)
        nav.addStretch()
        self.lbl_title = QLabel()
        self.lbl_title.setStyleSheet("font-weight: bold;")
        nav.addWidget(self.lbl_title)
        nav.addStretch()
        outer.addLayout(nav)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        outer.addWidget(scroll)

        content = QWidget()
        scroll.setWidget(content)
        layout = QVBoxLayout(content)
        layout.setSpacing(24)

        # --- Header ---
        self.lbl_temperature = QLabel()
        self.lbl_temperature.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_temperature.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.lbl_temperature)

        level_row = QHBoxLayout()
        level_row.addStretch()
        self.lbl_level = QLabel()
        level_row.addWidget(self.lbl_level)
        lbl_caption = QLabel("Ammonia Level")
        lbl_caption.setStyleSheet("color: #8E8E93; font-weight: bold;")
        level_row.addWidget(lbl_caption)
        level_row.addStretch()
        layout.addLayout(level_row)

        # --- 3D heat-map ---
        self.heat_map = BarnHeatMapWidget()
        self.heat_map.setMinimumHeight(300)
        layout.addWidget(self.heat_map)

        # --- Control grid ---
        grid = QGridLayout()
        grid.setSpacing(16)
        self.control_buttons: dict[Control, ControlButton] = {}
        controls = self.store.state.controls
        for i, control in enumerate(Control):
            btn = ControlButton(control, "", active=controls.is_active(control))
            btn.control_toggled.connect(self.store.toggle_control)
            grid.addWidget(btn, i // 2, i % 2)
            self.control_buttons[control] = btn
        layout.addLayout(grid)
        self.store.controls_changed.connect(self._sync_controls)

        # --- Sensors ---
        lbl_sensors = QLabel("Sensors")
        lbl_sensors.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(lbl_sensors)
        for sensor in self.sensors:
            layout.addWidget(SensorCard(sensor))
        layout.addStretch()

    def _sync_controls(self, controls: ControlToggles) -> None:
        for control, btn in self.control_buttons.items():
            active = controls.is_active(control)
            if btn.isChecked() != active:
                # Avoid feeding the change back into the store
                btn.blockSignals(True)
                btn.setChecked(active)
                btn.blockSignals(False)
                btn.refresh()

    def show_barn(self, barn: Barn) -> None:
        self.barn = barn
        logger.info(f"Opening detail of '{barn.name}'.")

        self.lbl_title.setText(barn.name)
        self.lbl_temperature.setText(f"Temperature: {barn.current_temp:.2f}°C")
        # ppm, not percent; see AmmoniaSettings for the percentage quantity
        self.lbl_level.setText(f"{barn.ammonia_ppm} ppm")
        self.lbl_level.setStyleSheet(f"color: {barn.status.color}; font-size: 48px; font-weight: bold;")

        values = {
            Control.TEMPERATURE: f"{int(barn.current_temp)}°C",
            Control.AMMONIA: f"{barn.ammonia_ppm} ppm",
            Control.FAN: barn.vent_status.value,
            Control.VENT: "Auto",
            Control.HUMIDITY: f"{barn.humidity}%",
        }
        for control, value in values.items():
            self.control_buttons[control].set_value(value)

        try:
            self.heat_map.show_barn(barn.ammonia_ppm)
        except InvalidInputError as e:
            logger.error(f"Cannot build heat-map for '{barn.name}': {e}")
            QMessageBox.warning(self, "Heat-map", str(e))
