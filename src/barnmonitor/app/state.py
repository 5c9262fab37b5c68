from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from barnmonitor.model.barns import Barn, new_barn
from barnmonitor.model.state import DashboardState, Control

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for tab/detail sync."""
    barns_changed = Signal(object)
    settings_changed = Signal(object)
    controls_changed = Signal(object)

    def __init__(self, state: DashboardState | None = None) -> None:
        super().__init__()
        self.state = state if state is not None else DashboardState()

    def add_barn(self, name: str, target_temp: float) -> Barn:
        barn = new_barn(self.state.barns, name=name, target_temp=target_temp)
        self.state.add_barn(barn)
        self.barns_changed.emit(self.state.barns)
        return barn

    def toggle_control(self, control: Control) -> bool:
        active = self.state.controls.toggle(control)
        logger.debug(f"Control '{control}' -> {'on' if active else 'off'}.")
        self.controls_changed.emit(self.state.controls)
        return active

    def set_vent_down_temp(self, value: float) -> None:
        self.state.settings.set_vent_down_temp(value)
        self.settings_changed.emit(self.state.settings)

    def set_bedding_height(self, value: float) -> None:
        self.state.settings.set_bedding_height(value)
        self.settings_changed.emit(self.state.settings)

    def set_ammonia_level(self, value: float) -> None:
        self.state.settings.set_ammonia_level(value)
        self.settings_changed.emit(self.state.settings)

    def reset(self) -> None:
        self.state.reset()
        self.barns_changed.emit(self.state.barns)
        self.controls_changed.emit(self.state.controls)
        self.settings_changed.emit(self.state.settings)
