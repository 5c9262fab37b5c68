"""
Dashboard State (Data Model)
============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the barn list, the control toggles and the
   ammonia settings in one place.
2. Decoupling: Views read from this object; the Store writes to it and
   broadcasts the change.

Classes:
    ControlToggles: On/off state of the barn control buttons.
    AmmoniaSettings: Values of the Ammonia tab sliders.
    DashboardState: The main container class.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Optional

from barnmonitor.config import (
    VENT_DOWN_TEMP_RANGE, VENT_DOWN_TEMP_DEFAULT,
    BEDDING_HEIGHT_RANGE, BEDDING_HEIGHT_DEFAULT,
    AMMONIA_LEVEL_RANGE, AMMONIA_LEVEL_DEFAULT,
)
from barnmonitor.model.barns import Barn, AmmoniaReading, default_barns, DEFAULT_AMMONIA_READINGS

logger = logging.getLogger(__name__)


class Control(StrEnum):
    """Control buttons shown on the barn detail page, in display order."""
    TEMPERATURE = "Temperature"
    AMMONIA = "Ammonia"
    FAN = "Fan"
    VENT = "Vent"
    HUMIDITY = "Humidity"


@dataclass
class ControlToggles:
    temperature: bool = False
    ammonia: bool = False
    fan: bool = True
    vent: bool = False
    humidity: bool = False

    def is_active(self, control: Control) -> bool:
        return getattr(self, control.name.lower())

    def toggle(self, control: Control) -> bool:
        """Flip a control and return its new state."""
        new_state = not self.is_active(control)
        setattr(self, control.name.lower(), new_state)
        return new_state


def _check_range(name: str, value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be within [{low:g}, {high:g}], got {value}.")
    return float(value)


@dataclass
class AmmoniaSettings:
    """
    Slider values of the Ammonia tab.

    Note: `ammonia_level` is a percentage and is NOT the same quantity as the
    ppm readings of the barns; no conversion between them is attempted.
    """
    vent_down_temp: float = VENT_DOWN_TEMP_DEFAULT  # °C
    bedding_height: float = BEDDING_HEIGHT_DEFAULT
    ammonia_level: float = AMMONIA_LEVEL_DEFAULT  # %

    def __post_init__(self) -> None:
        self.set_vent_down_temp(self.vent_down_temp)
        self.set_bedding_height(self.bedding_height)
        self.set_ammonia_level(self.ammonia_level)

    def set_vent_down_temp(self, value: float) -> None:
        self.vent_down_temp = _check_range("Vent down temperature", value, VENT_DOWN_TEMP_RANGE)

    def set_bedding_height(self, value: float) -> None:
        self.bedding_height = _check_range("Bedding height", value, BEDDING_HEIGHT_RANGE)

    def set_ammonia_level(self, value: float) -> None:
        self.ammonia_level = _check_range("Ammonia level", value, AMMONIA_LEVEL_RANGE)


@dataclass
class DashboardState:
    """
    Holds the entire state of the running dashboard.
    Pass this instance to the Store; views should not mutate it directly.
    """
    barns: List[Barn] = field(default_factory=default_barns)
    controls: ControlToggles = field(default_factory=ControlToggles)
    settings: AmmoniaSettings = field(default_factory=AmmoniaSettings)
    readings: List[AmmoniaReading] = field(default_factory=lambda: list(DEFAULT_AMMONIA_READINGS))

    def find_barn(self, barn_id: uuid.UUID) -> Optional[Barn]:
        return next((b for b in self.barns if b.id == barn_id), None)

    def add_barn(self, barn: Barn) -> None:
        """Append a barn. Names may repeat; barns are identified by `id`."""
        if self.find_barn(barn.id) is not None:
            raise ValueError(f"Barn {barn.id} is already on the dashboard.")
        self.barns.append(barn)
        logger.info(f"Barn '{barn.name}' added ({len(self.barns)} barns).")

    def reset(self) -> None:
        """Restore the sample data and default settings."""
        self.barns = default_barns()
        self.controls = ControlToggles()
        self.settings = AmmoniaSettings()
        self.readings = list(DEFAULT_AMMONIA_READINGS)
        logger.info("Dashboard state has been reset.")
