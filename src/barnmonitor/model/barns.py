"""
Barn & Sensor Data
==================
Defines the barn, sensor and trend-reading data structures, the ammonia status
classification and the built-in sample data shown by the dashboard.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, List

from barnmonitor.config import (
    HEALTHY_LIMIT_PPM,
    CRITICAL_LIMIT_PPM,
    TARGET_TEMP_RANGE,
    NEW_BARN_HUMIDITY,
    NEW_BARN_AMMONIA_PPM,
)

logger = logging.getLogger(__name__)


class AmmoniaStatus(StrEnum):
    HEALTHY = "healthy"
    MEDIUM = "medium"
    CRITICAL = "critical"

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_COLORS: Dict[AmmoniaStatus, str] = {
    AmmoniaStatus.HEALTHY: "#34C759",
    AmmoniaStatus.MEDIUM: "#FF9500",
    AmmoniaStatus.CRITICAL: "#FF3B30",
}

STATUS_LABELS: Dict[AmmoniaStatus, str] = {
    AmmoniaStatus.HEALTHY: f"Healthy (< {HEALTHY_LIMIT_PPM:g}ppm)",
    AmmoniaStatus.MEDIUM: f"Medium ({HEALTHY_LIMIT_PPM:g}-{CRITICAL_LIMIT_PPM:g}ppm)",
    AmmoniaStatus.CRITICAL: f"Critical (> {CRITICAL_LIMIT_PPM:g}ppm)",
}


def classify_ppm(ppm: float) -> AmmoniaStatus:
    """Status band of an ammonia reading."""
    if ppm < HEALTHY_LIMIT_PPM:
        return AmmoniaStatus.HEALTHY
    if ppm < CRITICAL_LIMIT_PPM:
        return AmmoniaStatus.MEDIUM
    return AmmoniaStatus.CRITICAL


def ppm_fill_fraction(ppm: float) -> float:
    """Fill of the card progress bar; full at the critical limit."""
    return max(0.0, min(ppm / CRITICAL_LIMIT_PPM, 1.0))


class SwitchState(StrEnum):
    ON = "On"
    OFF = "Off"


@dataclass
class Sensor:
    name: str
    status: SwitchState = SwitchState.ON
    ammonia_ppm: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_on(self) -> bool:
        return self.status == SwitchState.ON

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "status": self.status.value,
            "ammonia_ppm": self.ammonia_ppm,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Sensor:
        return Sensor(
            id=uuid.UUID(data["id"]) if "id" in data else uuid.uuid4(),
            name=data["name"],
            status=SwitchState(data.get("status", SwitchState.ON)),
            ammonia_ppm=int(data.get("ammonia_ppm", 0)),
        )


@dataclass
class Barn:
    """
    A monitored barn.

    Temperatures are in °C, humidity in %, ammonia in ppm.
    """
    name: str
    image_name: str
    current_temp: float
    target_temp: float
    humidity: int
    ammonia_ppm: int
    vent_status: SwitchState
    sensors: List[Sensor] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def status(self) -> AmmoniaStatus:
        return classify_ppm(self.ammonia_ppm)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "image_name": self.image_name,
            "current_temp": self.current_temp,
            "target_temp": self.target_temp,
            "humidity": self.humidity,
            "ammonia_ppm": self.ammonia_ppm,
            "vent_status": self.vent_status.value,
            "sensors": [s.to_dict() for s in self.sensors],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Barn:
        return Barn(
            id=uuid.UUID(data["id"]) if "id" in data else uuid.uuid4(),
            name=data["name"],
            image_name=data.get("image_name", ""),
            current_temp=float(data["current_temp"]),
            target_temp=float(data["target_temp"]),
            humidity=int(data["humidity"]),
            ammonia_ppm=int(data["ammonia_ppm"]),
            vent_status=SwitchState(data.get("vent_status", SwitchState.OFF)),
            sensors=[Sensor.from_dict(s) for s in data.get("sensors", [])],
        )


@dataclass(frozen=True)
class AmmoniaReading:
    """One point of the ammonia trend chart (number of zones per status)."""
    date: str
    safe: float
    warning: float
    critical: float


def new_barn(existing: List[Barn], name: str = "", target_temp: float = 25) -> Barn:
    """
    Create a barn from the "Add Barn" form.

    A blank name becomes "Barn N", where N starts at the next position in the
    list and skips numbers already taken by another barn name.
    The barn starts at its target temperature with the vent off.
    """
    low, high = TARGET_TEMP_RANGE
    if not low <= target_temp <= high:
        raise ValueError(f"Target temperature must be within {low}-{high} °C, got {target_temp}.")

    taken = {b.name for b in existing}
    number = len(existing) + 1
    while f"Barn {number}" in taken:
        number += 1

    barn = Barn(
        name=name.strip() or f"Barn {number}",
        image_name=f"barn{number}",
        current_temp=float(target_temp),
        target_temp=float(target_temp),
        humidity=NEW_BARN_HUMIDITY,
        ammonia_ppm=NEW_BARN_AMMONIA_PPM,
        vent_status=SwitchState.OFF,
    )
    logger.info(f"Created barn '{barn.name}' (target {barn.target_temp:.0f} °C).")
    return barn


# -------------------------------------------------------------------------------
# Sample data
# -------------------------------------------------------------------------------

def default_barns() -> List[Barn]:
    return [
        Barn("Barn 1", "barn1", 22, 25, 55, 12, SwitchState.ON),
        Barn("Barn 2", "barn2", 28, 25, 62, 35, SwitchState.ON),
        Barn("Barn 3", "barn3", 30, 25, 68, 18, SwitchState.ON),
        Barn("Barn 4", "barn4", 32, 25, 72, 65, SwitchState.OFF),
        Barn("Barn 5", "barn5", 26, 25, 58, 28, SwitchState.ON),
    ]


def default_sensors() -> List[Sensor]:
    return [
        Sensor("Sensor 1", SwitchState.ON, 16),
        Sensor("Sensor 2", SwitchState.OFF, 0),
    ]


DEFAULT_AMMONIA_READINGS: tuple[AmmoniaReading, ...] = (
    AmmoniaReading("1/8", safe=5, warning=3, critical=1),
    AmmoniaReading("8/8", safe=7, warning=2, critical=1.5),
    AmmoniaReading("15/8", safe=4, warning=4, critical=2),
    AmmoniaReading("22/8", safe=6, warning=3, critical=1),
    AmmoniaReading("29/8", safe=8, warning=2, critical=1.5),
    AmmoniaReading("5/9", safe=5, warning=4, critical=2),
)
