"""
Pulse Animation Clock
Drives the breathing scale of the heat-map spheres.
"""
from __future__ import annotations

import time
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from barnmonitor.config import PULSE_SCALE, PULSE_HALF_PERIOD_S, PULSE_INTERVAL_MS
from barnmonitor.view.widgets.barn_scene import pulse_scale


class PulseAnimator(QObject):
    """
    QTimer wrapper emitting the current sphere scale on every tick.

    `start`/`stop` arm and disarm the animation. `suspend`/`resume` only pause
    the timer, so a hidden view stops rendering and picks up again when shown.
    """
    scale_changed = Signal(float)

    def __init__(self, interval_ms: int = PULSE_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._armed = False
        self._t0 = time.monotonic()

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._tick)

    @property
    def is_armed(self) -> bool:
        return self._armed

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        self._armed = True
        self._t0 = time.monotonic()
        self._timer.start()

    def stop(self) -> None:
        self._armed = False
        self._timer.stop()

    def suspend(self) -> None:
        self._timer.stop()

    def resume(self) -> None:
        if self._armed and not self._timer.isActive():
            self._timer.start()

    def current_scale(self) -> float:
        return pulse_scale(time.monotonic() - self._t0, PULSE_HALF_PERIOD_S, PULSE_SCALE)

    def _tick(self) -> None:
        self.scale_changed.emit(self.current_scale())
