"""
3D Barn Heat-Map Widget (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pyvista as pv
from PySide6.QtGui import QCloseEvent, QHideEvent, QShowEvent
from PySide6.QtWidgets import QWidget, QVBoxLayout
from pyvistaqt import QtInteractor

from barnmonitor.model.heatmap import build_heat_map
from barnmonitor.view.widgets.barn_scene import (
    SceneItem,
    build_barn_scene,
    CAMERA_POSITION,
    CAMERA_FOCAL_POINT,
    CAMERA_VIEW_UP,
)
from barnmonitor.view.widgets.pulse import PulseAnimator

logger = logging.getLogger(__name__)


class BarnHeatMapWidget(QWidget):
    """
    Interactive 3D view of a barn with its ammonia heat-map.

    The scene is built once per `show_barn` call; afterwards only the pulse
    animation touches the actors. The animation only runs while the widget is
    visible.
    """
    def __init__(self, parent: Optional[QWidget] = None, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        layout.addWidget(self.plotter)
        self._init_plotter()

        self._rng = rng if rng is not None else np.random.default_rng()
        self._pulsing: list[pv.Actor] = []

        self.pulse = PulseAnimator(parent=self)
        self.pulse.scale_changed.connect(self._apply_pulse)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def show_barn(self, ammonia_ppm: float) -> None:
        """Rebuild the scene for a barn with the given base reading."""
        logger.info(f"Building barn heat-map for {ammonia_ppm} ppm.")
        self.pulse.stop()
        self.plotter.clear()
        self._pulsing.clear()

        samples = build_heat_map(ammonia_ppm, rng=self._rng)
        for item in build_barn_scene(samples):
            self._add_item(item)

        self.plotter.camera_position = [CAMERA_POSITION, CAMERA_FOCAL_POINT, CAMERA_VIEW_UP]
        self.plotter.render()

        self.pulse.start()
        if not self.isVisible():
            self.pulse.suspend()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.pulse.resume()

    def hideEvent(self, event: QHideEvent) -> None:
        # Also fires when the parent page is swapped out of a QStackedWidget
        self.pulse.suspend()
        super().hideEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.pulse.stop()
        self.plotter.close()
        super().closeEvent(event)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("white")
        self.plotter.enable_anti_aliasing("msaa")
        self.plotter.enable_lightkit()

    def _add_item(self, item: SceneItem) -> None:
        actor = self.plotter.add_mesh(
            item.mesh,
            color=item.color,
            opacity=item.opacity,
            smooth_shading=item.pulsing,
            show_scalar_bar=False,
            pickable=False,
            name=item.name,
        )
        if item.pulsing and item.center is not None:
            # Scale about the sphere center, not the world origin
            actor.SetOrigin(*item.center)
            self._pulsing.append(actor)

    def _apply_pulse(self, s: float) -> None:
        if not self._pulsing:
            return
        for actor in self._pulsing:
            actor.SetScale(s, s, s)
        self.plotter.render()
