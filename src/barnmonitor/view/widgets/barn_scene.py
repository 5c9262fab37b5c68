"""
Barn Scene Construction
Builds the PyVista meshes of the 3D barn preview without touching a render window.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pyvista as pv

from barnmonitor.config import ZONE_RADIUS, ZONE_OPACITY
from barnmonitor.model.heatmap import HeatMapSample

logger = logging.getLogger(__name__)

# Barn shell (X = width, Y = up, Z = length)
BARN_WIDTH = 10.0
BARN_HEIGHT = 5.0
BARN_LENGTH = 6.0
SLAB_THICKNESS = 0.2

FLOOR_COLOR = "#A52A2A"
WALL_COLOR = "white"
ROOF_COLOR = "red"
COW_COLOR = "#8B5A2B"

COW_POSITIONS: tuple[tuple[float, float, float], ...] = (
    (-3.0, 0.5, 1.0),
    (-1.0, 0.5, -1.0),
    (2.0, 0.5, 0.0),
    (3.0, 0.5, 2.0),
)

CAMERA_POSITION = (8.0, 8.0, 12.0)
CAMERA_FOCAL_POINT = (0.0, 2.0, 0.0)
CAMERA_VIEW_UP = (0.0, 1.0, 0.0)


@dataclass
class SceneItem:
    """A mesh plus the material it should be drawn with."""
    name: str
    mesh: pv.PolyData
    color: str | tuple[float, float, float]
    opacity: float = 1.0
    pulsing: bool = False
    center: Optional[tuple[float, float, float]] = None


def centered_box(
    center: tuple[float, float, float],
    size: tuple[float, float, float],
) -> pv.PolyData:
    """Axis-aligned box given its center and (width, height, length)."""
    c = np.asarray(center, dtype=np.float64)
    half = np.asarray(size, dtype=np.float64) / 2
    lo, hi = c - half, c + half
    return pv.Box(bounds=(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2]))


def build_shell() -> list[SceneItem]:
    """Floor, back and side walls, and roof."""
    w, h, l, t = BARN_WIDTH, BARN_HEIGHT, BARN_LENGTH, SLAB_THICKNESS
    return [
        SceneItem("floor", centered_box((0, 0, 0), (w, t, l)), FLOOR_COLOR, 0.5),
        SceneItem("wall-back", centered_box((0, h / 2, -l / 2), (w, h, t)), WALL_COLOR, 0.2),
        SceneItem("wall-left", centered_box((-w / 2, h / 2, 0), (t, h, l)), WALL_COLOR, 0.2),
        SceneItem("wall-right", centered_box((w / 2, h / 2, 0), (t, h, l)), WALL_COLOR, 0.2),
        SceneItem("roof", centered_box((0, h, 0), (w, t, l)), ROOF_COLOR, 0.3),
    ]


def build_cows() -> list[SceneItem]:
    """Box cows (body + head) for scale."""
    items: list[SceneItem] = []
    for i, (x, y, z) in enumerate(COW_POSITIONS):
        items.append(SceneItem(f"cow-{i}-body", centered_box((x, y, z), (0.8, 0.6, 1.2)), COW_COLOR))
        items.append(SceneItem(f"cow-{i}-head", centered_box((x, y + 0.3, z + 0.8), (0.4, 0.4, 0.4)), COW_COLOR))
    return items


def build_zones(samples: list[HeatMapSample]) -> list[SceneItem]:
    """One translucent sphere per heat-map zone, colored by concentration."""
    return [
        SceneItem(
            name=f"zone-{s.point.x}-{s.point.y}-{s.point.z}",
            mesh=pv.Sphere(radius=ZONE_RADIUS, center=s.position),
            color=tuple(s.color),
            opacity=ZONE_OPACITY,
            pulsing=True,
            center=s.position,
        )
        for s in samples
    ]


def build_barn_scene(samples: list[HeatMapSample]) -> list[SceneItem]:
    """The complete barn: shell, heat-map zones, then cows."""
    items = build_shell() + build_zones(samples) + build_cows()
    logger.debug(f"Barn scene built with {len(items)} items ({len(samples)} zones).")
    return items


def pulse_scale(elapsed: float, half_period: float, peak: float) -> float:
    """
    Scale factor of a zone sphere at `elapsed` seconds.

    Linear ramp 1.0 -> peak over `half_period`, then back to 1.0, repeating.
    """
    phase = (elapsed % (2 * half_period)) / half_period
    if phase > 1.0:
        phase = 2.0 - phase
    return 1.0 + (peak - 1.0) * phase
