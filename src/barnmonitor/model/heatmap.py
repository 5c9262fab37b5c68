"""
Ammonia Heat-Map Computation
============================
Pure data side of the barn 3D heat-map. Nothing here knows about Qt or PyVista.

Pipeline:
    base reading (ppm) -> grid points -> local concentration -> RGB color

1. Zone Generator: a fixed gx x gy x gz lattice of sample points, centered on
   the origin in the X/Z plane and lifted above the floor on Y.
2. Concentration Estimator: scales the barn's base reading by a height factor
   (heavier near the floor), a depth factor (heavier toward the back wall) and
   a random jitter in [0.7, 1.3].
3. Color Mapper: three linear bands, green -> yellow (< 20 ppm),
   yellow -> orange (20-50 ppm) and orange -> red (>= 50 ppm, saturating at 100).

Randomness is always drawn from an injected numpy Generator so that scenes can
be reproduced by seeding it.
"""
from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, TYPE_CHECKING

import numpy as np

from barnmonitor.config import (
    HEATMAP_GRID,
    HEATMAP_SPACING,
    HEATMAP_Y_OFFSET,
    JITTER_RANGE,
    HEALTHY_LIMIT_PPM,
    CRITICAL_LIMIT_PPM,
    SATURATION_SPAN_PPM,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a heat-map input cannot produce a meaningful color."""


# -------------------------------------------------------------------------------
# Data types
# -------------------------------------------------------------------------------

class GridPoint(NamedTuple):
    """Integer lattice index of a heat-map zone."""
    x: int
    y: int
    z: int


class ColorSample(NamedTuple):
    """RGB color with channels in [0, 1]."""
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class GridDimensions:
    """Number of zones along each axis (Y is the vertical axis)."""
    gx: int = HEATMAP_GRID[0]
    gy: int = HEATMAP_GRID[1]
    gz: int = HEATMAP_GRID[2]

    def __post_init__(self) -> None:
        if min(self.gx, self.gy, self.gz) <= 0:
            raise InvalidInputError(
                f"Grid dimensions must be positive, got ({self.gx}, {self.gy}, {self.gz})."
            )

    @property
    def size(self) -> int:
        return self.gx * self.gy * self.gz

    def contains(self, point: GridPoint) -> bool:
        return 0 <= point.x < self.gx and 0 <= point.y < self.gy and 0 <= point.z < self.gz


@dataclass(frozen=True)
class HeatMapSample:
    """A single heat-map zone, ready to be handed to the renderer."""
    point: GridPoint
    position: tuple[float, float, float]
    concentration: float
    color: ColorSample


# -------------------------------------------------------------------------------
# Zone generator
# -------------------------------------------------------------------------------

def generate_grid(dimensions: GridDimensions = GridDimensions()) -> list[GridPoint]:
    """
    Enumerate all grid points.

    Order is X, then Z, then Y (Y innermost), i.e. each vertical column is
    emitted before moving to the next column.
    """
    return [
        GridPoint(x, y, z)
        for x, z, y in itertools.product(
            range(dimensions.gx), range(dimensions.gz), range(dimensions.gy)
        )
    ]


def zone_position(
    point: GridPoint,
    dimensions: GridDimensions = GridDimensions(),
    spacing: float = HEATMAP_SPACING,
) -> tuple[float, float, float]:
    """World coordinates of a zone center."""
    x_pos = point.x * spacing - (dimensions.gx - 1) * spacing / 2
    y_pos = point.y * spacing + HEATMAP_Y_OFFSET
    z_pos = point.z * spacing - (dimensions.gz - 1) * spacing / 2
    return float(x_pos), float(y_pos), float(z_pos)


# -------------------------------------------------------------------------------
# Concentration estimator
# -------------------------------------------------------------------------------

def _validate_base_reading(base_reading: float) -> float:
    value = float(base_reading)
    if not math.isfinite(value):
        raise InvalidInputError(f"Base reading must be finite, got {base_reading!r}.")
    if value < 0:
        raise InvalidInputError(f"Base reading must be non-negative, got {base_reading!r}.")
    return value


def _validate_jitter(jitter: Optional[float]) -> Optional[float]:
    if jitter is None:
        return None
    value = float(jitter)
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"Jitter must be finite and non-negative, got {jitter!r}.")
    return value


def height_factor(y: int | npt.NDArray[np.int_], gy: int) -> float | npt.NDArray[np.float64]:
    """1.0 on the floor layer, falling to 1/gy on the top layer."""
    return (gy - y) / gy


def depth_factor(z: int | npt.NDArray[np.int_], gz: int) -> float | npt.NDArray[np.float64]:
    """Grows linearly toward the back of the barn."""
    return (z + 2) / (gz + 2)


def draw_jitter(
    rng: Optional[np.random.Generator] = None,
    size: Optional[int] = None,
) -> float | npt.NDArray[np.float64]:
    """Uniform random factor in JITTER_RANGE."""
    if rng is None:
        rng = np.random.default_rng()
    low, high = JITTER_RANGE
    return rng.uniform(low, high, size=size)


def estimate_concentration(
    base_reading: float,
    point: GridPoint,
    dimensions: GridDimensions = GridDimensions(),
    rng: Optional[np.random.Generator] = None,
    jitter: Optional[float] = None,
) -> float:
    """
    Synthetic local ammonia concentration at a grid point.

    Args:
        base_reading: Barn-level reading in ppm (finite, non-negative).
        point: Zone index inside `dimensions`.
        dimensions: Grid size.
        rng: Random source for the jitter. Defaults to a fresh, entropy-seeded Generator.
        jitter: Fixed jitter factor. When given, `rng` is not consulted.

    Returns:
        Concentration in ppm.

    Raises:
        InvalidInputError: On a non-finite or negative reading or jitter,
            or a point outside the grid.
    """
    reading = _validate_base_reading(base_reading)
    jitter = _validate_jitter(jitter)
    if not dimensions.contains(point):
        raise InvalidInputError(f"Grid point {tuple(point)} lies outside grid {dimensions}.")

    factor = jitter if jitter is not None else draw_jitter(rng)
    return float(
        reading
        * height_factor(point.y, dimensions.gy)
        * depth_factor(point.z, dimensions.gz)
        * factor
    )


def estimate_grid(
    base_reading: float,
    points: list[GridPoint],
    dimensions: GridDimensions = GridDimensions(),
    rng: Optional[np.random.Generator] = None,
    jitter: Optional[float] = None,
) -> npt.NDArray[np.float64]:
    """Vectorised `estimate_concentration` for many points. One jitter draw per point."""
    reading = _validate_base_reading(base_reading)
    jitter = _validate_jitter(jitter)
    if not points:
        return np.empty(0, dtype=np.float64)

    idx = np.asarray(points, dtype=np.int_).reshape(-1, 3)
    upper = np.array([dimensions.gx, dimensions.gy, dimensions.gz])
    if np.any(idx < 0) or np.any(idx >= upper):
        raise InvalidInputError(f"Some grid points lie outside grid {dimensions}.")

    if jitter is not None:
        factors = np.full(len(idx), jitter)
    else:
        factors = draw_jitter(rng, size=len(idx))

    return (
        reading
        * height_factor(idx[:, 1], dimensions.gy)
        * depth_factor(idx[:, 2], dimensions.gz)
        * factors
    ).astype(np.float64)


# -------------------------------------------------------------------------------
# Color mapper
# -------------------------------------------------------------------------------

def heat_map_color(concentration: float) -> ColorSample:
    """
    Map a concentration in ppm to a heat-map color.

    Negative values are clamped to 0. NaN is rejected.
    """
    c = float(concentration)
    if math.isnan(c):
        raise InvalidInputError("Concentration must not be NaN.")
    c = max(c, 0.0)

    if c < HEALTHY_LIMIT_PPM:
        ratio = c / HEALTHY_LIMIT_PPM
        return ColorSample(ratio, 1.0, 0.0)
    if c < CRITICAL_LIMIT_PPM:
        ratio = (c - HEALTHY_LIMIT_PPM) / (CRITICAL_LIMIT_PPM - HEALTHY_LIMIT_PPM)
        return ColorSample(1.0, 1.0 - 0.5 * ratio, 0.0)
    ratio = min((c - CRITICAL_LIMIT_PPM) / SATURATION_SPAN_PPM, 1.0)
    return ColorSample(1.0, 0.5 - 0.5 * ratio, 0.0)


def heat_map_colors(concentrations: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Vectorised `heat_map_color`. Returns an (N, 3) RGB array."""
    c = np.asarray(concentrations, dtype=np.float64).reshape(-1)
    if np.any(np.isnan(c)):
        raise InvalidInputError("Concentrations must not contain NaN.")
    c = np.maximum(c, 0.0)

    low_band = c < HEALTHY_LIMIT_PPM
    mid_band = (c >= HEALTHY_LIMIT_PPM) & (c < CRITICAL_LIMIT_PPM)

    mid_ratio = (c - HEALTHY_LIMIT_PPM) / (CRITICAL_LIMIT_PPM - HEALTHY_LIMIT_PPM)
    high_ratio = np.minimum((c - CRITICAL_LIMIT_PPM) / SATURATION_SPAN_PPM, 1.0)

    rgb = np.zeros((len(c), 3), dtype=np.float64)
    rgb[:, 0] = np.where(low_band, c / HEALTHY_LIMIT_PPM, 1.0)
    rgb[:, 1] = np.select(
        [low_band, mid_band],
        [np.ones_like(c), 1.0 - 0.5 * mid_ratio],
        default=0.5 - 0.5 * high_ratio,
    )
    return rgb


# -------------------------------------------------------------------------------
# Public entry points for the rendering layer
# -------------------------------------------------------------------------------

def compute_heat_map_color(
    base_reading: float,
    grid_point: GridPoint,
    dimensions: GridDimensions = GridDimensions(),
    rng: Optional[np.random.Generator] = None,
    jitter: Optional[float] = None,
) -> ColorSample:
    """Concentration estimate followed by color mapping for a single zone."""
    concentration = estimate_concentration(base_reading, grid_point, dimensions, rng, jitter)
    return heat_map_color(concentration)


def build_heat_map(
    base_reading: float,
    dimensions: GridDimensions = GridDimensions(),
    spacing: float = HEATMAP_SPACING,
    rng: Optional[np.random.Generator] = None,
    jitter: Optional[float] = None,
) -> list[HeatMapSample]:
    """Run the whole pipeline for one barn and return every zone."""
    points = generate_grid(dimensions)
    concentrations = estimate_grid(base_reading, points, dimensions, rng, jitter)
    colors = heat_map_colors(concentrations)

    logger.debug(
        f"Heat-map for {base_reading} ppm: {len(points)} zones, "
        f"max {concentrations.max(initial=0.0):.1f} ppm."
    )

    return [
        HeatMapSample(
            point=point,
            position=zone_position(point, dimensions, spacing),
            concentration=float(conc),
            color=ColorSample(*(float(ch) for ch in rgb)),
        )
        for point, conc, rgb in zip(points, concentrations, colors)
    ]
