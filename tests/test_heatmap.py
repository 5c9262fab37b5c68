import math

import numpy as np
import pytest

from barnmonitor.model.heatmap import (
    ColorSample,
    GridDimensions,
    GridPoint,
    InvalidInputError,
    build_heat_map,
    compute_heat_map_color,
    depth_factor,
    estimate_concentration,
    estimate_grid,
    generate_grid,
    heat_map_color,
    heat_map_colors,
    height_factor,
    zone_position,
)

DIMS = GridDimensions()


# -------------------------------------------------------------------------------
# Zone generator
# -------------------------------------------------------------------------------

def test_default_grid_has_75_distinct_points():
    points = generate_grid(DIMS)
    assert len(points) == 75
    assert len(set(points)) == 75
    assert all(DIMS.contains(p) for p in points)


def test_grid_order_is_column_major_with_y_innermost():
    points = generate_grid(DIMS)
    assert points[:4] == [GridPoint(0, 0, 0), GridPoint(0, 1, 0), GridPoint(0, 2, 0), GridPoint(0, 0, 1)]


def test_zone_positions_are_centered_on_xz_and_lifted_on_y():
    assert zone_position(GridPoint(0, 0, 0)) == (-4.0, 1.0, -4.0)
    assert zone_position(GridPoint(2, 1, 2)) == (0.0, 3.0, 0.0)
    assert zone_position(GridPoint(4, 2, 4)) == (4.0, 5.0, 4.0)


def test_non_positive_dimensions_are_rejected():
    with pytest.raises(InvalidInputError):
        GridDimensions(5, 0, 5)


# -------------------------------------------------------------------------------
# Concentration estimator
# -------------------------------------------------------------------------------

def test_factors():
    assert height_factor(0, 3) == 1.0
    assert height_factor(2, 3) == pytest.approx(1 / 3)
    assert depth_factor(4, 5) == pytest.approx(6 / 7)
    assert depth_factor(0, 5) == pytest.approx(2 / 7)


def test_reference_scenario():
    conc = estimate_concentration(65, GridPoint(2, 0, 4), DIMS, jitter=1.0)
    assert conc == pytest.approx(55.714, abs=1e-3)

    color = heat_map_color(conc)
    assert color.r == pytest.approx(1.0)
    assert color.g == pytest.approx(0.443, abs=1e-3)
    assert color.b == 0.0


def test_floor_is_more_concentrated_than_ceiling():
    for x, z in [(0, 0), (2, 3), (4, 4)]:
        floor = estimate_concentration(40, GridPoint(x, 0, z), DIMS, jitter=1.0)
        ceiling = estimate_concentration(40, GridPoint(x, DIMS.gy - 1, z), DIMS, jitter=1.0)
        assert floor > ceiling > 0


def test_concentration_is_monotonic_in_base_reading():
    point = GridPoint(1, 1, 3)
    values = [estimate_concentration(r, point, DIMS, jitter=1.0) for r in range(0, 120, 5)]
    assert values == sorted(values)


def test_jitter_stays_in_range():
    rng = np.random.default_rng(7)
    point = GridPoint(0, 0, 4)
    nominal = estimate_concentration(50, point, DIMS, jitter=1.0)
    for _ in range(200):
        value = estimate_concentration(50, point, DIMS, rng=rng)
        assert 0.7 * nominal <= value <= 1.3 * nominal


def test_seeded_generator_is_reproducible():
    a = estimate_grid(30, generate_grid(DIMS), DIMS, rng=np.random.default_rng(42))
    b = estimate_grid(30, generate_grid(DIMS), DIMS, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(a, b)


def test_vectorised_estimate_matches_scalar():
    points = generate_grid(DIMS)
    grid = estimate_grid(65, points, DIMS, jitter=1.0)
    scalar = [estimate_concentration(65, p, DIMS, jitter=1.0) for p in points]
    np.testing.assert_allclose(grid, scalar)


@pytest.mark.parametrize("reading", [-1, math.nan, math.inf])
def test_invalid_base_reading_is_rejected(reading):
    with pytest.raises(InvalidInputError):
        estimate_concentration(reading, GridPoint(0, 0, 0), DIMS, jitter=1.0)
    with pytest.raises(InvalidInputError):
        estimate_grid(reading, generate_grid(DIMS), DIMS, jitter=1.0)


@pytest.mark.parametrize("jitter", [-0.5, math.nan, math.inf])
def test_invalid_fixed_jitter_is_rejected(jitter):
    with pytest.raises(InvalidInputError, match="Jitter"):
        estimate_concentration(10, GridPoint(0, 0, 0), DIMS, jitter=jitter)
    with pytest.raises(InvalidInputError, match="Jitter"):
        estimate_grid(10, generate_grid(DIMS), DIMS, jitter=jitter)
    with pytest.raises(InvalidInputError, match="Jitter"):
        build_heat_map(10, DIMS, jitter=jitter)


def test_zero_jitter_is_allowed():
    assert estimate_concentration(10, GridPoint(0, 0, 0), DIMS, jitter=0.0) == 0.0


def test_point_outside_grid_is_rejected():
    with pytest.raises(InvalidInputError):
        estimate_concentration(10, GridPoint(0, 3, 0), DIMS, jitter=1.0)
    with pytest.raises(InvalidInputError):
        estimate_grid(10, [GridPoint(5, 0, 0)], DIMS, jitter=1.0)


def test_invalid_input_error_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


# -------------------------------------------------------------------------------
# Color mapper
# -------------------------------------------------------------------------------

@pytest.mark.parametrize("c", [0.0, 5.0, 12.5, 19.99])
def test_green_to_yellow_band(c):
    color = heat_map_color(c)
    assert color.r == pytest.approx(c / 20)
    assert color.g == 1.0
    assert color.b == 0.0


@pytest.mark.parametrize("c", [20.0, 27.0, 35.0, 49.99])
def test_yellow_to_orange_band(c):
    color = heat_map_color(c)
    assert color.r == 1.0
    assert color.g == pytest.approx(1.0 - 0.5 * (c - 20) / 30)
    assert color.b == 0.0


@pytest.mark.parametrize("c", [50.0, 75.0, 100.0, 250.0])
def test_orange_to_red_band(c):
    color = heat_map_color(c)
    assert color.r == 1.0
    assert color.g == pytest.approx(max(0.0, 0.5 - 0.5 * min((c - 50) / 50, 1.0)))
    assert color.b == 0.0


@pytest.mark.parametrize("boundary", [20.0, 50.0])
def test_color_is_continuous_at_band_boundaries(boundary):
    eps = 1e-9
    below = heat_map_color(boundary - eps)
    above = heat_map_color(boundary + eps)
    assert below == pytest.approx(above, abs=1e-6)


def test_boundary_colors():
    assert heat_map_color(20) == ColorSample(1.0, 1.0, 0.0)
    assert heat_map_color(50) == ColorSample(1.0, 0.5, 0.0)
    assert heat_map_color(100) == ColorSample(1.0, 0.0, 0.0)


def test_negative_concentration_is_clamped_to_zero():
    assert heat_map_color(-3.0) == ColorSample(0.0, 1.0, 0.0)


def test_nan_concentration_is_rejected():
    with pytest.raises(InvalidInputError):
        heat_map_color(math.nan)
    with pytest.raises(InvalidInputError):
        heat_map_colors([1.0, math.nan])


def test_vectorised_colors_match_scalar():
    values = np.array([-5.0, 0.0, 10.0, 19.9, 20.0, 33.3, 49.9, 50.0, 72.0, 100.0, 180.0])
    rgb = heat_map_colors(values)
    assert rgb.shape == (len(values), 3)
    expected = np.array([tuple(heat_map_color(v)) for v in values])
    np.testing.assert_allclose(rgb, expected)


# -------------------------------------------------------------------------------
# Pipeline
# -------------------------------------------------------------------------------

def test_compute_heat_map_color_reference_point():
    color = compute_heat_map_color(65, GridPoint(2, 0, 4), DIMS, jitter=1.0)
    assert color == pytest.approx((1.0, 0.4429, 0.0), abs=1e-3)


def test_build_heat_map_returns_one_sample_per_zone():
    samples = build_heat_map(65, rng=np.random.default_rng(0))
    assert len(samples) == 75
    for s in samples:
        assert s.position == zone_position(s.point)
        assert s.concentration >= 0
        assert s.color == pytest.approx(tuple(heat_map_color(s.concentration)))
        assert all(0.0 <= ch <= 1.0 for ch in s.color)


def test_zero_reading_is_all_green():
    samples = build_heat_map(0, jitter=1.0)
    assert {s.color for s in samples} == {ColorSample(0.0, 1.0, 0.0)}
