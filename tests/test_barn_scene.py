import numpy as np
import pytest

from barnmonitor.model.heatmap import build_heat_map
from barnmonitor.view.widgets.barn_scene import (
    COW_POSITIONS,
    build_barn_scene,
    build_cows,
    build_shell,
    centered_box,
    pulse_scale,
)


def test_centered_box_bounds():
    box = centered_box((0.0, 2.5, -3.0), (10.0, 5.0, 0.2))
    np.testing.assert_allclose(list(box.bounds), [-5.0, 5.0, 0.0, 5.0, -3.1, -2.9])


def test_shell_is_floor_three_walls_and_roof():
    items = build_shell()
    assert [i.name for i in items] == ["floor", "wall-back", "wall-left", "wall-right", "roof"]
    assert all(i.opacity < 1.0 for i in items)
    assert not any(i.pulsing for i in items)


def test_each_cow_has_body_and_head():
    assert len(build_cows()) == 2 * len(COW_POSITIONS)


def test_scene_contains_one_pulsing_sphere_per_zone():
    samples = build_heat_map(65, jitter=1.0)
    items = build_barn_scene(samples)

    zones = [i for i in items if i.pulsing]
    assert len(items) == 5 + len(samples) + 2 * len(COW_POSITIONS)
    assert len(zones) == 75

    for item, sample in zip(zones, samples):
        assert item.color == tuple(sample.color)
        assert item.center == sample.position
        np.testing.assert_allclose(item.mesh.center, sample.position, atol=1e-3)


@pytest.mark.parametrize(
    "elapsed, expected",
    [(0.0, 1.0), (0.75, 1.1), (1.5, 1.2), (2.25, 1.1), (3.0, 1.0), (4.5, 1.2)],
)
def test_pulse_scale(elapsed, expected):
    assert pulse_scale(elapsed, half_period=1.5, peak=1.2) == pytest.approx(expected)
