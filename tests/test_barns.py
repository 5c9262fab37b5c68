import uuid

import pytest

from barnmonitor.model.barns import (
    AmmoniaStatus,
    Barn,
    SwitchState,
    DEFAULT_AMMONIA_READINGS,
    classify_ppm,
    default_barns,
    default_sensors,
    new_barn,
    ppm_fill_fraction,
)


@pytest.mark.parametrize(
    "ppm, expected",
    [
        (0, AmmoniaStatus.HEALTHY),
        (19, AmmoniaStatus.HEALTHY),
        (20, AmmoniaStatus.MEDIUM),
        (49, AmmoniaStatus.MEDIUM),
        (50, AmmoniaStatus.CRITICAL),
        (65, AmmoniaStatus.CRITICAL),
    ],
)
def test_classify_ppm(ppm, expected):
    assert classify_ppm(ppm) is expected


def test_status_legend_labels():
    assert AmmoniaStatus.HEALTHY.label == "Healthy (< 20ppm)"
    assert AmmoniaStatus.MEDIUM.label == "Medium (20-50ppm)"
    assert AmmoniaStatus.CRITICAL.label == "Critical (> 50ppm)"
    assert len({s.color for s in AmmoniaStatus}) == 3


def test_fill_fraction_saturates_at_critical_limit():
    assert ppm_fill_fraction(0) == 0.0
    assert ppm_fill_fraction(25) == pytest.approx(0.5)
    assert ppm_fill_fraction(50) == 1.0
    assert ppm_fill_fraction(120) == 1.0


def test_sample_barns():
    barns = default_barns()
    assert [b.name for b in barns] == ["Barn 1", "Barn 2", "Barn 3", "Barn 4", "Barn 5"]
    assert [b.ammonia_ppm for b in barns] == [12, 35, 18, 65, 28]
    assert barns[3].vent_status == SwitchState.OFF
    assert barns[3].status is AmmoniaStatus.CRITICAL
    assert len({b.id for b in barns}) == 5


def test_sample_sensors_and_readings():
    sensors = default_sensors()
    assert [s.is_on for s in sensors] == [True, False]
    assert sensors[0].ammonia_ppm == 16
    assert len(DEFAULT_AMMONIA_READINGS) == 6
    assert DEFAULT_AMMONIA_READINGS[0].date == "1/8"


def test_new_barn_defaults_name_from_position():
    barn = new_barn(default_barns(), name="  ", target_temp=18)
    assert barn.name == "Barn 6"
    assert barn.image_name == "barn6"
    assert barn.current_temp == barn.target_temp == 18.0
    assert barn.humidity == 50
    assert barn.ammonia_ppm == 5
    assert barn.vent_status == SwitchState.OFF
    assert barn.sensors == []


def test_new_barn_default_name_skips_taken_names():
    barns = default_barns()
    barns.append(new_barn(barns, name="Barn 7"))
    barn = new_barn(barns)
    assert barn.name == "Barn 8"
    assert barn.image_name == "barn8"


def test_new_barn_keeps_given_name():
    assert new_barn([], name="Calf shed", target_temp=25).name == "Calf shed"


@pytest.mark.parametrize("temp", [14, 36])
def test_new_barn_rejects_target_temperature_outside_range(temp):
    with pytest.raises(ValueError):
        new_barn([], target_temp=temp)


def test_barn_serialisation_keeps_identity_and_sensors():
    barn = default_barns()[1]
    barn.sensors = default_sensors()

    data = barn.to_dict()
    assert data["vent_status"] == "On"
    assert uuid.UUID(data["id"]) == barn.id

    restored = Barn.from_dict(data)
    assert restored == barn
