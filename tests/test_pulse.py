import pytest
from PySide6.QtCore import QCoreApplication

from barnmonitor.view.widgets.pulse import PulseAnimator


@pytest.fixture(scope="module")
def qt_core():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def test_animator_is_idle_until_started(qt_core):
    pulse = PulseAnimator()
    assert not pulse.is_armed
    assert not pulse.is_running

    pulse.resume()
    assert not pulse.is_running


def test_suspend_stops_ticking_and_resume_restarts(qt_core):
    pulse = PulseAnimator()
    pulse.start()
    assert pulse.is_running

    # Leaving the detail page hides the heat-map view
    pulse.suspend()
    assert pulse.is_armed
    assert not pulse.is_running

    pulse.resume()
    assert pulse.is_running
    pulse.stop()


def test_stopped_animator_does_not_resume(qt_core):
    pulse = PulseAnimator()
    pulse.start()
    pulse.stop()

    pulse.resume()
    assert not pulse.is_armed
    assert not pulse.is_running


def test_tick_emits_scale_within_pulse_range(qt_core):
    pulse = PulseAnimator()
    received = []
    pulse.scale_changed.connect(received.append)

    pulse.start()
    pulse._tick()
    pulse.stop()

    assert len(received) == 1
    assert 1.0 <= received[0] <= 1.2
