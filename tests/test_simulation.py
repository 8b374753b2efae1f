import logging
from dataclasses import replace

import numpy as np
import pytest

from pulse_sandbox.config import N_POINTS, X_MAX, X_MIN, Direction, SimulationParameters
from pulse_sandbox.pulses import PulseShape, displacement_at
from pulse_sandbox.simulation import HistoryBuffer, SimulationDriver


@pytest.fixture
def params():
    return SimulationParameters(shape=PulseShape.TRIANGULAR, max_time=1.0, frame_rate=10.0)


@pytest.fixture
def driver(params):
    return SimulationDriver(params)


def test_history_buffer_evicts_oldest_first():
    buf = HistoryBuffer(capacity=3)
    for i in range(5):
        buf.append(float(i), float(10 * i))
    assert len(buf) == 3
    assert list(buf.times()) == [2.0, 3.0, 4.0]
    assert list(buf.displacements()) == [20.0, 30.0, 40.0]
    assert buf.capacity == 3


def test_history_buffer_rejects_bad_capacity():
    with pytest.raises(ValueError):
        HistoryBuffer(capacity=0)


def test_starts_paused_at_zero(driver):
    assert driver.current_time == 0.0
    assert not driver.playing
    assert len(driver.history) == 0


def test_tick_while_paused_does_nothing(driver):
    driver.tick()
    assert driver.current_time == 0.0
    assert len(driver.history) == 0


def test_tick_advances_and_records_probe(driver, params):
    driver.play()
    driver.tick()
    assert driver.current_time == pytest.approx(0.1)
    (sample,) = list(driver.history)
    assert sample.time == pytest.approx(0.1)
    assert sample.displacement == pytest.approx(displacement_at(params.probe_point, 0.1, params))


def test_tick_clamps_at_max_time_and_pauses(driver):
    driver.play()
    for _ in range(15):
        driver.tick()
    assert driver.current_time == 1.0
    assert not driver.playing
    # 10 steps of 0.1 reach roughly 1.0; the clamped step is recorded once more
    times = driver.history.times()
    assert times[-1] == 1.0
    assert np.all(np.diff(times) >= 0.0)


def test_toggle_at_max_time_pauses_on_next_tick(driver):
    driver.play()
    for _ in range(20):
        driver.tick()
    n = len(driver.history)
    driver.toggle_play()
    assert driver.playing
    driver.tick()
    assert not driver.playing
    assert driver.current_time == 1.0
    assert len(driver.history) == n + 1


def test_history_never_exceeds_capacity(params):
    driver = SimulationDriver(replace(params, max_time=30.0), capacity=5)
    driver.play()
    for _ in range(12):
        driver.tick()
    assert len(driver.history) == 5
    assert driver.history.times()[0] == pytest.approx(0.8)


def test_reset_clears_everything(driver):
    driver.play()
    for _ in range(4):
        driver.tick()
    driver.reset()
    assert driver.current_time == 0.0
    assert not driver.playing
    assert len(driver.history) == 0


@pytest.mark.parametrize("new_dir, center", [(Direction.LEFT, X_MAX), (Direction.RIGHT, X_MIN)])
def test_direction_change_resets_and_moves_center(new_dir, center):
    start = Direction.RIGHT if new_dir == Direction.LEFT else Direction.LEFT
    p = SimulationParameters(direction=start, initial_center=7.5, max_time=5.0)
    driver = SimulationDriver(p)
    driver.play()
    driver.tick()
    driver.tick()

    applied = driver.update(replace(p, direction=new_dir))

    assert applied.initial_center == center
    assert driver.params.initial_center == center
    assert driver.current_time == 0.0
    assert not driver.playing
    assert len(driver.history) == 0


def test_same_direction_keeps_requested_center(driver, params):
    applied = driver.update(replace(params, initial_center=4.2))
    assert applied.initial_center == 4.2


def test_lower_max_time_clamps_without_clearing_history(params):
    driver = SimulationDriver(replace(params, max_time=10.0))
    driver.play()
    for _ in range(30):
        driver.tick()
    n = len(driver.history)
    driver.update(replace(params, max_time=2.0))
    assert driver.current_time == 2.0
    assert len(driver.history) == n


def test_snapshot_is_idempotent(driver):
    driver.play()
    driver.tick()
    x1, u1 = driver.snapshot()
    x2, u2 = driver.snapshot()
    assert len(x1) == N_POINTS
    assert x1[0] == X_MIN and x1[-1] == X_MAX
    np.testing.assert_array_equal(u1, u2)
    np.testing.assert_array_equal(x1, x2)


def test_frame_payload(params):
    driver = SimulationDriver(params)
    driver.toggle_play()
    payload = driver.frame(params)

    assert payload.status_text == "t = 0.10 s"
    assert payload.play_label == "Pause"
    assert payload.snapshot_title == "Triangular Pulse Traveling Right   (t=0.10 s)"
    assert payload.history_title == "History at x = 6.00"
    assert payload.y_limits == pytest.approx((-1.1, 1.1))
    assert payload.time_limits == (0.0, 1.0)
    assert payload.marker[0] == params.probe_point
    assert len(payload.history_t) == 1


def test_frame_reads_parameters_before_ticking(params):
    driver = SimulationDriver(params)
    driver.play()
    faster = replace(params, frame_rate=20.0)
    driver.frame(faster)
    assert driver.current_time == pytest.approx(0.05)


def test_degenerate_width_logged_once(caplog, params):
    driver = SimulationDriver(params)
    bad = replace(params, width=0.0)
    with caplog.at_level(logging.WARNING, logger="pulse_sandbox"):
        driver.update(bad)
        driver.update(bad)
    assert caplog.text.count("not positive") == 1
    _, u = driver.snapshot()
    assert np.all(u == 0.0)
