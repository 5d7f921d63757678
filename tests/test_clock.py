import pytest

from logicsim.clock import SimulationClock


def test_fires_once_per_period():
    clock = SimulationClock(hz=4)
    fired = [clock.advance(0.125) for _ in range(8)]

    assert fired == [False, True] * 4
    assert clock.tick_count == 4


def test_at_most_one_tick_per_frame():
    clock = SimulationClock(hz=4)

    assert clock.advance(1.0)
    assert clock.tick_count == 1
    assert clock.elapsed == 0.0


def test_leftover_time_carries_over():
    clock = SimulationClock(hz=4)

    assert clock.advance(0.375)
    assert clock.elapsed == 0.125
    assert clock.advance(0.125)


def test_zero_hz_fires_every_frame():
    clock = SimulationClock(hz=0)

    assert clock.period == 0.0
    assert all(clock.advance(0.0) for _ in range(5))
    assert clock.tick_count == 5


def test_pause_freezes_ticks():
    clock = SimulationClock(hz=0, paused=True)

    assert not clock.running
    assert not any(clock.advance(1.0) for _ in range(5))
    assert clock.tick_count == 0
    assert clock.elapsed == 0.0


def test_step_only_while_paused():
    clock = SimulationClock(hz=4)

    assert not clock.step()
    assert clock.tick_count == 0

    clock.pause()
    assert clock.step()
    assert clock.step()
    assert clock.tick_count == 2


def test_toggle_keeps_time_and_ticks():
    clock = SimulationClock(hz=4)
    clock.advance(0.375)

    assert clock.toggle() is True
    clock.advance(0.125)
    assert clock.toggle() is False

    assert clock.tick_count == 1
    assert clock.elapsed == 0.125
    assert clock.advance(0.125)


def test_set_rate():
    clock = SimulationClock()

    assert clock.hz == 10
    clock.set_rate(2)
    assert clock.period == 0.5

    with pytest.raises(ValueError):
        clock.set_rate(-1)


def test_frame_times_add_up_exactly():
    """60 frames of 1/60 s at 10 Hz make exactly one second of ticks"""
    clock = SimulationClock(hz=10)
    fired = [clock.advance(1 / 60) for _ in range(60)]

    assert clock.tick_count == 10
    assert fired[5]
    assert fired.index(True) == 5
