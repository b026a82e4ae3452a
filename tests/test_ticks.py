import pytest

from eel.ticks import TickScheduler, interval_ms


class CountingState:
    def __init__(self):
        self.steps = 0

    def step(self):
        self.steps += 1
        return True


def test_interval_endpoints():
    assert interval_ms(1) == 150
    assert interval_ms(9) == 75


def test_interval_is_decreasing():
    values = [interval_ms(level) for level in range(1, 10)]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == 9
    assert interval_ms(5) == pytest.approx(100.0)


@pytest.mark.parametrize("level", [0, 10, -1])
def test_interval_rejects_out_of_range(level):
    with pytest.raises(ValueError):
        interval_ms(level)


def test_scheduler_rejects_bad_level():
    scheduler = TickScheduler(3)
    with pytest.raises(ValueError):
        scheduler.set_level(12)
    assert scheduler.level == 3


def test_fires_once_interval_is_reached():
    scheduler = TickScheduler(1)
    assert scheduler.advance(100) == 0
    assert scheduler.advance(49) == 0
    assert scheduler.advance(1) == 1
    assert scheduler.elapsed_ms == 0


def test_fast_fires_two_steps():
    scheduler = TickScheduler(9)
    assert scheduler.advance(75, fast=True) == 2


def test_no_catch_up_and_no_drift():
    scheduler = TickScheduler(1)
    # ten intervals worth of time still fire a single tick
    assert scheduler.advance(1500) == 1
    assert scheduler.elapsed_ms == 0
    assert scheduler.advance(149) == 0
    assert scheduler.advance(1500, fast=True) == 2


def test_reset_clears_accumulator():
    scheduler = TickScheduler(1)
    scheduler.advance(140)
    scheduler.reset()
    assert scheduler.advance(20) == 0


def test_run_steps_the_state():
    scheduler = TickScheduler(9)
    state = CountingState()
    assert scheduler.run(state, 50) == 0
    assert scheduler.run(state, 50, fast=True) == 2
    assert state.steps == 2
    assert scheduler.run(state, 80) == 1
    assert state.steps == 3


def test_set_level_changes_interval():
    scheduler = TickScheduler(1)
    scheduler.advance(80)
    assert scheduler.advance(0) == 0
    scheduler.set_level(9)
    assert scheduler.advance(0) == 1
