"""Tests for the doubling checkpoint schedule."""

import pytest

from hardspheres.scheduler import CheckpointScheduler, format_elapsed


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


def test_period_doubles_after_each_checkpoint():
    clock = FakeClock(0.0)
    s = CheckpointScheduler(1.0, 1800.0, clock=clock)
    assert s.start() == 0.0

    assert not s.due(0.5)
    assert not s.due(1.0)  # must exceed the period
    assert s.due(1.01)
    s.mark(1.01)
    assert s.period == 2.0
    assert s.n_checkpoints == 1

    assert not s.due(3.0)
    assert s.due(3.02)
    s.mark(3.02)
    assert s.period == 4.0


def test_final_iteration_always_due():
    s = CheckpointScheduler(clock=FakeClock(0.0))
    s.start()
    assert s.due(0.0, final=True)


def test_period_capped():
    s = CheckpointScheduler(1000.0, 1800.0, clock=FakeClock(0.0))
    s.start()
    s.mark(1001.0)
    assert s.period == 1800.0
    s.mark(2802.0)
    assert s.period == 1800.0


def test_default_schedule_reaches_half_hour_cap():
    s = CheckpointScheduler(clock=FakeClock(0.0))
    s.start()
    periods = []
    for k in range(15):
        s.mark(float(k))
        periods.append(s.period)
    assert periods[:4] == [2.0, 4.0, 8.0, 16.0]
    assert max(periods) == 1800.0
    assert periods[-1] == 1800.0


def test_elapsed_from_start():
    clock = FakeClock(100.0)
    s = CheckpointScheduler(clock=clock)
    s.start()
    assert s.elapsed(130.5) == 30.5


def test_due_before_start_raises():
    s = CheckpointScheduler(clock=FakeClock(0.0))
    with pytest.raises(RuntimeError):
        s.due(1.0)


@pytest.mark.parametrize("seconds,expected", [
    (0.0, "0 days, 00:00:00"),
    (59.9, "0 days, 00:00:59"),
    (3661.0, "0 days, 01:01:01"),
    (93784.0, "1 days, 02:03:04"),
])
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
