"""Time-adaptive checkpoint schedule."""

import time

from .config import INITIAL_OUTPUT_PERIOD, MAX_OUTPUT_PERIOD


class CheckpointScheduler:
    """Decides when to write a checkpoint.

    A checkpoint is due when more than ``period`` seconds have passed since
    the last one, or on the final iteration. Each checkpoint doubles the
    period, up to ``max_period``.

    Args:
        initial_period: First interval in seconds
        max_period: Largest interval in seconds
        clock: Callable returning the current time in seconds
    """

    def __init__(self, initial_period=INITIAL_OUTPUT_PERIOD, max_period=MAX_OUTPUT_PERIOD,
                 clock=time.perf_counter):
        self.period = float(initial_period)
        self.max_period = float(max_period)
        self.clock = clock
        self.start_time = None
        self.last_output = None
        self.n_checkpoints = 0

    def start(self):
        """Start the clock. Returns the start time."""
        self.start_time = self.clock()
        self.last_output = self.start_time
        return self.start_time

    def due(self, now, final=False):
        if self.last_output is None:
            raise RuntimeError("CheckpointScheduler.start() must be called first")
        return final or (now - self.last_output > self.period)

    def mark(self, now):
        """Record a checkpoint at time now and lengthen the interval."""
        self.last_output = now
        self.period = min(self.period * 2.0, self.max_period)
        self.n_checkpoints += 1

    def elapsed(self, now):
        return now - self.start_time


def format_elapsed(seconds):
    """Format a duration as 'D days, HH:MM:SS'."""
    secs = int(seconds)
    days = secs // 86400
    hours = (secs // 3600) % 24
    minutes = (secs // 60) % 60
    return f"{days} days, {hours:02d}:{minutes:02d}:{secs % 60:02d}"
