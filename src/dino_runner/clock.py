"""
clock.py: Converts host frame timestamps into clamped tick deltas.
"""

from typing import Optional

from .constants import MAX_DELTA_TIME


class Clock:
    """
    Frame clock fed with monotonically increasing timestamps (milliseconds).

    The first call only bootstraps the reference point and yields a zero delta.
    Later deltas are clamped to [0, MAX_DELTA_TIME] seconds so a stalled host
    (e.g. a minimized window) never produces a huge simulation step.
    """

    def __init__(self, max_delta: float = MAX_DELTA_TIME):
        self.max_delta = max_delta
        self.last_time: Optional[float] = None
        self.game_time = 0.0  # ms, only advances while the session runs

    def tick(self, timestamp_ms: float) -> float:
        """Returns the elapsed time since the previous call, in seconds."""
        if self.last_time is None:
            self.last_time = timestamp_ms
        delta = (timestamp_ms - self.last_time) / 1000.0
        self.last_time = timestamp_ms
        return min(max(delta, 0.0), self.max_delta)

    def advance_game_time(self, dt: float, running: bool) -> float:
        if running:
            self.game_time += dt * 1000.0
        return self.game_time

    def reset_game_time(self):
        self.game_time = 0.0
