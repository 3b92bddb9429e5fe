"""
scorer.py: Distance-based scoring and the day/night cycle.
"""

import math

from .constants import (
    DAY_NIGHT_PERIOD, DISTANCE_PER_POINT, HALF_TRANSITION, NIGHT_START
)
from .data_models import SessionState


def night_progress(score: int) -> float:
    """
    Blend factor between the day (0.0) and night (1.0) themes for a score.

    The cycle is DAY_NIGHT_PERIOD points long: day, a ramp into night centred
    on NIGHT_START, night, then a ramp back to day centred on the cycle seam.
    The second half of that last ramp sits at the start of the next cycle, so
    it only applies once a full cycle has been reached.
    """
    ramp = HALF_TRANSITION * 2
    cycle_pos = score % DAY_NIGHT_PERIOD

    if cycle_pos < HALF_TRANSITION and score >= DAY_NIGHT_PERIOD - HALF_TRANSITION:
        return 1 - (cycle_pos + HALF_TRANSITION) / ramp
    if cycle_pos < NIGHT_START - HALF_TRANSITION:
        return 0.0
    if cycle_pos < NIGHT_START + HALF_TRANSITION:
        return (cycle_pos - (NIGHT_START - HALF_TRANSITION)) / ramp
    if cycle_pos < DAY_NIGHT_PERIOD - HALF_TRANSITION:
        return 1.0
    return 1 - (cycle_pos - (DAY_NIGHT_PERIOD - HALF_TRANSITION)) / ramp


class Scorer:
    """Mutates score, distance and night progress of a running session."""

    def update(self, state: SessionState, dt: float):
        if not state.running:
            return
        state.distance += state.game_speed * dt
        state.score = math.floor(state.distance / DISTANCE_PER_POINT)
        state.night_progress = night_progress(state.score)
