"""Day-based intensity scaling for repetition targets."""

from __future__ import annotations

import math

from workout_engine.constants import INTENSITY_STEP_PER_DAY


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (10.5 -> 11, not 10)."""
    return int(math.floor(value + 0.5))


def intensity(day: int) -> float:
    """Rep multiplier for *day*: 1.0 on day 1, +0.05 per day, no ceiling.

    Day 11 -> 1.5, day 100 -> 5.95.
    """
    return 1.0 + (day - 1) * INTENSITY_STEP_PER_DAY


def scale_reps(base_reps: int, day: int) -> int:
    """Repetition target for an exercise on *day*."""
    return round_half_up(base_reps * intensity(day))
