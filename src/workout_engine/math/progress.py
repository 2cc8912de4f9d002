"""Phase and streak arithmetic over a set of completed day numbers.

A phase is a 30-day block. The current phase is derived from how many
days have been completed, not from which ones, so finishing days out of
order still moves the user through phases.
"""

from __future__ import annotations

from collections.abc import Collection

from workout_engine.constants import PHASE_LENGTH_DAYS
from workout_engine.math.scaling import intensity, round_half_up
from workout_engine.models.checkpoint import Checkpoint
from workout_engine.models.enums import DayStatus


def current_phase(completed: Collection[int]) -> int:
    """1-indexed phase number: floor(|completed| / 30) + 1."""
    return len(completed) // PHASE_LENGTH_DAYS + 1


def phase_start(phase: int) -> int:
    """Day offset before the first day of *phase* (phase 2 -> 30)."""
    return (phase - 1) * PHASE_LENGTH_DAYS


def phase_progress(completed: Collection[int]) -> int:
    """Completed days falling inside the current phase's 30-day window."""
    start = phase_start(current_phase(completed))
    return sum(1 for d in completed if start < d <= start + PHASE_LENGTH_DAYS)


def completion_pct(completed: Collection[int]) -> int:
    """Current phase progress as a whole percentage."""
    return round_half_up(phase_progress(completed) / PHASE_LENGTH_DAYS * 100)


def next_available_day(completed: Collection[int]) -> int:
    """The day after the highest completed one, or 1 for an empty history."""
    if not completed:
        return 1
    return max(completed) + 1


def is_day_locked(day: int, next_day: int) -> bool:
    """Presentation policy: days beyond the next sequential day are locked.

    The engine itself will start any day >= 1.
    """
    return day > next_day


def display_intensity(completed: Collection[int]) -> float:
    """Multiplier shown on the dashboard for the upcoming workout."""
    return intensity(len(completed) + 1)


def checkpoints(completed: Collection[int]) -> tuple[Checkpoint, ...]:
    """One checkpoint per phase already passed."""
    passed = current_phase(completed) - 1
    return tuple(
        Checkpoint(
            number=i + 1,
            first_day=i * PHASE_LENGTH_DAYS + 1,
            last_day=(i + 1) * PHASE_LENGTH_DAYS,
        )
        for i in range(passed)
    )


def day_status(day: int, completed: Collection[int], next_day: int) -> DayStatus:
    if day in completed:
        return DayStatus.DONE
    if day == next_day:
        return DayStatus.NEXT
    if is_day_locked(day, next_day):
        return DayStatus.LOCKED
    return DayStatus.OPEN


def training_matrix(completed: Collection[int]) -> tuple[tuple[int, DayStatus], ...]:
    """(day, status) for each of the 30 days of the current phase."""
    start = phase_start(current_phase(completed))
    next_day = next_available_day(completed)
    return tuple(
        (day, day_status(day, completed, next_day))
        for day in range(start + 1, start + PHASE_LENGTH_DAYS + 1)
    )
