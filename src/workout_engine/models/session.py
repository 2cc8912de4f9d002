"""Live workout session snapshot and its completion summary."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import Category, SessionStatus


@dataclass(frozen=True)
class Session:
    """Snapshot of an in-progress workout.

    The engine replaces the whole snapshot on every transition, so a
    reader never observes a half-applied change.
    """

    active: bool
    day: int
    exercise_index: int = 0
    resting: bool = False
    rest_remaining: int = 0  # seconds
    started_at: float | None = None  # epoch seconds
    focus: Category | None = None

    @property
    def status(self) -> SessionStatus:
        if not self.active:
            return SessionStatus.IDLE
        if self.resting:
            return SessionStatus.RESTING
        return SessionStatus.EXERCISING


@dataclass(frozen=True)
class SessionSummary:
    """Result of a finished session, shown once on the summary view."""

    day: int
    calories_burned: int
    duration_minutes: int
