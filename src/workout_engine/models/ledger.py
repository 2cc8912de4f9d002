"""Completion ledger — the set of finished day numbers.

The ledger only grows, except for an explicit ``reset()`` when the user
wipes all data. Insertion order is kept for the recent-activity list;
every other derived value depends on membership alone.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from workout_engine.constants import RECENT_ACTIVITY_LIMIT
from workout_engine.math import progress
from workout_engine.models.checkpoint import Checkpoint
from workout_engine.models.enums import DayStatus


class CompletionLedger:
    """Set of completed days with streak and phase helpers."""

    def __init__(self, days: Iterable[int] = ()) -> None:
        # dict keeps insertion order and gives set semantics
        self._days: dict[int, None] = dict.fromkeys(days)

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __iter__(self) -> Iterator[int]:
        return iter(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"CompletionLedger({list(self._days)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompletionLedger):
            return NotImplemented
        return self.days == other.days

    # -- Mutation ---------------------------------------------------------

    def record(self, day: int) -> bool:
        """Mark *day* complete. Returns False if it already was."""
        if day in self._days:
            return False
        self._days[day] = None
        return True

    def reset(self) -> None:
        self._days.clear()

    # -- Derived values ---------------------------------------------------

    @property
    def days(self) -> frozenset[int]:
        return frozenset(self._days)

    @property
    def streak(self) -> int:
        return len(self._days)

    @property
    def current_phase(self) -> int:
        return progress.current_phase(self._days)

    @property
    def phase_start(self) -> int:
        return progress.phase_start(self.current_phase)

    @property
    def phase_progress(self) -> int:
        return progress.phase_progress(self._days)

    @property
    def completion_pct(self) -> int:
        return progress.completion_pct(self._days)

    @property
    def display_intensity(self) -> float:
        return progress.display_intensity(self._days)

    def next_available_day(self) -> int:
        return progress.next_available_day(self._days)

    def recent(self, limit: int = RECENT_ACTIVITY_LIMIT) -> tuple[int, ...]:
        """Most recently recorded days first."""
        return tuple(reversed(list(self._days)))[:limit]

    def checkpoints(self) -> tuple[Checkpoint, ...]:
        return progress.checkpoints(self._days)

    def training_matrix(self) -> tuple[tuple[int, DayStatus], ...]:
        return progress.training_matrix(self._days)

    def to_list(self) -> list[int]:
        """Serializable form, in insertion order."""
        return list(self._days)
