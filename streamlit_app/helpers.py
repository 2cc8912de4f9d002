"""Utility helpers bridging the Streamlit UI and the workout engine.

Pure functions for formatting and for shaping engine output into
DataFrames, plus the rerun-to-seconds converter behind the rest countdown.
"""

from __future__ import annotations

import time
from typing import Callable

import pandas as pd

from workout_engine.models.enums import Category, DayStatus
from workout_engine.models.exercise import PlanItem
from workout_engine.models.ledger import CompletionLedger

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_intensity(multiplier: float) -> str:
    """e.g. 1.25 -> '1.25X'."""
    return f"{multiplier:.2f}X"


def format_rest(seconds: int) -> str:
    """e.g. 30 -> '30S'."""
    return f"{max(seconds, 0)}S"


def format_phase_progress(ledger: CompletionLedger) -> str:
    """e.g. '12/30 DAYS (PHASE 1)'."""
    return f"{ledger.phase_progress}/30 DAYS (PHASE {ledger.current_phase})"


def clamp(value: float, bounds: tuple) -> float:
    """Pin *value* into a widget's (min, max, ...) range."""
    lo, hi = bounds[0], bounds[1]
    return min(max(value, lo), hi)


# ---------------------------------------------------------------------------
# Display maps
# ---------------------------------------------------------------------------

DAY_STATUS_LABELS: dict[DayStatus, str] = {
    DayStatus.DONE: "DONE",
    DayStatus.NEXT: "NEXT",
    DayStatus.OPEN: "",
    DayStatus.LOCKED: "LOCKED",
}

CATEGORY_ICONS: dict[Category, str] = {
    Category.ARMS_BICEPS: "💪",
    Category.LEGS: "🦵",
    Category.SHOULDERS: "🏋️",
    Category.ABS: "🔥",
    Category.BACK: "🧍",
}


# ---------------------------------------------------------------------------
# DataFrame views
# ---------------------------------------------------------------------------


def plan_frame(plan: tuple[PlanItem, ...]) -> pd.DataFrame:
    """Tabular view of a plan: one row per exercise."""
    return pd.DataFrame(
        [
            {
                "#": i,
                "Exercise": item.name,
                "Category": item.category.label,
                "Reps": item.reps,
                "MET": item.met,
            }
            for i, item in enumerate(plan, start=1)
        ],
        columns=["#", "Exercise", "Category", "Reps", "MET"],
    ).set_index("#")


def matrix_rows(ledger: CompletionLedger, columns: int = 6) -> list[list[tuple[int, DayStatus]]]:
    """Split the 30-day training matrix into grid rows."""
    cells = list(ledger.training_matrix())
    return [cells[i:i + columns] for i in range(0, len(cells), columns)]


def recent_frame(ledger: CompletionLedger) -> pd.DataFrame:
    """Most recent completions, newest first."""
    return pd.DataFrame(
        [{"Protocol": f"Protocol {day}", "Status": "DONE"} for day in ledger.recent()],
        columns=["Protocol", "Status"],
    )


# ---------------------------------------------------------------------------
# Rest countdown
# ---------------------------------------------------------------------------


class RestTicker:
    """Turns fragment reruns into whole elapsed seconds for one rest.

    Any rerun can reach the countdown, not only the timed ones, so the
    number of ticks owed comes from the clock rather than from the
    number of reruns. The first call after ``reset()`` only starts the
    clock and owes nothing.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._last: float | None = None

    def reset(self) -> None:
        self._last = None

    def due(self) -> int:
        now = self.clock()
        if self._last is None:
            self._last = now
            return 0
        count = int(now - self._last)
        self._last += count
        return count
