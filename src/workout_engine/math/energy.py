"""Energy and duration accounting for finished sessions.

Energy uses the standard MET formula:

    kcal = MET x body weight (kg) x duration (h)

Every exercise in the plan is charged a flat nominal 60 seconds, however
long the user actually spent on it. Duration, by contrast, is real
wall-clock time from session start to completion.

Reference:
    Ainsworth et al. (2011). Compendium of Physical Activities: a second
    update of codes and MET values. Med Sci Sports Exerc 43(8):1575-1581.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from workout_engine.constants import NOMINAL_EXERCISE_DURATION_S, SECONDS_PER_HOUR
from workout_engine.math.scaling import round_half_up
from workout_engine.models.exercise import PlanItem
from workout_engine.models.session import Session, SessionSummary


def calories_for(met: float, duration_s: float, weight_kg: float) -> float:
    """Energy expenditure in kcal for one exercise bout."""
    return met * weight_kg * (duration_s / SECONDS_PER_HOUR)


def session_calories(plan: Sequence[PlanItem], weight_kg: float) -> int:
    """Total kcal for a plan, each item charged the nominal 60 seconds."""
    if not plan:
        return 0
    mets = np.array([item.met for item in plan], dtype=float)
    total = float(np.sum(calories_for(mets, NOMINAL_EXERCISE_DURATION_S, weight_kg)))
    return round_half_up(total)


def elapsed_minutes(started_at: float | None, finished_at: float) -> int:
    """Whole minutes between two epoch timestamps.

    A missing start time counts as zero elapsed time. Clock skew that
    would make the result negative is clamped to 0.
    """
    if started_at is None:
        return 0
    return max(0, math.floor((finished_at - started_at) / 60))


def summarise(
    session: Session,
    plan: Sequence[PlanItem],
    weight_kg: float,
    finished_at: float,
) -> SessionSummary:
    """Build the summary shown when *session* completes."""
    return SessionSummary(
        day=session.day,
        calories_burned=session_calories(plan, weight_kg),
        duration_minutes=elapsed_minutes(session.started_at, finished_at),
    )
