"""Plan generation — maps (day, focus) to an ordered list of PlanItems.

Without a focus the plan visits every category once, rotating through
each category's exercises by day number. With a focus it lists every
exercise of that one category. Reps scale linearly with the day.

The function is pure: the same (day, focus) always yields the same plan.
"""

from __future__ import annotations

from workout_engine.math.scaling import scale_reps
from workout_engine.models.enums import Category
from workout_engine.models.exercise import Exercise, PlanItem
from workout_engine.plan_builder.catalog import exercises_in


def generate_plan(day: int, focus: Category | None = None) -> tuple[PlanItem, ...]:
    """Build the workout for *day*.

    Args:
        day: 1-indexed day number. No upper bound.
        focus: Restrict the plan to this category, or None for the
            standard one-exercise-per-category plan.

    Returns:
        Ordered, non-empty tuple of PlanItems.

    Raises:
        ValueError: If *day* is below 1.
    """
    if day < 1:
        raise ValueError(f"day must be >= 1, got {day}")

    if focus is not None:
        chosen: tuple[Exercise, ...] = exercises_in(focus)
    else:
        chosen = tuple(_rotate(category, day) for category in Category)

    return tuple(PlanItem(exercise=e, reps=scale_reps(e.base_reps, day)) for e in chosen)


def _rotate(category: Category, day: int) -> Exercise:
    """Pick the category's exercise for *day* (day mod category size)."""
    pool = exercises_in(category)
    return pool[day % len(pool)]
