"""Exercise catalog — the fixed reference set every plan draws from.

Declaration order matters: focused plans list a category's exercises in
this order, and the daily rotation indexes into it.
"""

from __future__ import annotations

from workout_engine.models.enums import Category
from workout_engine.models.exercise import Exercise

_A = Category.ARMS_BICEPS
_L = Category.LEGS
_S = Category.SHOULDERS
_AB = Category.ABS
_B = Category.BACK

EXERCISES: tuple[Exercise, ...] = (
    # Arms & Biceps
    Exercise("e1", "Push-ups", _A, met=8.0, base_reps=10),
    Exercise("e2", "Diamond Push-ups", _A, met=8.5, base_reps=8),
    Exercise("e3", "Bicep Curls", _A, met=4.0, base_reps=15),
    Exercise("e14", "Tricep Dips", _A, met=5.0, base_reps=12),
    Exercise("e15", "Hammer Curls", _A, met=4.0, base_reps=15),
    # Legs
    Exercise("e4", "Squats", _L, met=5.0, base_reps=15),
    Exercise("e5", "Lunges", _L, met=5.5, base_reps=12),
    Exercise("e6", "Calf Raises", _L, met=3.5, base_reps=20),
    Exercise("e16", "Bulgarian Split Squats", _L, met=6.0, base_reps=10),
    Exercise("e17", "Glute Bridges", _L, met=4.0, base_reps=15),
    # Shoulders
    Exercise("e7", "Shoulder Taps", _S, met=4.5, base_reps=20),
    Exercise("e8", "Pike Push-ups", _S, met=6.0, base_reps=8),
    Exercise("e18", "Lateral Raises", _S, met=4.0, base_reps=12),
    Exercise("e19", "Front Raises", _S, met=4.0, base_reps=12),
    # Abs
    Exercise("e9", "Crunches", _AB, met=3.8, base_reps=20),
    Exercise("e10", "Plank", _AB, met=4.0, base_reps=30),
    Exercise("e11", "Leg Raises", _AB, met=4.0, base_reps=12),
    Exercise("e20", "Russian Twists", _AB, met=4.5, base_reps=20),
    Exercise("e21", "Mountain Climbers", _AB, met=8.0, base_reps=30),
    # Back
    Exercise("e12", "Superman", _B, met=4.0, base_reps=12),
    Exercise("e13", "Bird Dog", _B, met=3.5, base_reps=15),
    Exercise("e22", "Reverse Flys", _B, met=4.0, base_reps=12),
    Exercise("e23", "Cat-Cow", _B, met=2.5, base_reps=10),
)

_BY_CATEGORY: dict[Category, tuple[Exercise, ...]] = {
    category: tuple(e for e in EXERCISES if e.category == category)
    for category in Category
}

_BY_ID: dict[str, Exercise] = {e.id: e for e in EXERCISES}


def exercises_in(category: Category) -> tuple[Exercise, ...]:
    """All exercises of *category*, in declaration order."""
    return _BY_CATEGORY[category]


def get_exercise(exercise_id: str) -> Exercise:
    """Look up an exercise by id. Raises KeyError for unknown ids."""
    return _BY_ID[exercise_id]
