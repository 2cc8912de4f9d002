"""Catalog exercise and day-scaled plan item."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import Category


@dataclass(frozen=True)
class Exercise:
    """A single catalog entry. Defined once, never mutated."""

    id: str
    name: str
    category: Category
    met: float  # metabolic equivalent of task
    base_reps: int


@dataclass(frozen=True)
class PlanItem:
    """An Exercise with its repetition target for a specific day."""

    exercise: Exercise
    reps: int

    @property
    def id(self) -> str:
        return self.exercise.id

    @property
    def name(self) -> str:
        return self.exercise.name

    @property
    def category(self) -> Category:
        return self.exercise.category

    @property
    def met(self) -> float:
        return self.exercise.met

    @property
    def base_reps(self) -> int:
        return self.exercise.base_reps
