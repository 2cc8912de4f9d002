"""Plan builder — turns a day number into an ordered list of exercises."""

from workout_engine.plan_builder.builder import generate_plan
from workout_engine.plan_builder.catalog import EXERCISES, exercises_in, get_exercise

__all__ = ["EXERCISES", "exercises_in", "generate_plan", "get_exercise"]
