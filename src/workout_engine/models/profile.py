"""User profile and workout configuration records."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.constants import (
    DEFAULT_DOB,
    DEFAULT_HEIGHT_CM,
    DEFAULT_REST_DURATION_S,
    DEFAULT_SESSION_DURATION_MIN,
    DEFAULT_WEIGHT_KG,
)
from workout_engine.models.enums import Gender


@dataclass(frozen=True)
class UserProfile:
    """Body data entered during onboarding. Weight feeds calorie accounting."""

    name: str = ""
    height_cm: float = DEFAULT_HEIGHT_CM
    weight_kg: float = DEFAULT_WEIGHT_KG
    dob: str = DEFAULT_DOB  # ISO date
    gender: Gender = Gender.MALE
    onboarded: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "height": self.height_cm,
            "weight": self.weight_kg,
            "dob": self.dob,
            "gender": self.gender.value,
            "onboarded": self.onboarded,
        }


@dataclass(frozen=True)
class WorkoutConfig:
    """Session and rest durations.

    Ranges are enforced by the UI controls (10-120 min, 10-90 s), not here.
    """

    session_duration_min: int = DEFAULT_SESSION_DURATION_MIN
    rest_duration_s: int = DEFAULT_REST_DURATION_S

    def to_dict(self) -> dict:
        return {
            "sessionDuration": self.session_duration_min,
            "restDuration": self.rest_duration_s,
        }
