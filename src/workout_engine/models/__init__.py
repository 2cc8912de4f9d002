"""Data models for the workout engine."""

from workout_engine.models.checkpoint import Checkpoint
from workout_engine.models.enums import (
    Category,
    DayStatus,
    Gender,
    SessionStatus,
)
from workout_engine.models.exercise import Exercise, PlanItem
from workout_engine.models.ledger import CompletionLedger
from workout_engine.models.profile import UserProfile, WorkoutConfig
from workout_engine.models.session import Session, SessionSummary

__all__ = [
    "Category",
    "Checkpoint",
    "CompletionLedger",
    "DayStatus",
    "Exercise",
    "Gender",
    "PlanItem",
    "Session",
    "SessionStatus",
    "SessionSummary",
    "UserProfile",
    "WorkoutConfig",
]
