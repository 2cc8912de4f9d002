"""Enumerations and constants for the workout engine."""

from enum import Enum, IntEnum, auto


class Category(IntEnum):
    """Body-part categories, in the fixed order a daily plan visits them."""

    ARMS_BICEPS = auto()
    LEGS = auto()
    SHOULDERS = auto()
    ABS = auto()
    BACK = auto()

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def from_label(cls, text: str) -> "Category":
        """Resolve a display label ("Arms & Biceps") or member name ("legs")."""
        wanted = text.strip().lower()
        for member in cls:
            if wanted in (member.label.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown category: {text!r}")


_CATEGORY_LABELS: dict[Category, str] = {
    Category.ARMS_BICEPS: "Arms & Biceps",
    Category.LEGS: "Legs",
    Category.SHOULDERS: "Shoulders",
    Category.ABS: "Abs",
    Category.BACK: "Back",
}


class SessionStatus(IntEnum):
    """Sub-state of the live workout session."""

    IDLE = auto()
    EXERCISING = auto()
    RESTING = auto()


class DayStatus(IntEnum):
    """Status of a day cell in the phase training matrix."""

    DONE = auto()
    NEXT = auto()
    OPEN = auto()
    LOCKED = auto()


class Gender(str, Enum):
    """Stored as its lowercase value."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
