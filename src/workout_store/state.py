"""AppState — the profile, workout config and ledger, backed by a store.

Loaded once at process start with a typed default for anything missing
or malformed, and written back after every mutation. A failed write is
logged and otherwise ignored: the in-memory state remains authoritative
for the life of the process and the next successful write catches the
file up.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, TypeVar

from workout_engine.models.enums import Gender
from workout_engine.models.ledger import CompletionLedger
from workout_engine.models.profile import UserProfile, WorkoutConfig
from workout_store.exceptions import StoreWriteError
from workout_store.store import JsonFileStore

logger = logging.getLogger(__name__)

USER_KEY = "redcarduh_user"
CONFIG_KEY = "redcarduh_config"
COMPLETED_KEY = "redcarduh_completed"

T = TypeVar("T")


class AppState:
    """Process-wide persisted state, passed to whatever needs it."""

    def __init__(
        self,
        store: JsonFileStore,
        profile: UserProfile | None = None,
        config: WorkoutConfig | None = None,
        ledger: CompletionLedger | None = None,
    ) -> None:
        self.store = store
        self.profile = profile or UserProfile()
        self.config = config or WorkoutConfig()
        self.ledger = ledger if ledger is not None else CompletionLedger()

    @classmethod
    def load(cls, store: JsonFileStore) -> AppState:
        """Read all state from *store*, falling back to defaults."""
        return cls(
            store=store,
            profile=parse_profile(store.get(USER_KEY)),
            config=parse_config(store.get(CONFIG_KEY)),
            ledger=parse_ledger(store.get(COMPLETED_KEY)),
        )

    # ------------------------------------------------------------------
    # Mutations (each persists its own slice)
    # ------------------------------------------------------------------

    def update_profile(self, **changes: Any) -> UserProfile:
        self.profile = dataclasses.replace(self.profile, **changes)
        self.save_profile()
        return self.profile

    def update_config(self, **changes: Any) -> WorkoutConfig:
        self.config = dataclasses.replace(self.config, **changes)
        self.save_config()
        return self.config

    def record_completion(self, day: int) -> bool:
        """Add *day* to the ledger and persist. False if already recorded."""
        added = self.ledger.record(day)
        if added:
            self.save_ledger()
        return added

    def wipe(self) -> None:
        """Erase everything, on disk and in memory. Irreversible."""
        self.profile = UserProfile()
        self.config = WorkoutConfig()
        self.ledger.reset()
        try:
            self.store.clear()
        except StoreWriteError as exc:
            logger.warning("Failed to clear store: %s", exc)
        logger.info("All data wiped")

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_profile(self) -> bool:
        return self._put(USER_KEY, self.profile.to_dict())

    def save_config(self) -> bool:
        return self._put(CONFIG_KEY, self.config.to_dict())

    def save_ledger(self) -> bool:
        return self._put(COMPLETED_KEY, self.ledger.to_list())

    def save(self) -> bool:
        results = [self.save_profile(), self.save_config(), self.save_ledger()]
        return all(results)

    def _put(self, key: str, value: Any) -> bool:
        try:
            self.store.put(key, value)
        except StoreWriteError as exc:
            logger.warning("Failed to persist %s: %s", key, exc)
            return False
        return True


# ---------------------------------------------------------------------------
# Typed parsing with default fallback
# ---------------------------------------------------------------------------


def _field(raw: dict, key: str, convert: Callable[[Any], T], default: T) -> T:
    """Convert ``raw[key]``, or return *default* if absent or malformed."""
    if key not in raw:
        return default
    try:
        return convert(raw[key])
    except (TypeError, ValueError):
        logger.warning("Malformed stored field %r=%r, using default", key, raw[key])
        return default


def _positive_number(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    number = float(value)
    if not number > 0:
        raise ValueError(f"expected a positive number, got {value!r}")
    return number


def _positive_int(value: Any) -> int:
    number = _positive_number(value)
    if number != int(number):
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(number)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {type(value).__name__}")
    return value


def parse_profile(raw: Any) -> UserProfile:
    """Stored profile dict -> UserProfile, per-field defaults."""
    default = UserProfile()
    if raw is None:
        return default
    if not isinstance(raw, dict):
        logger.warning("Stored profile is not an object, using defaults")
        return default
    return UserProfile(
        name=_field(raw, "name", _string, default.name),
        height_cm=_field(raw, "height", _positive_number, default.height_cm),
        weight_kg=_field(raw, "weight", _positive_number, default.weight_kg),
        dob=_field(raw, "dob", _string, default.dob),
        gender=_field(raw, "gender", Gender, default.gender),
        onboarded=_field(raw, "onboarded", _flag, default.onboarded),
    )


def parse_config(raw: Any) -> WorkoutConfig:
    """Stored config dict -> WorkoutConfig, per-field defaults."""
    default = WorkoutConfig()
    if raw is None:
        return default
    if not isinstance(raw, dict):
        logger.warning("Stored config is not an object, using defaults")
        return default
    return WorkoutConfig(
        session_duration_min=_field(
            raw, "sessionDuration", _positive_int, default.session_duration_min,
        ),
        rest_duration_s=_field(
            raw, "restDuration", _positive_int, default.rest_duration_s,
        ),
    )


def parse_ledger(raw: Any) -> CompletionLedger:
    """Stored list of day numbers -> CompletionLedger.

    Anything that is not a positive integer is dropped.
    """
    if raw is None:
        return CompletionLedger()
    if not isinstance(raw, list):
        logger.warning("Stored ledger is not a list, starting empty")
        return CompletionLedger()
    days = [d for d in raw if isinstance(d, int) and not isinstance(d, bool) and d >= 1]
    if len(days) != len(raw):
        logger.warning("Dropped %d malformed ledger entries", len(raw) - len(days))
    return CompletionLedger(days)
