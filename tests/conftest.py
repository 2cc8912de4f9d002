"""Shared test fixtures: stores, app state, a controllable clock, engines."""

from __future__ import annotations

from pathlib import Path

import pytest

from workout_engine.engine import SessionEngine
from workout_engine.models.ledger import CompletionLedger
from workout_engine.models.profile import UserProfile, WorkoutConfig
from workout_engine.timer import ManualTickSource
from workout_store.state import AppState
from workout_store.store import JsonFileStore


class FakeClock:
    """Epoch-seconds clock advanced by hand."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "store.json"


@pytest.fixture
def store(store_path: Path) -> JsonFileStore:
    return JsonFileStore(store_path)


@pytest.fixture
def app_state(store: JsonFileStore) -> AppState:
    """70 kg user, 30 s rest, empty ledger."""
    return AppState(
        store=store,
        profile=UserProfile(name="Ada", weight_kg=70.0, onboarded=True),
        config=WorkoutConfig(session_duration_min=30, rest_duration_s=30),
        ledger=CompletionLedger(),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ticker() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def engine(app_state: AppState, ticker: ManualTickSource, clock: FakeClock) -> SessionEngine:
    return SessionEngine(app_state, ticker=ticker, clock=clock)
