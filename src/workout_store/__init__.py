"""Persisted key-value store — all disk I/O lives here."""

from workout_store.exceptions import StoreError, StoreReadError, StoreWriteError
from workout_store.state import AppState
from workout_store.store import JsonFileStore

__all__ = [
    "AppState",
    "JsonFileStore",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
]
