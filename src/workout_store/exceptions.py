"""Custom exception hierarchy for the persisted key-value store."""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base exception for all workout_store errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StoreReadError(StoreError):
    """The store file exists but could not be read or decoded."""


class StoreWriteError(StoreError):
    """Writing the store file failed (permissions, disk full, etc.)."""
