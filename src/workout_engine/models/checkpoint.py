"""Checkpoint — a phase the user has fully passed."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Checkpoint:
    """Shown on the progress view, e.g. "Checkpoint 1: days 1 - 30"."""

    number: int  # 1-indexed
    first_day: int
    last_day: int  # inclusive
