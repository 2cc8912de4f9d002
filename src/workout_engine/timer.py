"""Tick sources — the timer facility that drives rest countdowns.

The engine never sleeps or reads the clock to count down. A TickSource
calls back once per elapsed second while started; the engine starts it
when a rest begins and stops it when the rest ends or the session is
abandoned. ``start`` and ``stop`` are idempotent.
"""

from __future__ import annotations

from typing import Callable, Protocol

TickCallback = Callable[[], object]


class TickSource(Protocol):
    """Anything that can deliver periodic one-second callbacks."""

    @property
    def running(self) -> bool: ...

    def start(self, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class ManualTickSource:
    """Tick source fired by hand. Used by tests and step-by-step hosts.

    Usage::

        ticks = ManualTickSource()
        engine = SessionEngine(state, ticker=ticks)
        ...
        ticks.fire(30)  # thirty seconds pass
    """

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self.starts = 0
        self.stops = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self.starts += 1
        self._callback = callback

    def stop(self) -> None:
        if self._callback is not None:
            self.stops += 1
        self._callback = None

    def fire(self, count: int = 1) -> int:
        """Deliver up to *count* ticks. Returns how many were delivered.

        Stops early once the callback stops the source.
        """
        delivered = 0
        for _ in range(count):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered
