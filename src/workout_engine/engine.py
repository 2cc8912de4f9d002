"""SessionEngine — the state machine behind a live workout.

States::

    IDLE --start--> EXERCISING --complete (not last)--> RESTING
                        ^  |                               |
                        |  +--complete (last)--> IDLE      |
                        +------- rest expires / skip ------+

Any state --abort--> IDLE, without recording the day.

Rest expiry is the only path that moves forward after a rest, whether
the countdown ran out or the user skipped it. Illegal calls are
rejected as no-ops: they return False (or None) and leave state as is.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import TYPE_CHECKING, Callable

from workout_engine.math.energy import summarise
from workout_engine.models.enums import Category, SessionStatus
from workout_engine.models.exercise import PlanItem
from workout_engine.models.session import Session, SessionSummary
from workout_engine.plan_builder.builder import generate_plan
from workout_engine.timer import TickSource

if TYPE_CHECKING:
    from workout_store.state import AppState

logger = logging.getLogger(__name__)


class SessionEngine:
    """Drives one workout at a time and books completions into the ledger.

    Usage::

        engine = SessionEngine(app_state, ticker=ManualTickSource())
        engine.start(app_state.ledger.next_available_day())
        engine.complete_current_exercise()   # -> RESTING
        engine.skip_rest()                   # -> EXERCISING, next item
    """

    def __init__(
        self,
        state: AppState,
        ticker: TickSource | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.state = state
        self.ticker = ticker
        self.clock = clock
        self._session: Session | None = None
        self._plan: tuple[PlanItem, ...] = ()
        self.last_summary: SessionSummary | None = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session | None:
        """The current (or most recently finished) session."""
        return self._session

    @property
    def plan(self) -> tuple[PlanItem, ...]:
        return self._plan

    @property
    def status(self) -> SessionStatus:
        if self._session is None:
            return SessionStatus.IDLE
        return self._session.status

    @property
    def is_active(self) -> bool:
        return self._session is not None and self._session.active

    @property
    def current_exercise(self) -> PlanItem | None:
        if not self.is_active:
            return None
        return self._plan[self._session.exercise_index]

    @property
    def next_exercise(self) -> PlanItem | None:
        """The exercise after the current one, shown during rest."""
        if not self.is_active:
            return None
        index = self._session.exercise_index + 1
        return self._plan[index] if index < len(self._plan) else None

    @property
    def position(self) -> tuple[int, int]:
        """1-based (current, total), e.g. (2, 5)."""
        if self._session is None:
            return (0, len(self._plan))
        return (self._session.exercise_index + 1, len(self._plan))

    def _is_last(self) -> bool:
        return self._session.exercise_index >= len(self._plan) - 1

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, day: int, focus: Category | None = None) -> Session:
        """Begin a workout for *day*, replacing any session in progress."""
        self._stop_ticks()
        self._plan = generate_plan(day, focus)
        self._session = Session(
            active=True,
            day=day,
            exercise_index=0,
            resting=False,
            rest_remaining=self.state.config.rest_duration_s,
            started_at=self.clock(),
            focus=focus,
        )
        self.last_summary = None
        logger.info(
            "Started day %d (%s), %d exercises",
            day,
            focus.label if focus else "full body",
            len(self._plan),
        )
        return self._session

    def complete_current_exercise(self) -> SessionSummary | None:
        """Finish the current exercise.

        Before the last exercise this starts a rest. On the last one it
        ends the session, records the day and returns the summary.
        """
        if self.status != SessionStatus.EXERCISING:
            logger.debug("complete_current_exercise ignored in %s", self.status.name)
            return None

        if not self._is_last():
            if self.state.config.rest_duration_s <= 0:
                # zero-length rest expires immediately
                self._move(+1)
                return None
            self._session = dataclasses.replace(
                self._session,
                resting=True,
                rest_remaining=self.state.config.rest_duration_s,
            )
            if self.ticker is not None:
                self.ticker.start(self.tick)
            return None

        return self._finish()

    def skip_forward(self) -> bool:
        """Jump to the next exercise without resting. Not from the last one."""
        if self.status != SessionStatus.EXERCISING or self._is_last():
            logger.debug("skip_forward rejected")
            return False
        self._move(+1)
        return True

    def skip_backward(self) -> bool:
        """Go back one exercise. Not from the first one."""
        if self.status != SessionStatus.EXERCISING or self._session.exercise_index == 0:
            logger.debug("skip_backward rejected")
            return False
        self._move(-1)
        return True

    def skip_rest(self) -> bool:
        """End the current rest immediately."""
        if self.status != SessionStatus.RESTING:
            logger.debug("skip_rest rejected in %s", self.status.name)
            return False
        self._session = dataclasses.replace(self._session, rest_remaining=0)
        self._rest_expired()
        return True

    def tick(self) -> bool:
        """Advance the rest countdown by one second.

        Ticks that arrive while not resting, including after an abort or
        completion, are ignored and return False.
        """
        session = self._session
        if session is None or not session.active or not session.resting:
            return False
        if session.rest_remaining <= 0:
            return False
        self._session = dataclasses.replace(
            session, rest_remaining=session.rest_remaining - 1,
        )
        if self._session.rest_remaining == 0:
            self._rest_expired()
        return True

    def abort(self) -> bool:
        """Abandon the session. The day is not recorded."""
        self._stop_ticks()
        if not self.is_active:
            return False
        self._session = dataclasses.replace(self._session, active=False, resting=False)
        logger.info("Aborted day %d at exercise %d", self._session.day, self._session.exercise_index + 1)
        return True

    def adjust_rest_duration(self, seconds: int) -> None:
        """Change the rest length; applies from the next rest interval."""
        self.state.update_config(rest_duration_s=int(seconds))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _move(self, step: int) -> None:
        self._session = dataclasses.replace(
            self._session,
            exercise_index=self._session.exercise_index + step,
            resting=False,
        )

    def _rest_expired(self) -> None:
        """Leave RESTING onto the next exercise. Shared by tick and skip."""
        self._stop_ticks()
        self._move(+1)

    def _finish(self) -> SessionSummary:
        self._stop_ticks()
        finished_at = self.clock()
        summary = summarise(
            self._session, self._plan, self.state.profile.weight_kg, finished_at,
        )
        self._session = dataclasses.replace(self._session, active=False, resting=False)
        self.last_summary = summary
        self.state.record_completion(summary.day)
        logger.info(
            "Completed day %d: %d kcal in %d min",
            summary.day,
            summary.calories_burned,
            summary.duration_minutes,
        )
        return summary

    def _stop_ticks(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()
