"""Tests for SessionEngine — the workout state machine."""

from __future__ import annotations

from workout_engine.engine import SessionEngine
from workout_engine.models.enums import Category, SessionStatus
from workout_engine.timer import ManualTickSource


def _rest_then_expire(engine: SessionEngine, ticker: ManualTickSource) -> None:
    engine.complete_current_exercise()
    ticker.fire(engine.session.rest_remaining)


class TestStart:
    def test_initial_snapshot(self, engine, clock) -> None:
        session = engine.start(4)
        assert session.active is True
        assert session.day == 4
        assert session.exercise_index == 0
        assert session.resting is False
        assert session.rest_remaining == 30
        assert session.started_at == clock.now
        assert session.focus is None
        assert engine.status == SessionStatus.EXERCISING

    def test_plan_generated_for_day(self, engine) -> None:
        engine.start(1)
        assert len(engine.plan) == 5
        assert engine.current_exercise == engine.plan[0]

    def test_focus_restricts_plan(self, engine) -> None:
        engine.start(1, Category.ABS)
        assert engine.session.focus == Category.ABS
        assert {item.category for item in engine.plan} == {Category.ABS}

    def test_start_overwrites_prior_session(self, engine, ticker) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        assert ticker.running
        engine.start(9)
        assert engine.session.day == 9
        assert engine.session.exercise_index == 0
        assert not engine.session.resting
        assert not ticker.running

    def test_idle_before_start(self, engine) -> None:
        assert engine.status == SessionStatus.IDLE
        assert engine.current_exercise is None
        assert engine.next_exercise is None


class TestCompleteCurrentExercise:
    def test_enters_rest_with_configured_duration(self, engine, ticker) -> None:
        engine.start(1)
        assert engine.complete_current_exercise() is None
        assert engine.status == SessionStatus.RESTING
        assert engine.session.rest_remaining == 30
        assert engine.session.exercise_index == 0  # no advance on entering rest
        assert ticker.running

    def test_rejected_while_resting(self, engine) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        before = engine.session
        assert engine.complete_current_exercise() is None
        assert engine.session == before

    def test_rejected_when_idle(self, engine, app_state) -> None:
        assert engine.complete_current_exercise() is None
        assert len(app_state.ledger) == 0

    def test_last_exercise_completes_session(self, engine, ticker, clock, app_state) -> None:
        engine.start(2)
        for _ in range(len(engine.plan) - 1):
            _rest_then_expire(engine, ticker)
        clock.advance(125)
        summary = engine.complete_current_exercise()
        assert summary is not None
        assert summary.day == 2
        assert summary.duration_minutes == 2
        assert engine.status == SessionStatus.IDLE
        assert not engine.is_active
        assert 2 in app_state.ledger
        assert engine.last_summary == summary
        assert not ticker.running

    def test_completion_is_idempotent_in_ledger(self, engine, app_state) -> None:
        app_state.ledger.record(1)
        engine.start(1)
        for _ in range(len(engine.plan) - 1):
            engine.skip_forward()
        engine.complete_current_exercise()
        assert app_state.ledger.to_list() == [1]

    def test_rest_uses_current_config(self, engine) -> None:
        engine.start(1)
        engine.adjust_rest_duration(45)
        engine.complete_current_exercise()
        assert engine.session.rest_remaining == 45


class TestSkips:
    def test_skip_forward(self, engine) -> None:
        engine.start(1)
        assert engine.skip_forward() is True
        assert engine.session.exercise_index == 1
        assert engine.session.resting is False

    def test_skip_forward_noop_on_last(self, engine) -> None:
        engine.start(1)
        for _ in range(4):
            engine.skip_forward()
        assert engine.skip_forward() is False
        assert engine.session.exercise_index == 4

    def test_skip_backward(self, engine) -> None:
        engine.start(1)
        engine.skip_forward()
        engine.skip_forward()
        assert engine.skip_backward() is True
        assert engine.session.exercise_index == 1

    def test_skip_backward_noop_at_zero(self, engine) -> None:
        engine.start(1)
        assert engine.skip_backward() is False
        assert engine.session.exercise_index == 0

    def test_skips_rejected_while_resting(self, engine) -> None:
        engine.start(1)
        engine.skip_forward()
        engine.complete_current_exercise()
        assert engine.skip_forward() is False
        assert engine.skip_backward() is False
        assert engine.session.exercise_index == 1
        assert engine.status == SessionStatus.RESTING

    def test_skips_rejected_when_idle(self, engine) -> None:
        assert engine.skip_forward() is False
        assert engine.skip_backward() is False
        assert engine.skip_rest() is False


class TestRestCountdown:
    def test_tick_decrements(self, engine, ticker) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        ticker.fire(10)
        assert engine.session.rest_remaining == 20
        assert engine.status == SessionStatus.RESTING

    def test_final_tick_advances(self, engine) -> None:
        engine.start(1)
        engine.adjust_rest_duration(1)
        engine.complete_current_exercise()
        assert engine.session.rest_remaining == 1
        assert engine.tick() is True
        assert engine.session.rest_remaining == 0
        assert engine.session.resting is False
        assert engine.session.exercise_index == 1

    def test_countdown_stops_ticker_on_expiry(self, engine, ticker) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        delivered = ticker.fire(100)
        assert delivered == 30
        assert not ticker.running
        assert engine.session.exercise_index == 1

    def test_skip_rest_converges_on_same_transition(self, engine, ticker) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        ticker.fire(5)
        assert engine.skip_rest() is True
        assert engine.session.rest_remaining == 0
        assert engine.session.resting is False
        assert engine.session.exercise_index == 1
        assert not ticker.running

    def test_zero_rest_advances_immediately(self, engine, ticker) -> None:
        engine.start(1)
        engine.adjust_rest_duration(0)
        assert engine.complete_current_exercise() is None
        assert engine.status == SessionStatus.EXERCISING
        assert engine.session.exercise_index == 1
        assert not ticker.running
        assert ticker.fire(100) == 0

    def test_zero_rest_full_session(self, engine, app_state) -> None:
        engine.start(1)
        engine.adjust_rest_duration(0)
        summary = None
        for _ in range(len(engine.plan)):
            summary = engine.complete_current_exercise()
        assert summary is not None
        assert 1 in app_state.ledger

    def test_skip_rest_rejected_while_exercising(self, engine) -> None:
        engine.start(1)
        assert engine.skip_rest() is False

    def test_tick_ignored_while_exercising(self, engine) -> None:
        engine.start(1)
        assert engine.tick() is False
        assert engine.session.rest_remaining == 30

    def test_next_exercise_preview_during_rest(self, engine) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        assert engine.next_exercise == engine.plan[1]

    def test_index_never_exceeds_plan(self, engine, ticker) -> None:
        engine.start(1)
        for _ in range(20):
            engine.complete_current_exercise()
            ticker.fire(30)
            if engine.is_active:
                assert 0 <= engine.session.exercise_index < len(engine.plan)
        assert not engine.is_active


class TestAbort:
    def test_abort_mid_rest(self, engine, ticker, app_state) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        assert engine.abort() is True
        assert engine.status == SessionStatus.IDLE
        assert not ticker.running
        assert len(app_state.ledger) == 0

    def test_late_tick_after_abort_ignored(self, engine, app_state) -> None:
        engine.start(1)
        engine.complete_current_exercise()
        engine.abort()
        index = engine.session.exercise_index
        assert engine.tick() is False
        assert engine.session.exercise_index == index
        assert not engine.is_active

    def test_late_tick_after_completion_ignored(self, engine, ticker, app_state) -> None:
        engine.start(1)
        while engine.is_active:
            engine.complete_current_exercise()
            engine.skip_rest()
        index = engine.session.exercise_index
        assert engine.tick() is False
        assert engine.session.exercise_index == index
        assert engine.session.active is False
        assert app_state.ledger.to_list() == [1]
        assert not ticker.running

    def test_abort_when_idle(self, engine) -> None:
        assert engine.abort() is False

    def test_no_summary_after_abort(self, engine) -> None:
        engine.start(1)
        engine.abort()
        assert engine.last_summary is None


class TestPosition:
    def test_position_is_one_based(self, engine) -> None:
        engine.start(1, Category.LEGS)
        assert engine.position == (1, 5)
        engine.skip_forward()
        assert engine.position == (2, 5)
