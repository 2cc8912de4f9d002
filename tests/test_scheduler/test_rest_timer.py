"""Tests for APSchedulerTickSource using a mock scheduler (no real threads)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from apscheduler.jobstores.base import JobLookupError

from scheduler.rest_timer import APSchedulerTickSource


@pytest.fixture
def mock_scheduler():
    mock = MagicMock()
    mock.running = False

    def _start():
        mock.running = True

    mock.start.side_effect = _start
    return mock


@pytest.fixture
def source(mock_scheduler) -> APSchedulerTickSource:
    return APSchedulerTickSource(interval_s=1.0, scheduler=mock_scheduler)


class TestStart:
    def test_starts_scheduler_and_adds_interval_job(self, source, mock_scheduler) -> None:
        source.start(lambda: None)
        mock_scheduler.start.assert_called_once()
        args, kwargs = mock_scheduler.add_job.call_args
        assert args[1] == "interval"
        assert kwargs["seconds"] == 1.0
        assert kwargs["id"] == "rest_tick"
        assert kwargs["replace_existing"] is True
        assert kwargs["max_instances"] == 1
        assert source.running

    def test_restart_does_not_restart_scheduler(self, source, mock_scheduler) -> None:
        source.start(lambda: None)
        source.start(lambda: None)
        mock_scheduler.start.assert_called_once()
        assert mock_scheduler.add_job.call_count == 2


class TestStop:
    def test_stop_removes_job(self, source, mock_scheduler) -> None:
        source.start(lambda: None)
        source.stop()
        mock_scheduler.remove_job.assert_called_once_with("rest_tick")
        assert not source.running

    def test_stop_when_not_running_is_safe(self, source, mock_scheduler) -> None:
        mock_scheduler.remove_job.side_effect = JobLookupError("rest_tick")
        source.stop()
        source.stop()
        assert not source.running

    def test_shutdown(self, source, mock_scheduler) -> None:
        source.start(lambda: None)
        source.shutdown()
        mock_scheduler.shutdown.assert_called_once_with(wait=False)


class TestFire:
    def test_job_function_invokes_callback(self, source, mock_scheduler) -> None:
        callback = MagicMock()
        source.start(callback)
        job_func = mock_scheduler.add_job.call_args[0][0]
        job_func()
        callback.assert_called_once_with()

    def test_job_after_stop_is_ignored(self, source, mock_scheduler) -> None:
        callback = MagicMock()
        source.start(callback)
        job_func = mock_scheduler.add_job.call_args[0][0]
        source.stop()
        job_func()
        callback.assert_not_called()

    def test_drives_engine_countdown(self, app_state, clock, mock_scheduler) -> None:
        from workout_engine.engine import SessionEngine

        source = APSchedulerTickSource(scheduler=mock_scheduler)
        engine = SessionEngine(app_state, ticker=source, clock=clock)
        engine.start(1)
        engine.complete_current_exercise()
        job_func = mock_scheduler.add_job.call_args[0][0]
        for _ in range(30):
            job_func()
        assert engine.session.exercise_index == 1
        assert not engine.session.resting
        assert not source.running
