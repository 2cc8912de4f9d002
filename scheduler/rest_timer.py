"""APScheduler-backed tick source for rest countdowns.

Runs a one-second ``interval`` job on a BackgroundScheduler while a rest
is in progress. The job fires on the scheduler's worker thread, so each
callback runs under a lock shared with the host: the host holds the same
lock around user-triggered transitions, which keeps transitions strictly
one at a time.
"""

from __future__ import annotations

import logging
import threading

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

from workout_engine.timer import TickCallback

logger = logging.getLogger(__name__)

_JOB_ID = "rest_tick"


class APSchedulerTickSource:
    """TickSource delivering callbacks from an APScheduler interval job."""

    def __init__(
        self,
        interval_s: float = 1.0,
        lock: threading.RLock | None = None,
        scheduler: BackgroundScheduler | None = None,
    ) -> None:
        self.interval_s = interval_s
        self.lock = lock or threading.RLock()
        self._scheduler = scheduler or BackgroundScheduler()
        self._callback: TickCallback | None = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        """Begin ticking. Restarting replaces the previous job."""
        if not self._scheduler.running:
            self._scheduler.start()
        self._callback = callback
        self._scheduler.add_job(
            self._fire,
            "interval",
            seconds=self.interval_s,
            id=_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        logger.debug("Rest ticks started every %.1fs", self.interval_s)

    def stop(self) -> None:
        """Stop ticking. Safe to call when not running."""
        self._callback = None
        try:
            self._scheduler.remove_job(_JOB_ID)
        except JobLookupError:
            return
        logger.debug("Rest ticks stopped")

    def shutdown(self) -> None:
        """Stop ticking and shut the scheduler thread down."""
        self.stop()
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)

    def _fire(self) -> None:
        with self.lock:
            callback = self._callback
            if callback is None:
                return
            callback()
