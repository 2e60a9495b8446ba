"""Event dispatcher that owns the dashboard state and schedules fetch cycles."""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from config.config import FETCH_MAX_WORKERS
from registrations.client import RegistrationStatsClient
from registrations.fetch_cycle import run_fetch_cycle
from registrations.state import (
    DashboardState,
    Event,
    FetchCycleCompleted,
    FilterSelection,
    needs_fetch,
    reduce,
)
from utils.logging import get_logger

logger = get_logger(__name__)


class DashboardController:
    """Holds the current :class:`DashboardState` and reacts to events.

    ``dispatch`` applies the transition function. When a transition starts a
    new fetch cycle, the cycle is queued right away on a background pool and
    its completion is dispatched back as :class:`FetchCycleCompleted`. Stale
    completions are dropped by ``reduce`` because their sequence number is no
    longer current.
    """

    def __init__(
        self,
        client: RegistrationStatsClient,
        *,
        max_workers: int = FETCH_MAX_WORKERS,
    ) -> None:
        self.client = client
        self._state = DashboardState()
        self._lock = threading.RLock()
        self._pending: Optional[Future] = None
        # Cycles wait on requests, so they get their own pool to avoid starving it
        self._request_pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fetch")
        self._cycle_pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="cycle")

    @property
    def state(self) -> DashboardState:
        with self._lock:
            return self._state

    def dispatch(self, event: Event) -> DashboardState:
        """Apply ``event`` and queue a fetch cycle if the transition asks for one."""
        with self._lock:
            before = self._state
            after = reduce(before, event)
            self._state = after
            if needs_fetch(before, after):
                logger.debug(f"Queueing fetch cycle #{after.sequence} for {after.filters}")
                self._pending = self._cycle_pool.submit(
                    self._run_cycle, after.sequence, after.filters
                )
        return after

    def _run_cycle(self, sequence: int, selection: FilterSelection) -> None:
        try:
            outcome = run_fetch_cycle(self.client, selection, self._request_pool)
            event = FetchCycleCompleted(
                sequence, results=outcome.results, error=outcome.error_summary()
            )
        except Exception as e:
            logger.exception(f"Fetch cycle #{sequence} crashed")
            event = FetchCycleCompleted(sequence, error=str(e))

        with self._lock:
            stale = sequence != self._state.sequence
            self.dispatch(event)

        if stale:
            logger.info(f"Discarded stale fetch cycle #{sequence}")
        elif not event.ok:
            logger.error(f"Fetch cycle #{sequence} failed, keeping previous data: {event.error}")

    def wait(self, timeout: Optional[float] = None) -> DashboardState:
        """Block until the most recently queued fetch cycle has been applied.

        Raises:
            concurrent.futures.TimeoutError: If ``timeout`` seconds pass in total,
                counting cycles queued while waiting
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                pending = self._pending
            if pending is None:
                break
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            pending.result(timeout=remaining)
            with self._lock:
                if self._pending is pending:
                    break
        return self.state

    def close(self) -> None:
        self._cycle_pool.shutdown(wait=False)
        self._request_pool.shutdown(wait=False)
        self.client.close()
