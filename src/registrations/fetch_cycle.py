"""One fetch cycle: the four requests that refresh the dashboard.

The requests are independent, so they are submitted to a thread pool and
awaited together. Each yields a :class:`RequestOutcome`; the cycle succeeds
only if all four did.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from config.config import FETCH_MAX_WORKERS
from registrations.client import RegistrationStatsClient
from registrations.state import FetchResults, FilterSelection
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RequestOutcome:
    name: str
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CycleOutcome:
    outcomes: Dict[str, RequestOutcome] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes.values())

    @property
    def errors(self) -> List[RequestOutcome]:
        return [o for o in self.outcomes.values() if not o.ok]

    @property
    def results(self) -> Optional[FetchResults]:
        """Combined results, or None if any request failed."""
        if not self.ok:
            return None
        return FetchResults(
            total=self.outcomes["total"].value,
            by_programme=tuple(self.outcomes["by_programme"].value),
            by_year=tuple(self.outcomes["by_year"].value),
            top_schools=tuple(self.outcomes["top_schools"].value),
        )

    def error_summary(self) -> Optional[str]:
        if self.ok:
            return None
        return "; ".join(f"{o.name}: {o.error}" for o in self.errors)


def plan_requests(
    client: RegistrationStatsClient,
    selection: FilterSelection,
) -> Dict[str, Callable[[], Any]]:
    """Map request name to a zero-argument call for the given selection.

    Only the breakdowns see the filters; total and top schools are always
    requested unfiltered.
    """
    return {
        "total": client.total_registrations,
        "by_programme": lambda: client.registrations_by_programme(year=selection.year),
        "by_year": lambda: client.registrations_by_year(programme=selection.programme),
        "top_schools": client.top_schools,
    }


def run_fetch_cycle(
    client: RegistrationStatsClient,
    selection: FilterSelection,
    executor: Optional[Executor] = None,
) -> CycleOutcome:
    """Issue the four requests for ``selection`` and wait for all of them.

    Args:
        client: Service client
        selection: Current filter selection
        executor: Pool to run requests on; a private one is created if None

    Returns:
        Aggregated outcome. Request failures are logged, never raised.
    """
    own_executor = executor is None
    pool = executor or ThreadPoolExecutor(
        max_workers=FETCH_MAX_WORKERS, thread_name_prefix="fetch"
    )
    try:
        futures: Dict[str, Future] = {
            name: pool.submit(call) for name, call in plan_requests(client, selection).items()
        }
        outcome = CycleOutcome()
        for name, fut in futures.items():
            try:
                outcome.outcomes[name] = RequestOutcome(name=name, value=fut.result())
            except Exception as e:
                logger.error(f"Error fetching {name}: {e}")
                outcome.outcomes[name] = RequestOutcome(name=name, error=e)
    finally:
        if own_executor:
            pool.shutdown(wait=False)

    if outcome.ok:
        logger.info(
            f"Fetch cycle complete (year={selection.year}, programme={selection.programme})"
        )
    return outcome
