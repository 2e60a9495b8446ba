"""Dashboard view state and its transition function.

All state lives in an immutable :class:`DashboardState`. The only way to
change it is ``reduce(state, event)``, with four event kinds:

- :class:`Initialize`: first display, both filters reset to ``"all"``
- :class:`FilterYearChanged` / :class:`FilterProgrammeChanged`: user picked a value
- :class:`FetchCycleCompleted`: a fetch cycle finished (successfully or not)

Every transition that needs fresh data advances ``sequence``. A completion is
committed only if it carries the current ``sequence``; anything older is a
stale response from a superseded cycle and is dropped.

Filter options are derived from the most recent successful results, which
are themselves filtered by the *other* selection. Picking a year can
therefore shrink the programme list and vice versa.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple, Union

from config.config import ALL_SENTINEL
from config.schemas import ProgrammeCount, SchoolCount, YearCount


@dataclass(frozen=True)
class FilterSelection:
    year: str = ALL_SENTINEL
    programme: str = ALL_SENTINEL


@dataclass(frozen=True)
class FilterOptions:
    years: Tuple[str, ...] = ()
    programmes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FetchResults:
    """Everything one successful fetch cycle returned."""
    total: int
    by_programme: Tuple[ProgrammeCount, ...]
    by_year: Tuple[YearCount, ...]
    top_schools: Tuple[SchoolCount, ...]


@dataclass(frozen=True)
class DashboardState:
    filters: FilterSelection = field(default_factory=FilterSelection)
    options: FilterOptions = field(default_factory=FilterOptions)
    total: int = 0
    by_programme: Tuple[ProgrammeCount, ...] = ()
    by_year: Tuple[YearCount, ...] = ()
    top_schools: Tuple[SchoolCount, ...] = ()
    sequence: int = 0          # id of the latest fetch cycle issued
    loading: bool = False
    last_error: Optional[str] = None


# ---- Events ----
@dataclass(frozen=True)
class Initialize:
    pass


@dataclass(frozen=True)
class FilterYearChanged:
    value: str


@dataclass(frozen=True)
class FilterProgrammeChanged:
    value: str


@dataclass(frozen=True)
class FetchCycleCompleted:
    sequence: int
    results: Optional[FetchResults] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.results is not None


Event = Union[Initialize, FilterYearChanged, FilterProgrammeChanged, FetchCycleCompleted]


def distinct_in_order(values: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def derive_options(
    by_programme: Iterable[ProgrammeCount],
    by_year: Iterable[YearCount],
) -> FilterOptions:
    """Build dropdown options from a fetch cycle's own breakdowns."""
    return FilterOptions(
        years=tuple(distinct_in_order(row["academic_year"] for row in by_year)),
        programmes=tuple(distinct_in_order(row["study_programme"] for row in by_programme)),
    )


def _begin_cycle(state: DashboardState, filters: FilterSelection) -> DashboardState:
    return replace(state, filters=filters, sequence=state.sequence + 1, loading=True)


def reduce(state: DashboardState, event: Event) -> DashboardState:
    """Return the state that follows ``state`` after ``event``."""
    if isinstance(event, Initialize):
        return _begin_cycle(state, FilterSelection())

    if isinstance(event, FilterYearChanged):
        if event.value == state.filters.year:
            return state
        return _begin_cycle(state, replace(state.filters, year=event.value))

    if isinstance(event, FilterProgrammeChanged):
        if event.value == state.filters.programme:
            return state
        return _begin_cycle(state, replace(state.filters, programme=event.value))

    if isinstance(event, FetchCycleCompleted):
        if event.sequence != state.sequence:
            return state
        if event.results is None:
            # keep the last good data and options
            return replace(state, loading=False, last_error=event.error or "fetch failed")
        res = event.results
        return replace(
            state,
            total=res.total,
            by_programme=res.by_programme,
            by_year=res.by_year,
            top_schools=res.top_schools,
            options=derive_options(res.by_programme, res.by_year),
            loading=False,
            last_error=None,
        )

    raise TypeError(f"Unknown dashboard event: {event!r}")


def needs_fetch(before: DashboardState, after: DashboardState) -> bool:
    """True when the transition from ``before`` to ``after`` issued a new fetch cycle."""
    return after.sequence != before.sequence
