"""Academic-year and programme filter dropdowns."""

from typing import Callable, List, Sequence

import streamlit as st

from config.config import ALL_PROGRAMMES_LABEL, ALL_SENTINEL, ALL_YEARS_LABEL
from registrations.state import FilterOptions, FilterSelection


def filter_choices(options: Sequence[str], selected: str) -> List[str]:
    """Dropdown values: the ``"all"`` sentinel first, then the derived options.

    A selected value that has dropped out of the options is kept so the
    dropdown still shows what is actually applied.
    """
    choices = [ALL_SENTINEL, *options]
    if selected not in choices:
        choices.append(selected)
    return choices


def _labeller(all_label: str) -> Callable[[str], str]:
    return lambda value: all_label if value == ALL_SENTINEL else value


def render_filters(filters: FilterSelection, options: FilterOptions) -> FilterSelection:
    """
    Render both dropdowns side by side.

    Args:
        filters: Currently applied selection
        options: Derived option lists

    Returns:
        The selection as currently shown by the widgets
    """
    col_year, col_programme = st.columns(2)

    with col_year:
        years = filter_choices(options.years, filters.year)
        year = st.selectbox(
            "Filter by Academic Year:",
            options=years,
            index=years.index(filters.year),
            format_func=_labeller(ALL_YEARS_LABEL),
        )

    with col_programme:
        programmes = filter_choices(options.programmes, filters.programme)
        programme = st.selectbox(
            "Filter by Programme:",
            options=programmes,
            index=programmes.index(filters.programme),
            format_func=_labeller(ALL_PROGRAMMES_LABEL),
        )

    return FilterSelection(year=year, programme=programme)
