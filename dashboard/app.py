"""
Student Registration Dashboard - Streamlit Application

Aggregate registration statistics with academic-year and programme filters.
Run with ``streamlit run dashboard/app.py``.
"""

from concurrent.futures import TimeoutError as FutureTimeoutError

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit
import matplotlib.pyplot as plt
import streamlit as st

from config.config import REQUEST_TIMEOUT_S
from config.models import ApiSettings, ViewSettings
from dashboard.components import charts, schools
from dashboard.components.filters import render_filters
from dashboard.components.layout import (
    apply_custom_css,
    render_fetch_warning,
    render_header,
    render_section_title,
    render_total_card,
)
from registrations.client import RegistrationStatsClient
from registrations.controller import DashboardController
from registrations.state import (
    DashboardState,
    FilterProgrammeChanged,
    FilterYearChanged,
    Initialize,
)
from utils.logging import dashboard_logger as logger

CONTROLLER_KEY = "_registration_controller"


def get_controller() -> DashboardController:
    """Return the session's controller, creating and initializing it on first display."""
    if CONTROLLER_KEY not in st.session_state:
        settings = ApiSettings.from_config()
        client = RegistrationStatsClient(settings.base_url, timeout=settings.timeout_s)
        controller = DashboardController(client, max_workers=settings.max_workers)
        controller.dispatch(Initialize())
        st.session_state[CONTROLLER_KEY] = controller
        logger.info(f"Dashboard session started against {settings.base_url}")
    return st.session_state[CONTROLLER_KEY]


def settled_state(controller: DashboardController) -> DashboardState:
    """Wait for the pending fetch cycle, falling back to what is already loaded."""
    try:
        with st.spinner("Loading registration statistics..."):
            return controller.wait(timeout=REQUEST_TIMEOUT_S * 2)
    except FutureTimeoutError:
        logger.warning("Fetch cycle still running, rendering previous data")
        return controller.state


def render_chart(fig: plt.Figure) -> None:
    st.pyplot(fig)
    plt.close(fig)


def render_dashboard(state: DashboardState, view: ViewSettings) -> None:
    """Render everything below the filters from ``state``."""
    if view.show_fetch_errors:
        render_fetch_warning(state.last_error)

    render_total_card(state.total)

    with st.container(border=True):
        render_section_title("Registrations by Programme")
        render_chart(charts.render_programme_chart(state.by_programme))

    with st.container(border=True):
        render_section_title("Registrations by Academic Year")
        render_chart(charts.render_year_chart(state.by_year))

    with st.container(border=True):
        render_section_title("Top 10 Secondary Schools")
        schools.render_table(state.top_schools)


def main():
    """Main dashboard application."""
    st.set_page_config(
        page_title="Student Registration Dashboard",
        page_icon="🎓",
        layout="centered",
    )
    apply_custom_css()

    controller = get_controller()
    state = settled_state(controller)

    render_header("Student Registration Dashboard")

    shown = render_filters(state.filters, state.options)
    if shown != state.filters:
        if shown.year != state.filters.year:
            controller.dispatch(FilterYearChanged(shown.year))
        if shown.programme != state.filters.programme:
            controller.dispatch(FilterProgrammeChanged(shown.programme))
        st.rerun()

    render_dashboard(state, ViewSettings.from_config())


if __name__ == "__main__":
    main()
