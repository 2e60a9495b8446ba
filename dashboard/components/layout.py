"""
Shared layout helpers for dashboard components.

Provides the page CSS, section headers and the total-registrations card.
"""

import html
from typing import Optional

import streamlit as st


TOTAL_CARD_STYLE = (
    "background-color: #4caf50; color: white; font-size: 30px; font-weight: 700; "
    "padding: 25px; border-radius: 12px; max-width: 320px; margin: 0 auto 50px auto; "
    "text-align: center; box-shadow: 0 5px 15px rgba(76,175,80,0.4);"
)


def total_card_html(total: int) -> str:
    """
    Build the total-registrations card.

    Args:
        total: Value of the API's ``total`` field, shown as-is

    Returns:
        HTML snippet for ``st.markdown``
    """
    return f'<div class="total-card" style="{TOTAL_CARD_STYLE}">Total Registrations: {total}</div>'


def render_total_card(total: int) -> None:
    st.markdown(total_card_html(total), unsafe_allow_html=True)


def render_header(title: str) -> None:
    st.markdown(
        f'<h1 class="dashboard-title">{html.escape(title)}</h1>',
        unsafe_allow_html=True,
    )


def render_section_title(title: str) -> None:
    st.markdown(
        f'<h2 class="section-title">{html.escape(title)}</h2>',
        unsafe_allow_html=True,
    )


FETCH_WARNING_TEXT = "⚠️ Could not refresh data, showing last loaded values."


def render_fetch_warning(error: Optional[str]) -> None:
    """Non-fatal banner for a failed fetch cycle; previous data stays on screen.

    The error details only go to the logs.
    """
    if error:
        st.warning(FETCH_WARNING_TEXT)


def apply_custom_css() -> None:
    """Apply custom CSS styling for the single-column layout."""
    st.markdown("""
    <style>
    .block-container {
        max-width: 900px;
        font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    }

    .dashboard-title {
        text-align: center;
        font-size: 28px;
        font-weight: 700;
        color: #333;
        margin-bottom: 20px;
    }

    .section-title {
        text-align: center;
        color: #333;
        margin-bottom: 20px;
    }

    div[data-testid="stSelectbox"] label {
        font-weight: 600;
        color: #444;
    }
    </style>
    """, unsafe_allow_html=True)
