"""
Ranked table of the secondary schools with the most registrations.

Rendered as inline-styled HTML so that row striping and the full-width
"No data available" row survive Streamlit's markdown renderer.
"""

import html
from typing import Dict, List, Sequence

import streamlit as st

from config.config import TOP_SCHOOLS_LIMIT
from config.schemas import SchoolCount

NO_DATA_TEXT = "No data available"
EVEN_ROW_BG = "#fafafa"
ODD_ROW_BG = "white"

_CELL = "padding: 12px 18px;"


def school_rows(schools: Sequence[SchoolCount]) -> List[Dict[str, object]]:
    """Row models for the table, striped by index parity."""
    return [
        {
            "school": school["secondary_school"],
            "count": school["count"],
            "background": EVEN_ROW_BG if idx % 2 == 0 else ODD_ROW_BG,
        }
        for idx, school in enumerate(schools[:TOP_SCHOOLS_LIMIT])
    ]


def schools_table_html(schools: Sequence[SchoolCount]) -> str:
    rows = school_rows(schools)
    if rows:
        body = "".join(
            f'<tr style="background-color: {row["background"]}; border-bottom: 1px solid #ddd;">'
            f'<td style="{_CELL}">{html.escape(str(row["school"]))}</td>'
            f'<td style="{_CELL} font-weight: 600;">{row["count"]}</td>'
            "</tr>"
            for row in rows
        )
    else:
        body = (
            '<tr><td colspan="2" style="text-align: center; padding: 20px;">'
            f"{NO_DATA_TEXT}</td></tr>"
        )

    return (
        '<table style="width: 100%; border-collapse: collapse; '
        'box-shadow: 0 2px 10px rgba(0,0,0,0.05);">'
        "<thead>"
        '<tr style="background-color: #3f51b5; color: white; text-align: left; font-weight: 600;">'
        f'<th style="{_CELL}">Secondary School</th>'
        f'<th style="{_CELL} width: 150px;">Registrations</th>'
        "</tr>"
        "</thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


def render_table(schools: Sequence[SchoolCount]) -> None:
    st.markdown(schools_table_html(schools), unsafe_allow_html=True)
