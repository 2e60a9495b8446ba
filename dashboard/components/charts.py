"""
Chart components for the registration breakdowns.

Each ``render_*_chart`` returns a matplotlib figure; the page embeds it with
``st.pyplot`` and closes it afterwards.
"""

from typing import List, Sequence, Tuple

import matplotlib.pyplot as plt

from config.config import (
    BAR_COLOR,
    BAR_LABEL_ROTATION,
    CHART_FIGSIZE,
    LINE_COLOR,
    LINE_WIDTH,
)
from config.schemas import ProgrammeCount, YearCount


def _series(rows: Sequence[dict], label_key: str) -> Tuple[List[str], List[int]]:
    labels = [str(row[label_key]) for row in rows]
    counts = [row["count"] for row in rows]
    return labels, counts


def _empty_axes(ax: plt.Axes) -> None:
    ax.text(0.5, 0.5, "No data available",
            ha="center", va="center", color="#888", transform=ax.transAxes)
    ax.set_xticks([])


def render_programme_chart(rows: Sequence[ProgrammeCount]) -> plt.Figure:
    """
    Bar chart of registrations per study programme.

    Args:
        rows: Programme breakdown in API order

    Returns:
        Matplotlib figure with one labelled bar per row
    """
    fig, ax = plt.subplots(figsize=CHART_FIGSIZE)
    ax.set_axisbelow(True)
    ax.grid(True, axis="both", color="#eee", linestyle=(0, (5, 5)))

    labels, counts = _series(rows, "study_programme")
    if not labels:
        _empty_axes(ax)
    else:
        positions = list(range(len(labels)))
        bars = ax.bar(positions, counts, color=BAR_COLOR)
        ax.bar_label(bars, padding=3, fontsize=9)
        ax.margins(y=0.15)
        ax.set_xticks(positions)
        ax.set_xticklabels(labels, rotation=BAR_LABEL_ROTATION, ha="right", fontsize=9)

    ax.set_ylabel("Registrations")
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    fig.tight_layout()
    return fig


def render_year_chart(rows: Sequence[YearCount]) -> plt.Figure:
    """
    Line chart of registrations per academic year.

    Args:
        rows: Year breakdown in API order

    Returns:
        Matplotlib figure with a single line, each point labelled with its count
    """
    fig, ax = plt.subplots(figsize=CHART_FIGSIZE)
    ax.set_axisbelow(True)
    ax.grid(True, color="#ccc")

    labels, counts = _series(rows, "academic_year")
    if not labels:
        _empty_axes(ax)
    else:
        positions = list(range(len(labels)))
        ax.plot(positions, counts, color=LINE_COLOR, linewidth=LINE_WIDTH, marker="o")
        for x, count in zip(positions, counts):
            ax.annotate(str(count), (x, count), textcoords="offset points",
                        xytext=(0, 8), ha="center", fontsize=9)
        ax.margins(y=0.15)
        ax.set_xticks(positions)
        ax.set_xticklabels(labels, fontsize=10)

    ax.set_ylabel("Registrations")
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    fig.tight_layout()
    return fig
