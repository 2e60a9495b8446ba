"""Tests for the programme and academic-year charts."""

from dashboard.components.charts import render_programme_chart, render_year_chart


def _tick_labels(ax):
    return [t.get_text() for t in ax.get_xticklabels()]


def test_programme_chart_plots_one_bar_per_programme(programme_rows):
    fig = render_programme_chart(programme_rows)
    ax = fig.axes[0]

    assert len(ax.patches) == 2
    assert [bar.get_height() for bar in ax.patches] == [10, 5]
    assert _tick_labels(ax) == ["CS", "EE"]


def test_programme_chart_uses_bar_colour(programme_rows):
    fig = render_programme_chart(programme_rows)
    face = fig.axes[0].patches[0].get_facecolor()

    assert tuple(round(c, 3) for c in face[:3]) == (
        round(0x3f / 255, 3), round(0x51 / 255, 3), round(0xb5 / 255, 3)
    )


def test_programme_chart_empty():
    fig = render_programme_chart([])
    ax = fig.axes[0]

    assert len(ax.patches) == 0
    assert any(t.get_text() == "No data available" for t in ax.texts)


def test_year_chart_plots_counts_in_order(year_rows):
    fig = render_year_chart(year_rows)
    ax = fig.axes[0]

    assert len(ax.lines) == 1
    assert list(ax.lines[0].get_ydata()) == [7, 8]
    assert ax.lines[0].get_linewidth() == 3.0
    assert _tick_labels(ax) == ["2022/23", "2023/24"]


def test_year_chart_empty():
    fig = render_year_chart([])
    ax = fig.axes[0]

    assert len(ax.lines) == 0
    assert any(t.get_text() == "No data available" for t in ax.texts)


def test_programme_chart_labels_each_bar_with_its_count(programme_rows):
    ax = render_programme_chart(programme_rows).axes[0]

    assert [t.get_text() for t in ax.texts] == ["10", "5"]


def test_year_chart_labels_each_point_with_its_count(year_rows):
    ax = render_year_chart(year_rows).axes[0]

    assert [t.get_text() for t in ax.texts] == ["7", "8"]
    assert [t.xy for t in ax.texts] == [(0, 7), (1, 8)]
