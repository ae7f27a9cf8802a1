"""
🔥 HEATMAP RENDERING
====================
pandas Styler views of the timetable: the grid itself with subject colors,
teacher load per day, and how full each day is.
"""

import pandas as pd
from typing import List, Sequence

from models import DisplayCell
from stats import TimetableStats

HIGHLIGHT_BG = "#ebf5ff"


def _color_scale(val: float, low_rgb: str = "#22c55e", mid_rgb: str = "#eab308", high_rgb: str = "#ef4444") -> str:
    """Value 0-1 -> green (light) to red (overloaded)."""
    if val <= 0:
        return f"background-color: {low_rgb}; color: white;"
    if val >= 1:
        return f"background-color: {high_rgb}; color: white;"
    if val < 0.5:
        return f"background-color: {mid_rgb}; color: black;"
    return f"background-color: {high_rgb}; color: white;"


def display_grid_to_frame(display_grid: Sequence[Sequence[DisplayCell]]) -> pd.DataFrame:
    """Rows=period labels, Cols=days. Header row and label column become the axes."""
    header = [c.value for c in display_grid[0][1:]]
    index = [row[0].value for row in display_grid[1:]]
    data = [[c.value for c in row[1:]] for row in display_grid[1:]]
    df = pd.DataFrame(data, index=index, columns=header)
    df.index.name = display_grid[0][0].value
    return df


def _cell_css(cell: DisplayCell) -> str:
    if cell.color:
        return f"background-color: {cell.color}; color: black;"
    if cell.highlighted:
        return f"background-color: {HIGHLIGHT_BG};"
    return ""


def style_display_grid(display_grid: Sequence[Sequence[DisplayCell]]):
    """Timetable as a Styler, each box painted with its subject color."""
    df = display_grid_to_frame(display_grid)
    css = pd.DataFrame(
        [[_cell_css(c) for c in row[1:]] for row in display_grid[1:]],
        index=df.index,
        columns=df.columns,
    )
    return df.style.apply(lambda _: css, axis=None).set_caption("Weekly Timetable")


def render_teacher_load_heatmap(stats: TimetableStats, days: List[str]):
    """Rows=teachers, Cols=days. Color by load vs the busiest teacher-day."""
    teachers = sorted(stats.teachers.keys())
    data = [[stats.teachers[t].daily_hours.get(d, 0) for d in days] for t in teachers]
    df = pd.DataFrame(data, index=teachers, columns=days)
    max_vals = df.max().max() if not df.empty else 0
    max_vals = max_vals or 1

    def _style(val):
        if pd.isna(val):
            return ""
        return _color_scale(val / max_vals)

    return df.style.map(_style).set_caption("Teacher Load (hotter = more periods)")


def render_day_utilization_heatmap(stats: TimetableStats):
    """One row: percent of each day's boxes that are filled."""
    row = [round(d.utilization, 1) for d in stats.days]
    df = pd.DataFrame([row], index=["Utilization %"], columns=[d.name for d in stats.days])
    return df.style.map(lambda v: _color_scale(v / 100)).format("{:.1f}").set_caption("Daily Utilization")
