"""
🧾 GRID FORMATTER
=================
Turns the solver's grid into rows of DisplayCell: a header row of day names,
then one row per period with "Subject (Teacher)" in each filled box.
The screen table, the Excel writer and the PDF writer all read this shape.
"""

import re
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from subject_colors import color_for
from models import DisplayCell, Slot, Subject

CORNER_LABEL = "Period/Day"

# The lunch marker row is fixed at period 4 and does not follow lunch_after_period.
# Pass lunch_marker_period explicitly to line it up with a different config.
LUNCH_MARKER_PERIOD = 4


def _period_label(period_num: int, is_lunch: bool) -> str:
    return f"Period {period_num} (Lunch after)" if is_lunch else f"Period {period_num}"


def _slot_color(slot: Slot, subject_map: Dict[str, Subject]) -> Optional[str]:
    subject = subject_map.get(slot.subject_id)
    if subject is None:
        return None
    return subject.color or color_for(subject.name)


def to_display_grid(
    grid: Sequence[Sequence[Optional[Slot]]],
    days: Sequence[str],
    subjects: Sequence[Subject] = (),
    lunch_marker_period: int = LUNCH_MARKER_PERIOD,
) -> List[List[DisplayCell]]:
    """
    grid[period_idx][day_idx] -> rows of cells.
    Row 0 is the header; column 0 is the period label. Every timetable box is editable.
    """
    subject_map = {s.id: s for s in subjects}

    rows = [
        [DisplayCell(CORNER_LABEL, editable=False, highlighted=True)]
        + [DisplayCell(day, editable=False, highlighted=True) for day in days]
    ]

    for p, row in enumerate(grid):
        period_num = p + 1
        is_lunch = period_num == lunch_marker_period
        cells = [DisplayCell(_period_label(period_num, is_lunch), editable=False, highlighted=is_lunch)]
        for slot in row:
            if slot is None:
                cells.append(DisplayCell("", editable=True, highlighted=is_lunch))
            else:
                cells.append(
                    DisplayCell(
                        f"{slot.subject} ({slot.teacher})",
                        editable=True,
                        highlighted=is_lunch,
                        color=_slot_color(slot, subject_map),
                    )
                )
        rows.append(cells)

    return rows


def display_values(display_grid: Sequence[Sequence[DisplayCell]]) -> List[List[str]]:
    """Just the text of every cell, row by row."""
    return [[cell.value or "" for cell in row] for row in display_grid]


_CELL_RE = re.compile(r"(.+)\s*\((.+)\)")


def parse_cell_value(value: str) -> Optional[Tuple[str, str]]:
    """'Math (Smith)' -> ('Math', 'Smith'). None for text without a teacher in brackets."""
    m = _CELL_RE.search(value or "")
    if not m:
        return None
    return m.group(1).strip(), m.group(2).strip()


def apply_edits(
    display_grid: Sequence[Sequence[DisplayCell]],
    values: Sequence[Sequence[str]],
) -> List[List[DisplayCell]]:
    """
    Manual overrides from an editable table: values[r][c] replaces the text of
    editable cells that changed. A changed box takes the color of the subject typed in.
    Non-editable cells (header, period labels) never change.
    """
    result = []
    for r, row in enumerate(display_grid):
        new_row = []
        for c, cell in enumerate(row):
            new_value = values[r][c] if r < len(values) and c < len(values[r]) else cell.value
            new_value = "" if new_value is None else str(new_value)
            if not cell.editable or new_value == cell.value:
                new_row.append(replace(cell))
                continue
            parsed = parse_cell_value(new_value)
            color = color_for(parsed[0]) if parsed else None
            new_row.append(replace(cell, value=new_value, color=color))
        result.append(new_row)
    return result
