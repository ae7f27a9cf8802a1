"""
📗 EXCEL EXPORT
===============
Writes the display grid (or the subject list) to an .xlsx file in memory.
pandas lays out the values, openpyxl paints the subject colors and sizes the columns.
"""

import logging
import re
from io import BytesIO
from typing import Sequence

import pandas as pd
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter

from models import DisplayCell, Subject
from subject_colors import hsl_to_hex

logger = logging.getLogger(__name__)

HIGHLIGHT_HEX = "EBF5FF"
MAX_COLUMN_WIDTH = 45


def sanitize_sheet_name(name) -> str:
    """Remove invalid Excel sheet characters and trim length."""
    name = re.sub(r"[\\/*?:\[\]]", "_", str(name))
    return name[:30]


def auto_adjust_column_widths(ws) -> None:
    for col in ws.columns:
        max_length = 0
        col_letter = get_column_letter(col[0].column)
        for cell in col:
            if cell.value:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[col_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)


def _fill(hex_rgb: str) -> PatternFill:
    return PatternFill(start_color=hex_rgb, end_color=hex_rgb, fill_type="solid")


def export_timetable_xlsx(
    display_grid: Sequence[Sequence[DisplayCell]],
    sheet_name: str = "Timetable",
) -> bytes:
    """
    Row 0 of the display grid becomes the header row, the rest is written as values.
    Colored boxes get a solid fill; highlighted plain boxes get light blue.
    """
    sheet_name = sanitize_sheet_name(sheet_name)
    header = [c.value or "" for c in display_grid[0]]
    body = [[c.value or "" for c in row] for row in display_grid[1:]]
    df = pd.DataFrame(body, columns=header)

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]
        # Sheet row 1 is the header, so display row r sits on sheet row r + 1
        for r, row in enumerate(display_grid[1:], start=2):
            for c, cell in enumerate(row, start=1):
                if cell.color:
                    ws.cell(row=r, column=c).fill = _fill(hsl_to_hex(cell.color))
                elif cell.highlighted:
                    ws.cell(row=r, column=c).fill = _fill(HIGHLIGHT_HEX)
        auto_adjust_column_widths(ws)

    data = buffer.getvalue()
    logger.info("Exported timetable workbook (%d rows, %d bytes)", len(body), len(data))
    return data


def export_subjects_xlsx(subjects: Sequence[Subject], sheet_name: str = "Subjects") -> bytes:
    """Subject / Teacher / Weekly Hours, one row per subject."""
    sheet_name = sanitize_sheet_name(sheet_name)
    df = pd.DataFrame(
        [[s.name, s.teacher, s.weekly_hours] for s in subjects],
        columns=["Subject", "Teacher", "Weekly Hours"],
    )
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        auto_adjust_column_widths(writer.sheets[sheet_name])

    logger.info("Exported subject list workbook (%d subjects)", len(subjects))
    return buffer.getvalue()
