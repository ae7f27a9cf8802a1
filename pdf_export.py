"""
🧠 PDF EXPORT
=============
Turns the display grid into a clean, printable PDF.
- A4 page, title and generation date on top
- Blue header row, each class box filled with its subject color
- Footer on every page
"""

import logging
from datetime import date
from io import BytesIO
from typing import Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from subject_colors import hsl_to_rgb
from models import DisplayCell, Subject

logger = logging.getLogger(__name__)

FOOTER_TEXT = "Timetable Generator | Automated Scheduling"
HEADER_RGB = (41, 128, 185)
HIGHLIGHT_RGB = (235, 245, 255)


def _rgb(rgb) -> colors.Color:
    r, g, b = rgb
    return colors.Color(r / 255, g / 255, b / 255)


def _base_table_style() -> list:
    """Blue header, white bold header text, centered grid."""
    return [
        ("BACKGROUND", (0, 0), (-1, 0), _rgb(HEADER_RGB)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("TEXTCOLOR", (0, 1), (-1, -1), colors.black),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#cccccc")),
    ]


def _draw_footer(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 9)
    canvas.setFillColor(colors.grey)
    width, _ = doc.pagesize
    canvas.drawCentredString(width / 2, 1 * cm, FOOTER_TEXT)
    canvas.restoreState()


def _build(story: list, title: str) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=1.5*cm, rightMargin=1.5*cm, title=title)
    styles = getSampleStyleSheet()
    header = [
        Paragraph(f"<b>{escape(title)}</b>", styles["Heading1"]),
        Paragraph(f"Generated on: {date.today().isoformat()}", styles["Normal"]),
        Spacer(1, 0.5*cm),
    ]
    doc.build(header + story, onFirstPage=_draw_footer, onLaterPages=_draw_footer)
    return buffer.getvalue()


def export_timetable_pdf(
    display_grid: Sequence[Sequence[DisplayCell]],
    title: str = "School Timetable",
) -> bytes:
    """
    One table: row 0 of the display grid is the header, the rest is the body.
    Cell colors (hsl) are converted to RGB fills; highlighted plain cells get light blue.
    """
    # Body text goes in Paragraphs so long "Subject (Teacher)" values wrap
    cell_style = ParagraphStyle("cell", fontSize=8, leading=10, alignment=TA_CENTER)
    rows = [[cell.value or "" for cell in row] for row in display_grid[:1]]
    rows += [[Paragraph(escape(cell.value or ""), cell_style) for cell in row] for row in display_grid[1:]]
    style = _base_table_style()

    for r, row in enumerate(display_grid[1:], start=1):
        for c, cell in enumerate(row):
            if cell.color:
                style.append(("BACKGROUND", (c, r), (c, r), _rgb(hsl_to_rgb(cell.color))))
            elif cell.highlighted:
                style.append(("BACKGROUND", (c, r), (c, r), _rgb(HIGHLIGHT_RGB)))

    num_cols = len(rows[0]) if rows else 1
    first_col = 3.6*cm
    other = (A4[0] - 3*cm - first_col) / max(1, num_cols - 1)
    t = Table(rows, colWidths=[first_col] + [other] * (num_cols - 1))
    t.setStyle(TableStyle(style))

    data = _build([t], title)
    logger.info("Exported timetable PDF (%d rows, %d bytes)", len(rows), len(data))
    return data


def export_subjects_pdf(subjects: Sequence[Subject], title: str = "Subject List") -> bytes:
    """Subject / Teacher / Weekly Hours table."""
    rows = [["Subject", "Teacher", "Weekly Hours"]]
    rows += [[s.name, s.teacher, str(s.weekly_hours)] for s in subjects]

    t = Table(rows, colWidths=[6*cm, 6*cm, 3*cm])
    style = _base_table_style()
    if subjects:
        style.append(("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#fafafa")]))
    t.setStyle(TableStyle(style))

    data = _build([t], title)
    logger.info("Exported subject list PDF (%d subjects)", len(subjects))
    return data
