import unittest
from io import BytesIO

from openpyxl import Workbook, load_workbook

from excel_export import (
    auto_adjust_column_widths, export_subjects_xlsx, export_timetable_xlsx, sanitize_sheet_name,
)
from grid_format import to_display_grid
from models import DEFAULT_DAYS, Subject, demo_subjects
from pdf_export import export_subjects_pdf, export_timetable_pdf
from solver import schedule


def _display():
    math = Subject("1", "Math", "Smith", 3)
    grid = schedule([math], DEFAULT_DAYS, 8, 4)
    return to_display_grid(grid, DEFAULT_DAYS, [math])


class TestExcelExport(unittest.TestCase):

    def test_timetable_values_and_fills(self):
        wb = load_workbook(BytesIO(export_timetable_xlsx(_display())))
        ws = wb["Timetable"]
        self.assertEqual(ws["A1"].value, "Period/Day")
        self.assertEqual(ws["B1"].value, "Monday")
        self.assertEqual(ws["F1"].value, "Friday")
        self.assertEqual(ws["A2"].value, "Period 1")
        self.assertEqual(ws["B2"].value, "Math (Smith)")
        self.assertEqual(ws["D2"].value, "Math (Smith)")
        self.assertEqual(ws["A5"].value, "Period 4 (Lunch after)")
        self.assertEqual(ws.max_row, 9)
        # Math -> hsl(64, 70%, 80%) -> EBF0A8
        self.assertTrue(ws["B2"].fill.fgColor.rgb.endswith("EBF0A8"))
        self.assertTrue(ws["B5"].fill.fgColor.rgb.endswith("EBF5FF"))

    def test_subjects_sheet(self):
        wb = load_workbook(BytesIO(export_subjects_xlsx(demo_subjects())))
        ws = wb["Subjects"]
        self.assertEqual([c.value for c in ws[1]], ["Subject", "Teacher", "Weekly Hours"])
        self.assertEqual([c.value for c in ws[2]], ["Mathematics", "Dr. Smith", 5])
        self.assertEqual(ws.max_row, 11)

    def test_sanitize_sheet_name(self):
        self.assertEqual(sanitize_sheet_name("NormalName"), "NormalName")
        self.assertEqual(sanitize_sheet_name("Invalid/Name*With:Chars?"), "Invalid_Name_With_Chars_")
        self.assertEqual(len(sanitize_sheet_name("A" * 50)), 30)

    def test_auto_adjust_column_widths(self):
        wb = Workbook()
        ws = wb.active
        ws.append(["Header1", "Header2"])
        ws.append(["Short", "VeryLongValueInColumn2" * 5])
        auto_adjust_column_widths(ws)
        self.assertEqual(ws.column_dimensions["A"].width, 9)
        self.assertEqual(ws.column_dimensions["B"].width, 45)


class TestPdfExport(unittest.TestCase):

    def test_timetable_pdf(self):
        data = export_timetable_pdf(_display(), title="Class 5A & friends")
        self.assertTrue(data.startswith(b"%PDF"))
        self.assertGreater(len(data), 1000)

    def test_subjects_pdf(self):
        data = export_subjects_pdf(demo_subjects())
        self.assertTrue(data.startswith(b"%PDF"))

    def test_empty_subject_list_pdf(self):
        self.assertTrue(export_subjects_pdf([]).startswith(b"%PDF"))


if __name__ == "__main__":
    unittest.main()
