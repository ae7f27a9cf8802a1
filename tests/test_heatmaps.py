import unittest

from grid_format import to_display_grid
from heatmaps import (
    display_grid_to_frame, render_day_utilization_heatmap, render_teacher_load_heatmap,
    style_display_grid,
)
from models import DEFAULT_DAYS, Subject
from solver import schedule
from stats import compute_stats


class TestHeatmaps(unittest.TestCase):

    def setUp(self):
        self.subjects = [Subject("1", "Math", "Smith", 3), Subject("2", "Art", "White", 1)]
        grid = schedule(self.subjects, DEFAULT_DAYS, 8, 4)
        self.display = to_display_grid(grid, DEFAULT_DAYS, self.subjects)

    def test_frame_shape(self):
        df = display_grid_to_frame(self.display)
        self.assertEqual(df.shape, (8, 5))
        self.assertEqual(list(df.columns), DEFAULT_DAYS)
        self.assertEqual(df.index.name, "Period/Day")
        self.assertEqual(df.loc["Period 1", "Monday"], "Math (Smith)")
        self.assertEqual(df.loc["Period 2", "Monday"], "Art (White)")
        self.assertEqual(df.loc["Period 1", "Friday"], "")

    def test_styled_grid_wraps_frame(self):
        styler = style_display_grid(self.display)
        self.assertTrue(styler.data.equals(display_grid_to_frame(self.display)))

    def test_teacher_load(self):
        stats = compute_stats(self.display, DEFAULT_DAYS, self.subjects)
        styler = render_teacher_load_heatmap(stats, DEFAULT_DAYS)
        self.assertEqual(list(styler.data.index), ["Smith", "White"])
        self.assertEqual(styler.data.loc["Smith", "Tuesday"], 1)
        self.assertEqual(styler.data.loc["White", "Tuesday"], 0)

    def test_day_utilization(self):
        stats = compute_stats(self.display, DEFAULT_DAYS, self.subjects)
        styler = render_day_utilization_heatmap(stats)
        self.assertAlmostEqual(styler.data.loc["Utilization %", "Monday"], 25.0)
        self.assertAlmostEqual(styler.data.loc["Utilization %", "Thursday"], 0.0)


if __name__ == "__main__":
    unittest.main()
