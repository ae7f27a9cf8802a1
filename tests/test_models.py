import unittest

from models import (
    DEFAULT_DAYS, GridConfig, InvalidConfiguration, demo_subjects, empty_grid, new_subject,
)


class TestGridConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = GridConfig()
        self.assertEqual(cfg.days, DEFAULT_DAYS)
        self.assertEqual(cfg.periods_per_day, 8)
        self.assertEqual(cfg.lunch_after_period, 4)
        self.assertIs(cfg.validate(), cfg)

    def test_defaults_not_shared(self):
        a = GridConfig()
        a.days.append("Saturday")
        self.assertEqual(GridConfig().days, DEFAULT_DAYS)

    def test_schedulable_periods_and_capacity(self):
        cfg = GridConfig()
        self.assertEqual(cfg.schedulable_periods(), [0, 1, 2, 4, 5, 6, 7])
        self.assertEqual(cfg.capacity(), 35)
        self.assertEqual(cfg.lunch_index, 3)

    def test_invalid(self):
        bad = [
            GridConfig(days=[]),
            GridConfig(days=["Mon", "Mon"]),
            GridConfig(periods_per_day=0, lunch_after_period=1),
            GridConfig(periods_per_day=4, lunch_after_period=5),
            GridConfig(lunch_after_period=0),
        ]
        for cfg in bad:
            with self.assertRaises(InvalidConfiguration):
                cfg.validate()


class TestFactories(unittest.TestCase):

    def test_empty_grid(self):
        grid = empty_grid(3, 2)
        self.assertEqual(grid, [[None, None], [None, None], [None, None]])
        grid[0][0] = "x"
        self.assertIsNone(grid[1][0])

    def test_new_subject_ids_unique(self):
        a = new_subject(" Math ", " Smith ", "3")
        b = new_subject("Math", "Smith", 3)
        self.assertNotEqual(a.id, b.id)
        self.assertEqual((a.name, a.teacher, a.weekly_hours), ("Math", "Smith", 3))
        self.assertIsNone(a.color)

    def test_demo_subjects(self):
        subjects = demo_subjects()
        self.assertEqual(len(subjects), 10)
        self.assertEqual(len({s.id for s in subjects}), 10)
        self.assertEqual(sum(s.weekly_hours for s in subjects), 33)
        subjects[0].weekly_hours = 99
        self.assertEqual(demo_subjects()[0].weekly_hours, 5)


if __name__ == "__main__":
    unittest.main()
