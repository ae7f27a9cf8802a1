"""
🧠 DATA MODELS
==============
Little boxes that hold info about subjects, the weekly grid, and what ends up in each cell.
Think of them as forms you fill out: "Subject name? Who teaches it? How many hours a week?"
"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
DEFAULT_PERIODS_PER_DAY = 8
DEFAULT_LUNCH_AFTER_PERIOD = 4


class InvalidConfiguration(ValueError):
    """Grid dimensions or subject list can't produce a meaningful timetable."""


@dataclass
class Subject:
    """
    One subject on the timetable.
    - id: Unique within one scheduling run (e.g. "1" or a uuid)
    - name: Display name (e.g. "Mathematics")
    - teacher: Who teaches it (e.g. "Dr. Smith")
    - weekly_hours: How many periods per week (e.g. 5)
    - color: Optional CSS color, filled in from the name if missing
    """

    id: str
    name: str
    teacher: str
    weekly_hours: int
    color: Optional[str] = None


@dataclass
class Slot:
    """One filled box in the grid. period is 1-based like the printed timetable."""

    day: str
    period: int
    subject_id: str
    subject: str
    teacher: str


@dataclass
class DisplayCell:
    """
    One cell ready for a table: what to show, can the user type in it,
    should it stand out, and which background it gets.
    """

    value: str
    editable: bool = True
    highlighted: bool = False
    color: Optional[str] = None


@dataclass
class GridConfig:
    """
    Week settings: days, periods, and where lunch goes.
    - days: e.g. ["Monday", ..., "Friday"]; order is the column order
    - periods_per_day: e.g. 8
    - lunch_after_period: 1-based period that is never scheduled (e.g. 4)
    """

    days: List[str] = field(default_factory=lambda: list(DEFAULT_DAYS))
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY
    lunch_after_period: int = DEFAULT_LUNCH_AFTER_PERIOD

    def validate(self) -> "GridConfig":
        if not self.days:
            raise InvalidConfiguration("at least one day is required")
        if len(set(self.days)) != len(self.days):
            raise InvalidConfiguration(f"day names must be distinct: {self.days}")
        if self.periods_per_day < 1:
            raise InvalidConfiguration(
                f"periods_per_day must be positive, got {self.periods_per_day}"
            )
        if not 1 <= self.lunch_after_period <= self.periods_per_day:
            raise InvalidConfiguration(
                f"lunch_after_period must be within 1..{self.periods_per_day}, "
                f"got {self.lunch_after_period}"
            )
        return self

    @property
    def lunch_index(self) -> int:
        return self.lunch_after_period - 1

    def schedulable_periods(self) -> List[int]:
        """0-based period indices that can hold a class (everything except lunch)."""
        return [p for p in range(self.periods_per_day) if p != self.lunch_index]

    def capacity(self) -> int:
        """How many boxes in the week can be filled at all."""
        return len(self.schedulable_periods()) * len(self.days)


def empty_grid(periods_per_day: int, num_days: int) -> List[List[Optional[Slot]]]:
    """periods x days matrix of empty boxes."""
    return [[None] * num_days for _ in range(periods_per_day)]


def new_subject(name: str, teacher: str, weekly_hours: int, color: Optional[str] = None) -> Subject:
    """Subject with a fresh unique id, for forms that don't pick one themselves."""
    return Subject(
        id=uuid.uuid4().hex,
        name=name.strip(),
        teacher=teacher.strip(),
        weekly_hours=int(weekly_hours),
        color=color,
    )


DEMO_SUBJECTS = [
    ("1", "Mathematics", "Dr. Smith", 5),
    ("2", "Physics", "Prof. Johnson", 4),
    ("3", "Chemistry", "Mrs. Davis", 4),
    ("4", "Biology", "Mr. Wilson", 3),
    ("5", "English", "Ms. Thompson", 5),
    ("6", "History", "Dr. Brown", 3),
    ("7", "Geography", "Mr. Miller", 2),
    ("8", "Computer Science", "Mrs. Clark", 3),
    ("9", "Physical Education", "Coach Harris", 2),
    ("10", "Art", "Ms. White", 2),
]


def demo_subjects() -> List[Subject]:
    """Fresh copies of the demo subject list (safe to mutate)."""
    return [Subject(id=i, name=n, teacher=t, weekly_hours=h) for i, n, t, h in DEMO_SUBJECTS]
