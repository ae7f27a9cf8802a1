"""
🧠 TIMETABLE SOLVER
===================
Puts each subject's weekly hours into the days x periods grid.
Rules:
1. A teacher can't be in two places at once.
2. Lunch stays empty.
3. Spread a subject over the week before it gets a second period on any day.

It's a greedy two-pass fill, not a full solver: when the week is too full some
subjects just get fewer hours than they asked for. schedule_with_report tells you which.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Set, Tuple

from subject_colors import color_for
from models import (
    DEFAULT_DAYS,
    DEFAULT_LUNCH_AFTER_PERIOD,
    DEFAULT_PERIODS_PER_DAY,
    GridConfig,
    InvalidConfiguration,
    Slot,
    Subject,
    empty_grid,
)

logger = logging.getLogger(__name__)

AssignmentGrid = List[List[Optional[Slot]]]


@dataclass
class ScheduleResult:
    """
    The filled grid plus what didn't fit.
    - grid: periods x days, None = free
    - unplaced: subject_id -> hours that couldn't be placed (only shortfalls > 0)
    """

    grid: AssignmentGrid
    unplaced: Dict[str, int] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.unplaced


def add_colors_to_subjects(subjects: Sequence[Subject]) -> List[Subject]:
    """Copies of the subjects, each with a color. Existing colors are kept."""
    return [s if s.color else replace(s, color=color_for(s.name)) for s in subjects]


class _Placement:
    """
    Working state for one scheduling call.
    Like a scratch pad: which boxes are full, where each teacher already is,
    and how many hours each subject still needs. Thrown away afterwards.
    """

    def __init__(self, config: GridConfig, subjects: Sequence[Subject]):
        self.config = config
        self.grid = empty_grid(config.periods_per_day, len(config.days))
        self.teacher_slots: Dict[str, Set[Tuple[int, int]]] = {}
        self.remaining: Dict[str, int] = {}
        for s in subjects:
            self.teacher_slots.setdefault(s.teacher, set())
            self.remaining[s.id] = s.weekly_hours

    def is_free(self, subject: Subject, d: int, p: int) -> bool:
        if self.grid[p][d] is not None:
            return False
        return (d, p) not in self.teacher_slots[subject.teacher]

    def place(self, subject: Subject, d: int, p: int) -> None:
        self.grid[p][d] = Slot(
            day=self.config.days[d],
            period=p + 1,
            subject_id=subject.id,
            subject=subject.name,
            teacher=subject.teacher,
        )
        self.teacher_slots[subject.teacher].add((d, p))
        self.remaining[subject.id] -= 1


# ---------------------------------------------------------------------------
# PASS 1: ONE PERIOD PER DAY
# ---------------------------------------------------------------------------


def _spread_across_days(state: _Placement, subject: Subject) -> None:
    """Walk the days in order and take the first free period on each."""
    periods = state.config.schedulable_periods()
    for d in range(len(state.config.days)):
        if state.remaining[subject.id] <= 0:
            break
        for p in periods:
            if state.is_free(subject, d, p):
                state.place(subject, d, p)
                break


# ---------------------------------------------------------------------------
# PASS 2: FILL WHAT'S LEFT
# ---------------------------------------------------------------------------


def _first_free_slot(state: _Placement, subject: Subject) -> Optional[Tuple[int, int]]:
    """Scan period by period (then day by day) for the first box this subject can take."""
    for p in state.config.schedulable_periods():
        for d in range(len(state.config.days)):
            if state.is_free(subject, d, p):
                return d, p
    return None


def _fill_remainder(state: _Placement, subject: Subject) -> None:
    while state.remaining[subject.id] > 0:
        found = _first_free_slot(state, subject)
        if found is None:
            break
        state.place(subject, *found)


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------


def _check_unique_ids(subjects: Sequence[Subject]) -> None:
    seen = set()
    for s in subjects:
        if s.id in seen:
            raise InvalidConfiguration(f"duplicate subject id: {s.id!r}")
        seen.add(s.id)


def schedule_with_report(
    subjects: Sequence[Subject],
    days: Sequence[str] = DEFAULT_DAYS,
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
    lunch_after_period: int = DEFAULT_LUNCH_AFTER_PERIOD,
) -> ScheduleResult:
    """
    Builds the weekly grid and reports hours that didn't fit.
    Raises InvalidConfiguration for an empty week, non-positive periods,
    a lunch period outside the day, or repeated subject ids.
    """
    config = GridConfig(list(days), periods_per_day, lunch_after_period).validate()
    _check_unique_ids(subjects)

    colored = add_colors_to_subjects(subjects)
    # sorted() is stable: equal hours keep their input order
    ordered = sorted(colored, key=lambda s: s.weekly_hours, reverse=True)

    state = _Placement(config, ordered)
    logger.debug(
        "Scheduling %d subjects into %d days x %d periods (lunch=%d, capacity=%d)",
        len(ordered), len(config.days), config.periods_per_day,
        config.lunch_after_period, config.capacity(),
    )

    for subject in ordered:
        if state.remaining[subject.id] <= 0:
            continue
        _spread_across_days(state, subject)

    for subject in ordered:
        _fill_remainder(state, subject)

    unplaced = {sid: left for sid, left in state.remaining.items() if left > 0}
    if unplaced:
        names = {s.id: s.name for s in ordered}
        logger.warning(
            "Timetable under-filled: %s",
            ", ".join(f"{names[sid]} ({left}h short)" for sid, left in unplaced.items()),
        )
    return ScheduleResult(grid=state.grid, unplaced=unplaced)


def schedule(
    subjects: Sequence[Subject],
    days: Sequence[str] = DEFAULT_DAYS,
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY,
    lunch_after_period: int = DEFAULT_LUNCH_AFTER_PERIOD,
) -> AssignmentGrid:
    """
    Returns a periods_per_day x len(days) grid: grid[period_idx][day_idx] -> Slot or None.
    Hours that don't fit are silently dropped; use schedule_with_report to see them.
    """
    return schedule_with_report(subjects, days, periods_per_day, lunch_after_period).grid


def teacher_timetables(grid: AssignmentGrid) -> Dict[str, Dict[Tuple[int, int], Slot]]:
    """
    "Inverts" the grid: for each teacher, (day_idx, period_idx) -> Slot.
    Like flipping the class schedule to see it from the teacher's side.
    """
    result: Dict[str, Dict[Tuple[int, int], Slot]] = {}
    for p, row in enumerate(grid):
        for d, slot in enumerate(row):
            if slot is None:
                continue
            result.setdefault(slot.teacher, {})[(d, p)] = slot
    return result
