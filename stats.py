"""
📊 TIMETABLE INSIGHTS
=====================
Counts read back from the display grid (so manual edits count too):
who teaches how much on which day, how full each day is, and which subjects
got fewer hours than they asked for.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from grid_format import parse_cell_value
from models import DisplayCell, Subject


@dataclass
class TeacherStats:
    name: str
    total_hours: int = 0
    daily_hours: Dict[str, int] = field(default_factory=dict)
    subjects: List[str] = field(default_factory=list)


@dataclass
class SubjectStats:
    name: str
    teacher: str
    total_hours: int = 0
    weekly_hours: Optional[int] = None

    @property
    def shortfall(self) -> int:
        if self.weekly_hours is None:
            return 0
        return max(0, self.weekly_hours - self.total_hours)


@dataclass
class DayStats:
    name: str
    filled_slots: int = 0
    empty_slots: int = 0

    @property
    def total_slots(self) -> int:
        return self.filled_slots + self.empty_slots

    @property
    def utilization(self) -> float:
        """Percent of this day's boxes that are filled."""
        return (self.filled_slots / self.total_slots) * 100 if self.total_slots else 0.0


@dataclass
class TimetableStats:
    teachers: Dict[str, TeacherStats]
    subjects: Dict[str, SubjectStats]
    days: List[DayStats]

    @property
    def utilization(self) -> float:
        total = sum(d.total_slots for d in self.days)
        filled = sum(d.filled_slots for d in self.days)
        return (filled / total) * 100 if total else 0.0

    def under_scheduled(self) -> List[SubjectStats]:
        return [s for s in self.subjects.values() if s.shortfall > 0]


def compute_stats(
    display_grid: Sequence[Sequence[DisplayCell]],
    days: Sequence[str],
    subjects: Sequence[Subject] = (),
) -> TimetableStats:
    """
    Walks every timetable box (skips the header row and the period-label column).
    Subjects that never appear still show up with 0 hours if they were requested.
    """
    teachers: Dict[str, TeacherStats] = {}
    subject_stats: Dict[str, SubjectStats] = {}
    day_stats = [DayStats(name=d) for d in days]
    requested = {s.name: s for s in subjects}

    for row in display_grid[1:]:
        for d, cell in enumerate(row[1:len(days) + 1]):
            day = days[d]
            if not (cell.value or "").strip():
                day_stats[d].empty_slots += 1
                continue
            day_stats[d].filled_slots += 1

            parsed = parse_cell_value(cell.value)
            if parsed is None:
                continue
            subj, teacher = parsed

            ts = teachers.get(teacher)
            if ts is None:
                ts = TeacherStats(name=teacher, daily_hours={dd: 0 for dd in days})
                teachers[teacher] = ts
            ts.total_hours += 1
            ts.daily_hours[day] += 1
            if subj not in ts.subjects:
                ts.subjects.append(subj)

            ss = subject_stats.get(subj)
            if ss is None:
                req = requested.get(subj)
                ss = SubjectStats(name=subj, teacher=teacher, weekly_hours=req.weekly_hours if req else None)
                subject_stats[subj] = ss
            ss.total_hours += 1

    for name, s in requested.items():
        if name not in subject_stats:
            subject_stats[name] = SubjectStats(name=name, teacher=s.teacher, weekly_hours=s.weekly_hours)

    return TimetableStats(teachers=teachers, subjects=subject_stats, days=day_stats)
