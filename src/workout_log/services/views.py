"""Derived views over the workout collection.

Dashboard summary, year selection defaults, recent list, history and
calendar month. The caller passes the viewed year/month and today's date
explicitly.
"""

import calendar
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from ..models.reports import StatsReport
from ..models.workout import WorkoutRecord
from ..utils.dates import parse_date, start_of_week, to_iso, year
from .stats import calculate_avg_per_week, calculate_stats

RECENT_LIMIT = 5


def sort_by_date_desc(records: Iterable[WorkoutRecord]) -> list[WorkoutRecord]:
    """Newest workouts first."""
    return sorted(records, key=lambda r: r.date, reverse=True)


def recent_workouts(
    records: Iterable[WorkoutRecord], limit: int = RECENT_LIMIT
) -> list[WorkoutRecord]:
    return sort_by_date_desc(records)[:limit]


def history(records: Iterable[WorkoutRecord]) -> list[WorkoutRecord]:
    return sort_by_date_desc(records)


def workouts_on(records: Iterable[WorkoutRecord], day: str) -> list[WorkoutRecord]:
    """Workouts logged on a given date."""
    return [r for r in records if r.date == day]


def group_by_date(records: Iterable[WorkoutRecord]) -> dict[str, list[WorkoutRecord]]:
    grouped: dict[str, list[WorkoutRecord]] = defaultdict(list)
    for record in records:
        grouped[record.date].append(record)
    return dict(grouped)


def available_years(records: Iterable[WorkoutRecord]) -> list[int]:
    """Distinct years with workouts, newest first."""
    return sorted({year(r.date) for r in records}, reverse=True)


def default_dashboard_year(years: list[int], today: date) -> int | None:
    """Current year if it has workouts, else the newest year."""
    if not years:
        return None
    return today.year if today.year in years else years[0]


def default_comparison_years(
    years: list[int], today: date
) -> tuple[int, int] | None:
    """Pick the two years to compare when the user has not chosen.

    The first is the current year (or the newest), the second the previous
    calendar year (or the second newest, or the newest again).
    """
    if not years:
        return None
    year_a = today.year if today.year in years else years[0]
    if today.year - 1 in years:
        year_b = today.year - 1
    else:
        year_b = years[1] if len(years) > 1 else years[0]
    return year_a, year_b


@dataclass
class DashboardSummary:
    """Summary numbers and count tables for one year."""

    year: int
    is_current_year: bool
    total: int
    avg_per_week: float
    stats: StatsReport
    this_week: int | None = None
    this_month: int | None = None

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "is_current_year": self.is_current_year,
            "total": self.total,
            "avg_per_week": self.avg_per_week,
            "this_week": self.this_week,
            "this_month": self.this_month,
            "stats": self.stats.to_dict(),
        }


def dashboard_summary(
    records: Iterable[WorkoutRecord], dashboard_year: int, today: date
) -> DashboardSummary:
    """Build the dashboard for a year.

    For the current year the summary also counts workouts since the start of
    this week and since the first day of this month.
    """
    year_workouts = [r for r in records if year(r.date) == dashboard_year]
    is_current_year = dashboard_year == today.year

    summary = DashboardSummary(
        year=dashboard_year,
        is_current_year=is_current_year,
        total=len(year_workouts),
        avg_per_week=calculate_avg_per_week(year_workouts),
        stats=calculate_stats(year_workouts),
    )

    if is_current_year:
        week_start = start_of_week(today).date()
        month_start = date(dashboard_year, today.month, 1)
        dates = [parse_date(r.date) for r in year_workouts]
        summary.this_week = sum(1 for d in dates if d >= week_start)
        summary.this_month = sum(1 for d in dates if d >= month_start)

    return summary


@dataclass
class CalendarDay:
    """One day cell of a calendar month."""

    date: str
    day: int
    workouts: list[WorkoutRecord] = field(default_factory=list)
    is_today: bool = False
    is_selected: bool = False

    @property
    def has_workouts(self) -> bool:
        return bool(self.workouts)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "day": self.day,
            "workout_count": len(self.workouts),
            "is_today": self.is_today,
            "is_selected": self.is_selected,
        }


@dataclass
class CalendarMonth:
    """A Monday-first month grid."""

    year: int
    month: int  # 1-12
    leading_blanks: int
    days: list[CalendarDay]

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def weeks(self) -> list[list[CalendarDay | None]]:
        """Rows of seven cells, padded with None outside the month."""
        cells: list[CalendarDay | None] = [None] * self.leading_blanks + list(self.days)
        cells += [None] * (-len(cells) % 7)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "label": self.label,
            "leading_blanks": self.leading_blanks,
            "days": [d.to_dict() for d in self.days],
        }


def calendar_month(
    records: Iterable[WorkoutRecord],
    view_year: int,
    view_month: int,
    today: date,
    selected: str | None = None,
) -> CalendarMonth:
    """Lay out one month with the workouts of each day.

    Args:
        records: All workouts
        view_year: Year being viewed
        view_month: Month being viewed, 1-12
        today: Reference date for highlighting
        selected: Currently selected date, if any
    """
    by_date = group_by_date(records)
    first_weekday, days_in_month = calendar.monthrange(view_year, view_month)

    days = []
    for day_number in range(1, days_in_month + 1):
        current = date(view_year, view_month, day_number)
        iso = to_iso(current)
        days.append(
            CalendarDay(
                date=iso,
                day=day_number,
                workouts=by_date.get(iso, []),
                is_today=current == today,
                is_selected=iso == selected,
            )
        )

    return CalendarMonth(
        year=view_year,
        month=view_month,
        leading_blanks=first_weekday,
        days=days,
    )
