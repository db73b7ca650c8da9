"""Year-over-year workout comparison."""

from collections.abc import Iterable
from datetime import date

from ..models.reports import (
    ComparisonReport,
    ComparisonRow,
    ComparisonSection,
)
from ..models.workout import WorkoutRecord
from ..utils.dates import parse_date, project_onto_year, year
from .stats import calculate_stats


def _until(records: list[WorkoutRecord], cutoff: date) -> list[WorkoutRecord]:
    return [r for r in records if parse_date(r.date) <= cutoff]


def compare_years(
    records: Iterable[WorkoutRecord],
    year_a: int,
    year_b: int,
    today: date | None = None,
) -> ComparisonReport:
    """Compare workout counts of two years.

    The current year (relative to ``today``) only counts workouts up to
    today. When exactly one of the two years is the current year, the other
    year is cut off at the same month and day, so both sides cover the same
    part of the year.

    Args:
        records: All workouts
        year_a: First year; deltas are ``year_a - year_b``
        year_b: Second year
        today: Reference date (defaults to the current date)

    Returns:
        ComparisonReport with a total row and one section per count table
    """
    if today is None:
        today = date.today()
    records = list(records)
    current_year = today.year

    workouts_a = [r for r in records if year(r.date) == year_a]
    workouts_b = [r for r in records if year(r.date) == year_b]

    if year_a == current_year:
        workouts_a = _until(workouts_a, today)
    if year_b == current_year:
        workouts_b = _until(workouts_b, today)

    if year_a == current_year and year_b != current_year:
        workouts_b = _until(workouts_b, project_onto_year(today, year_b))
    if year_b == current_year and year_a != current_year:
        workouts_a = _until(workouts_a, project_onto_year(today, year_a))

    stats_a = calculate_stats(workouts_a)
    stats_b = calculate_stats(workouts_b)

    sections = [
        ComparisonSection(
            title="Total Workouts",
            rows=[ComparisonRow("Total", stats_a.total, stats_b.total)],
        )
    ]
    for (title, table_a), (_, table_b) in zip(stats_a.tables(), stats_b.tables()):
        sections.append(
            ComparisonSection(
                title=title,
                rows=[
                    ComparisonRow(label, table_a[label], table_b[label])
                    for label in table_a
                ],
            )
        )

    return ComparisonReport(
        year_a=year_a,
        year_b=year_b,
        ytd=current_year in (year_a, year_b),
        sections=sections,
    )
