"""Workout statistics.

Reduces a collection of workouts into fixed-vocabulary count tables and
an average-per-week rate.
"""

import math
from collections.abc import Iterable

from ..models.reports import StatsReport
from ..models.workout import (
    MONTH_LABELS,
    QUARTER_LABELS,
    WEEKDAY_LABELS,
    CardioSub,
    Category,
    GymSub,
    WorkoutRecord,
)
from ..utils.dates import day_of_week, month, parse_date, quarter


def _count_tags(table: dict[str, int], vocabulary, labels: Iterable[str]) -> None:
    """Increment a table once per known label occurrence."""
    for label in labels:
        tag = vocabulary.parse(label)
        if tag is None:
            # Unknown labels are tolerated and ignored
            continue
        table[tag.value] += 1


def calculate_stats(records: Iterable[WorkoutRecord]) -> StatsReport:
    """Count workouts per category, sub-category, weekday, month and quarter.

    Category tables count every occurrence in a record's tag lists, repeats
    included. Sub-category tables are counted independently of whether the
    parent category is present. Weekday, month and quarter tables count
    each record once.
    """
    stats = StatsReport()

    for record in records:
        stats.total += 1
        _count_tags(stats.categories, Category, record.categories)
        _count_tags(stats.gym_subs, GymSub, record.gym_subs or [])
        _count_tags(stats.cardio_subs, CardioSub, record.cardio_subs or [])

        stats.weekdays[WEEKDAY_LABELS[day_of_week(record.date)]] += 1
        stats.months[MONTH_LABELS[month(record.date)]] += 1
        stats.quarters[QUARTER_LABELS[quarter(record.date) - 1]] += 1

    return stats


def calculate_avg_per_week(records: Iterable[WorkoutRecord]) -> float:
    """Average workouts per week over the observed date span.

    The span is the number of started weeks between the earliest and the
    latest workout, never less than one. Returns 0 for no workouts.
    """
    dates = [parse_date(r.date) for r in records]
    if not dates:
        return 0

    span_days = (max(dates) - min(dates)).days
    weeks = math.ceil(span_days / 7) or 1

    return round(len(dates) / weeks, 1)


def format_avg(value: float) -> str:
    """Render an average with one fractional digit."""
    return f"{value:.1f}"
