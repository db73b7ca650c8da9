"""Data models for workout-log."""

from .reports import (
    ComparisonReport,
    ComparisonRow,
    ComparisonSection,
    ImportResult,
    StatsReport,
)
from .workout import (
    CardioSub,
    Category,
    GymSub,
    MONTH_LABELS,
    QUARTER_LABELS,
    WEEKDAY_LABELS,
    WorkoutRecord,
    fingerprint,
    generate_id,
)

__all__ = [
    "CardioSub",
    "Category",
    "ComparisonReport",
    "ComparisonRow",
    "ComparisonSection",
    "GymSub",
    "ImportResult",
    "MONTH_LABELS",
    "QUARTER_LABELS",
    "StatsReport",
    "WEEKDAY_LABELS",
    "WorkoutRecord",
    "fingerprint",
    "generate_id",
]
