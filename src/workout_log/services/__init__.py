"""Core services for workout-log."""

from .comparison import compare_years
from .importer import import_delimited, import_structured
from .stats import calculate_avg_per_week, calculate_stats
from .workout_log import WorkoutLog, export_filename

__all__ = [
    "calculate_avg_per_week",
    "calculate_stats",
    "compare_years",
    "export_filename",
    "import_delimited",
    "import_structured",
    "WorkoutLog",
]
