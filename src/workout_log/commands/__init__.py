"""CLI commands for workout-log."""

from .export import export
from .import_data import import_data
from .init import init
from .serve import serve
from .stats import calendar_cmd, compare, dashboard
from .workouts import day, delete, history, log, recent

__all__ = [
    "calendar_cmd",
    "compare",
    "dashboard",
    "day",
    "delete",
    "export",
    "history",
    "import_data",
    "init",
    "log",
    "recent",
    "serve",
]
