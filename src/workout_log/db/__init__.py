"""Storage layer for workout-log."""

from .engine import STORAGE_KEY, get_data_dir, get_db_path, init_db
from .repositories import InMemoryWorkoutStore, SQLiteWorkoutStore, WorkoutStore

__all__ = [
    "get_data_dir",
    "get_db_path",
    "InMemoryWorkoutStore",
    "init_db",
    "SQLiteWorkoutStore",
    "STORAGE_KEY",
    "WorkoutStore",
]
