"""Interactive workout entry."""

from .client import ManualEntryClient, WorkoutEntry

__all__ = ["ManualEntryClient", "WorkoutEntry"]
