"""Exceptions raised by workout-log."""


class WorkoutLogError(Exception):
    """Base class for workout-log errors."""


class ImportFormatError(WorkoutLogError, ValueError):
    """A structured import payload is not a list of workouts at all."""


class RecordValidationError(WorkoutLogError, ValueError):
    """A directly entered workout is missing required data."""


class StorageError(WorkoutLogError):
    """The workout store is unavailable or holds unreadable data."""
