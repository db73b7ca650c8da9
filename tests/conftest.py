"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from workout_log.db import InMemoryWorkoutStore
from workout_log.models.workout import WorkoutRecord


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def sample_records():
    """A small two-year workout history."""
    return [
        WorkoutRecord(
            id="a1",
            date="2024-01-15",  # Monday
            categories=["Gym", "Cardio"],
            gym_subs=["Chest", "Back"],
            cardio_subs=["Run"],
            notes="push day",
            timestamp=1,
        ),
        WorkoutRecord(id="a2", date="2024-03-03", categories=["Yoga"], timestamp=2),
        WorkoutRecord(id="a3", date="2024-06-10", categories=["HIIT"], timestamp=3),
        WorkoutRecord(
            id="a4",
            date="2024-11-20",
            categories=["Gym"],
            gym_subs=["Legs"],
            timestamp=4,
        ),
        WorkoutRecord(id="b1", date="2023-02-01", categories=["Pilates"], timestamp=5),
        WorkoutRecord(
            id="b2",
            date="2023-06-10",
            categories=["Cardio"],
            cardio_subs=["Bike"],
            timestamp=6,
        ),
        WorkoutRecord(id="b3", date="2023-12-31", categories=["Other"], timestamp=7),
    ]


@pytest.fixture
def memory_store(sample_records):
    """In-memory store seeded with the sample records."""
    return InMemoryWorkoutStore(sample_records)
