"""Workout stores.

The whole collection is loaded and saved at once; there are no partial
writes.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiosqlite

from ..errors import StorageError
from ..models.workout import WorkoutRecord
from .engine import STORAGE_KEY, get_db_path

logger = logging.getLogger(__name__)


@runtime_checkable
class WorkoutStore(Protocol):
    """Protocol for whole-collection workout storage.

    `lock` guards load-modify-save cycles against concurrent writers that
    share the store.
    """

    lock: asyncio.Lock

    async def load(self) -> list[WorkoutRecord]:
        """Load every stored workout; an empty store yields an empty list."""
        ...

    async def save(self, records: list[WorkoutRecord]) -> None:
        """Replace the stored collection."""
        ...


def _decode(value: str) -> list[WorkoutRecord]:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise StorageError(f"Stored workouts are not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StorageError("Stored workouts are not a JSON array")
    try:
        return [WorkoutRecord.from_dict(item) for item in data]
    except (KeyError, TypeError, AttributeError) as e:
        raise StorageError(f"Stored workout is malformed: {e}") from e


def _encode(records: list[WorkoutRecord]) -> str:
    return json.dumps([r.to_dict() for r in records])


class SQLiteWorkoutStore:
    """Workout store backed by a key/value table in SQLite."""

    def __init__(self, db_path: Path | None = None, key: str = STORAGE_KEY):
        self.db_path = db_path or get_db_path()
        self.key = key
        self.lock = asyncio.Lock()

    async def load(self) -> list[WorkoutRecord]:
        """Load the stored collection."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "SELECT value FROM local_storage WHERE key = ?", (self.key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(f"Cannot read workouts from {self.db_path}: {e}") from e

        if row is None:
            return []
        return _decode(row[0])

    async def save(self, records: list[WorkoutRecord]) -> None:
        """Replace the stored collection."""
        value = _encode(records)
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO local_storage (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (self.key, value),
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Cannot write workouts to {self.db_path}: {e}") from e

        logger.debug("Saved %d workout(s) to %s", len(records), self.db_path)


class InMemoryWorkoutStore:
    """Workout store kept in memory, used in tests and previews."""

    def __init__(self, records: list[WorkoutRecord] | None = None):
        self._value = _encode(records) if records else None
        self.lock = asyncio.Lock()

    async def load(self) -> list[WorkoutRecord]:
        if self._value is None:
            return []
        return _decode(self._value)

    async def save(self, records: list[WorkoutRecord]) -> None:
        self._value = _encode(records)
