"""Workout log facade used by the CLI and the web API.

Every mutation loads the whole collection, changes it in memory and saves
it back as one swap while holding the store's lock, so overlapping
requests never overwrite each other's changes.
"""

import json
import logging
from collections.abc import Iterable
from datetime import date

from ..db.repositories import WorkoutStore
from ..errors import RecordValidationError
from ..models.reports import ImportResult
from ..models.workout import Category, WorkoutRecord
from ..utils.dates import is_iso_date, to_iso
from .importer import import_delimited, import_structured

logger = logging.getLogger(__name__)


def export_filename(today: date | None = None) -> str:
    """File name for a JSON export, stamped with the current date."""
    if today is None:
        today = date.today()
    return f"workouts-{to_iso(today)}.json"


def _clean(labels: Iterable[str]) -> list[str]:
    return [label.strip() for label in labels if label and label.strip()]


class WorkoutLog:
    """Operations on the stored workout collection."""

    def __init__(self, store: WorkoutStore):
        self.store = store

    async def load_all(self) -> list[WorkoutRecord]:
        """Load every stored workout."""
        return await self.store.load()

    async def save_all(self, records: list[WorkoutRecord]) -> None:
        """Replace the stored collection."""
        await self.store.save(records)

    async def add_record(
        self,
        date: str,
        categories: Iterable[str],
        gym_subs: Iterable[str] = (),
        cardio_subs: Iterable[str] = (),
        notes: str = "",
    ) -> WorkoutRecord:
        """Log a new workout.

        Sub-tags are only kept when their parent category is selected.

        Raises:
            RecordValidationError: If the date is malformed or no category
                is given
        """
        if not is_iso_date(date):
            raise RecordValidationError(f"Invalid date {date!r}, expected YYYY-MM-DD")

        categories = _clean(categories)
        if not categories:
            raise RecordValidationError("Select at least one category")

        record = WorkoutRecord(
            date=date,
            categories=categories,
            gym_subs=_clean(gym_subs) if Category.GYM.value in categories else [],
            cardio_subs=(
                _clean(cardio_subs) if Category.CARDIO.value in categories else []
            ),
            notes=notes or "",
        )

        async with self.store.lock:
            records = await self.load_all()
            records.append(record)
            await self.save_all(records)

        logger.info("Logged workout %s on %s", record.id, record.date)
        return record

    async def delete_record(self, record_id: str) -> bool:
        """Delete a workout by id.

        Returns:
            True if a workout was removed
        """
        async with self.store.lock:
            records = await self.load_all()
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) == len(records):
                return False
            await self.save_all(remaining)

        logger.info("Deleted workout %s", record_id)
        return True

    async def _merge(self, records: list[WorkoutRecord], result: ImportResult) -> None:
        if result.imported_records:
            await self.save_all(records + result.imported_records)

    async def import_delimited(self, text: str) -> ImportResult:
        """Import CSV text into the stored collection."""
        async with self.store.lock:
            records = await self.load_all()
            result = import_delimited(text, records)
            await self._merge(records, result)
        return result

    async def import_structured(self, payload) -> ImportResult:
        """Import a JSON export into the stored collection.

        Raises:
            ImportFormatError: If the payload is not a JSON list; nothing is
                saved in that case
        """
        async with self.store.lock:
            records = await self.load_all()
            result = import_structured(payload, records)
            await self._merge(records, result)
        return result

    async def export_json(self) -> str:
        """Pretty-printed JSON dump of the full collection."""
        records = await self.load_all()
        return json.dumps([r.to_dict() for r in records], indent=2)
