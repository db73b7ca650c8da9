"""Import workouts from CSV text or JSON exports.

Both formats share the same merge rules: every accepted row gets a fresh id
and timestamp, rows are checked against the fingerprints of the existing
collection and of rows accepted earlier in the same batch, and per-row
problems are counted instead of aborting the batch.
"""

import json
import logging
from collections.abc import Iterable

from ..errors import ImportFormatError
from ..models.reports import ImportResult
from ..models.workout import TAG_SEPARATOR, WorkoutRecord, fingerprint
from ..utils.dates import is_iso_date

logger = logging.getLogger(__name__)


class _RowError(ValueError):
    """A single import row is invalid."""


class _BatchMerger:
    """Tracks known fingerprints and counters for one import batch."""

    def __init__(self, existing_records: Iterable[WorkoutRecord]):
        self.seen = {fingerprint(r) for r in existing_records}
        self.result = ImportResult()

    def add(self, record: WorkoutRecord) -> None:
        key = fingerprint(record)
        if key in self.seen:
            self.result.duplicates += 1
            return
        self.seen.add(key)
        self.result.imported_records.append(record)
        self.result.imported += 1

    def error(self, reason: str) -> None:
        logger.debug("Skipping import row: %s", reason)
        self.result.errors += 1


def _split_tags(field: str) -> list[str]:
    """Split a pipe-separated tag field, dropping empty tokens."""
    if not field:
        return []
    return [t.strip() for t in field.split(TAG_SEPARATOR) if t.strip()]


def _parse_csv_line(line: str) -> WorkoutRecord:
    parts = [p.strip() for p in line.split(",")]
    if len(parts) < 2:
        raise _RowError(f"expected at least 2 fields: {line!r}")

    date = parts[0]
    if not is_iso_date(date):
        raise _RowError(f"invalid date {date!r}")

    categories = _split_tags(parts[1])
    if not categories:
        raise _RowError(f"no categories on {date}")

    return WorkoutRecord(
        date=date,
        categories=categories,
        gym_subs=_split_tags(parts[2]) if len(parts) > 2 else [],
        cardio_subs=_split_tags(parts[3]) if len(parts) > 3 else [],
        notes=parts[4] if len(parts) > 4 else "",
    )


def import_delimited(
    text: str, existing_records: Iterable[WorkoutRecord]
) -> ImportResult:
    """Parse CSV text into new workouts, skipping duplicates.

    Format: ``date,categories,gymSubs,cardioSubs,notes`` with tag fields
    separated by ``|``. A first line containing "date" is treated as a
    header. Fields are split on plain commas; quotes are kept verbatim.

    Args:
        text: The CSV content
        existing_records: The current collection, used for duplicate detection

    Returns:
        ImportResult with the records to merge and the batch counters
    """
    merger = _BatchMerger(existing_records)

    lines = [line for line in text.split("\n") if line.strip()]
    start = 1 if lines and "date" in lines[0].lower() else 0

    for line in lines[start:]:
        try:
            record = _parse_csv_line(line)
        except _RowError as e:
            merger.error(str(e))
            continue
        merger.add(record)

    logger.info("CSV import: %s", merger.result.summary())
    return merger.result


def _tag_list(item: dict, key: str) -> list[str]:
    value = item.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise _RowError(f"{key} must be a list of labels")
    return list(value)


def _parse_json_item(item) -> WorkoutRecord:
    if not isinstance(item, dict):
        raise _RowError(f"expected an object, got {type(item).__name__}")
    if not item.get("date") or item.get("categories") is None:
        raise _RowError("missing date or categories")

    date = item["date"]
    if not is_iso_date(date):
        raise _RowError(f"invalid date {date!r}")

    categories = _tag_list(item, "categories")
    if not categories:
        raise _RowError(f"no categories on {date}")

    notes = item.get("notes") or ""
    if not isinstance(notes, str):
        raise _RowError("notes must be text")

    # Source ids and timestamps are never trusted
    return WorkoutRecord(
        date=date,
        categories=categories,
        gym_subs=_tag_list(item, "gymSubs"),
        cardio_subs=_tag_list(item, "cardioSubs"),
        notes=notes,
    )


def import_structured(
    payload, existing_records: Iterable[WorkoutRecord]
) -> ImportResult:
    """Parse a JSON export into new workouts, skipping duplicates.

    Args:
        payload: JSON text (str or bytes) or an already deserialized value
        existing_records: The current collection, used for duplicate detection

    Returns:
        ImportResult with the records to merge and the batch counters

    Raises:
        ImportFormatError: If the payload is not valid JSON or not a list
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ImportFormatError(f"Invalid JSON file: {e}") from e

    if not isinstance(payload, list):
        raise ImportFormatError("Invalid JSON format: expected a list of workouts")

    merger = _BatchMerger(existing_records)

    for item in payload:
        try:
            record = _parse_json_item(item)
        except _RowError as e:
            merger.error(str(e))
            continue
        merger.add(record)

    logger.info("JSON import: %s", merger.result.summary())
    return merger.result
