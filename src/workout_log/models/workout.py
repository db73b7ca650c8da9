"""Workout record model and tag vocabularies."""

import random
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

FINGERPRINT_SEPARATOR = "::"
TAG_SEPARATOR = "|"

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class VocabularyTag(str, Enum):
    """Base for closed tag vocabularies."""

    @classmethod
    def parse(cls, label: str):
        """Return the member for a label, or None if the label is unknown."""
        try:
            return cls(label)
        except ValueError:
            return None

    @classmethod
    def labels(cls) -> list[str]:
        """All labels in vocabulary order."""
        return [member.value for member in cls]


class Category(VocabularyTag):
    """Top-level workout categories."""

    GYM = "Gym"
    CARDIO = "Cardio"
    HIIT = "HIIT"
    YOGA = "Yoga"
    PILATES = "Pilates"
    OTHER = "Other"


class GymSub(VocabularyTag):
    """Gym sub-categories (muscle groups trained)."""

    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    ARMS = "Arms"
    ABS = "Abs"


class CardioSub(VocabularyTag):
    """Cardio sub-categories."""

    RUN = "Run"
    STAIRS = "Stairs"
    BIKE = "Bike"
    WALK = "Walk"


WEEKDAY_LABELS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
QUARTER_LABELS = ("Q1", "Q2", "Q3", "Q4")


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def now_millis() -> int:
    """Current instant in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_id() -> str:
    """Generate an opaque workout id.

    A base-36 millisecond timestamp followed by a random base-36 suffix,
    so ids created in the same millisecond still differ.
    """
    suffix = "".join(random.choice(_BASE36) for _ in range(11))
    return _to_base36(now_millis()) + suffix


@dataclass
class WorkoutRecord:
    """A single logged workout.

    Records are never edited after creation; they are only added or deleted.
    """

    date: str  # YYYY-MM-DD
    categories: list[str]
    gym_subs: list[str] = field(default_factory=list)
    cardio_subs: list[str] = field(default_factory=list)
    notes: str = ""
    id: str = field(default_factory=generate_id)
    timestamp: int = field(default_factory=now_millis)

    @property
    def fingerprint(self) -> str:
        """Duplicate-detection key for this record."""
        return fingerprint(self)

    @property
    def tags(self) -> list[str]:
        """All tags in display order: categories first, then sub-tags."""
        return [*self.categories, *self.gym_subs, *self.cardio_subs]

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            "id": self.id,
            "date": self.date,
            "categories": list(self.categories),
            "gymSubs": list(self.gym_subs),
            "cardioSubs": list(self.cardio_subs),
            "notes": self.notes,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "WorkoutRecord":
        """Create from the persisted JSON shape, defaulting optional fields."""
        return cls(
            id=data.get("id") or generate_id(),
            date=data["date"],
            categories=list(data.get("categories") or []),
            gym_subs=list(data.get("gymSubs") or []),
            cardio_subs=list(data.get("cardioSubs") or []),
            notes=data.get("notes") or "",
            timestamp=data.get("timestamp") or 0,
        )


def fingerprint(record: "WorkoutRecord | Mapping") -> str:
    """Build the stable duplicate-detection key of a workout.

    Tag lists are sorted before joining, so element order does not matter.
    The id and timestamp are not part of the key: two entries with the same
    date, tags and notes are the same workout.
    """
    if isinstance(record, Mapping):
        date = record.get("date", "")
        categories = record.get("categories") or []
        gym_subs = record.get("gymSubs") or []
        cardio_subs = record.get("cardioSubs") or []
        notes = record.get("notes") or ""
    else:
        date = record.date
        categories = record.categories
        gym_subs = record.gym_subs
        cardio_subs = record.cardio_subs
        notes = record.notes or ""

    return FINGERPRINT_SEPARATOR.join(
        [
            date,
            TAG_SEPARATOR.join(sorted(categories)),
            TAG_SEPARATOR.join(sorted(gym_subs)),
            TAG_SEPARATOR.join(sorted(cardio_subs)),
            notes,
        ]
    )
