"""Result types returned by the statistics, import and comparison services."""

from dataclasses import dataclass, field

from .workout import (
    MONTH_LABELS,
    QUARTER_LABELS,
    WEEKDAY_LABELS,
    CardioSub,
    Category,
    GymSub,
    WorkoutRecord,
)


def _seeded(labels) -> dict[str, int]:
    return {label: 0 for label in labels}


@dataclass
class StatsReport:
    """Count tables for a collection of workouts.

    Every table is pre-seeded with zero for each label of its vocabulary,
    so the key set never depends on the input.
    """

    total: int = 0
    categories: dict[str, int] = field(
        default_factory=lambda: _seeded(Category.labels())
    )
    gym_subs: dict[str, int] = field(default_factory=lambda: _seeded(GymSub.labels()))
    cardio_subs: dict[str, int] = field(
        default_factory=lambda: _seeded(CardioSub.labels())
    )
    weekdays: dict[str, int] = field(default_factory=lambda: _seeded(WEEKDAY_LABELS))
    months: dict[str, int] = field(default_factory=lambda: _seeded(MONTH_LABELS))
    quarters: dict[str, int] = field(default_factory=lambda: _seeded(QUARTER_LABELS))

    def tables(self) -> list[tuple[str, dict[str, int]]]:
        """Count tables paired with their display titles."""
        return [
            ("Top-Level Categories", self.categories),
            ("Gym Subcategories", self.gym_subs),
            ("Cardio Subcategories", self.cardio_subs),
            ("By Day of Week", self.weekdays),
            ("By Month", self.months),
            ("By Quarter", self.quarters),
        ]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "categories": dict(self.categories),
            "gym_subs": dict(self.gym_subs),
            "cardio_subs": dict(self.cardio_subs),
            "weekdays": dict(self.weekdays),
            "months": dict(self.months),
            "quarters": dict(self.quarters),
        }


@dataclass
class ImportResult:
    """Outcome of an import batch.

    The caller merges `imported_records` into its collection and persists it.
    """

    imported_records: list[WorkoutRecord] = field(default_factory=list)
    imported: int = 0
    duplicates: int = 0
    errors: int = 0

    def summary(self) -> str:
        """Human-readable status line."""
        msg = f"Imported {self.imported} workout(s)"
        if self.duplicates > 0:
            msg += f", {self.duplicates} duplicate(s) skipped"
        if self.errors > 0:
            msg += f", {self.errors} error(s)"
        return msg

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "imported": self.imported,
            "duplicates": self.duplicates,
            "errors": self.errors,
            "message": self.summary(),
        }


@dataclass
class ComparisonRow:
    """One label compared across two years."""

    label: str
    value_a: int
    value_b: int

    @property
    def delta(self) -> int:
        return self.value_a - self.value_b

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "value_a": self.value_a,
            "value_b": self.value_b,
            "delta": self.delta,
        }


@dataclass
class ComparisonSection:
    """A titled group of comparison rows."""

    title: str
    rows: list[ComparisonRow] = field(default_factory=list)

    def row(self, label: str) -> ComparisonRow | None:
        """Get a row by label."""
        for row in self.rows:
            if row.label == label:
                return row
        return None

    def to_dict(self) -> dict:
        return {"title": self.title, "rows": [r.to_dict() for r in self.rows]}


@dataclass
class ComparisonReport:
    """Per-label deltas between two years of workouts."""

    year_a: int
    year_b: int
    ytd: bool
    sections: list[ComparisonSection] = field(default_factory=list)

    def section(self, title: str) -> ComparisonSection | None:
        """Get a section by title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None

    @property
    def total(self) -> ComparisonRow:
        """The synthetic total-workouts row."""
        return self.sections[0].rows[0]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "year_a": self.year_a,
            "year_b": self.year_b,
            "ytd": self.ytd,
            "sections": [s.to_dict() for s in self.sections],
        }
