"""Tests for data models."""

import pytest

from workout_log.models.workout import (
    CardioSub,
    Category,
    GymSub,
    WorkoutRecord,
    fingerprint,
    generate_id,
)


class TestVocabulary:
    """Tests for the closed tag vocabularies."""

    def test_parse_known_label(self):
        """Test known labels map to members."""
        assert Category.parse("Gym") is Category.GYM
        assert GymSub.parse("Abs") is GymSub.ABS
        assert CardioSub.parse("Stairs") is CardioSub.STAIRS

    def test_parse_unknown_label(self):
        """Test unknown labels parse to None instead of raising."""
        assert Category.parse("Swimming") is None
        assert Category.parse("gym") is None
        assert GymSub.parse("Run") is None

    def test_labels_in_order(self):
        """Test labels keep vocabulary order."""
        assert Category.labels() == ["Gym", "Cardio", "HIIT", "Yoga", "Pilates", "Other"]
        assert GymSub.labels() == ["Chest", "Back", "Legs", "Arms", "Abs"]
        assert CardioSub.labels() == ["Run", "Stairs", "Bike", "Walk"]


class TestGenerateId:
    """Tests for generate_id."""

    def test_ids_are_distinct(self):
        """Test many ids generated in a row never collide."""
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_id_is_base36(self):
        """Test ids only use lowercase base-36 digits."""
        assert all(c in "0123456789abcdefghijklmnopqrstuvwxyz" for c in generate_id())


class TestFingerprint:
    """Tests for duplicate-detection fingerprints."""

    def test_category_order_does_not_matter(self):
        """Test tag order is irrelevant."""
        a = WorkoutRecord(date="2024-01-01", categories=["Gym", "HIIT"])
        b = WorkoutRecord(date="2024-01-01", categories=["HIIT", "Gym"])
        assert fingerprint(a) == fingerprint(b)

    def test_sub_tag_order_does_not_matter(self):
        """Test sub-tag order is irrelevant."""
        a = WorkoutRecord(date="2024-01-01", categories=["Gym"], gym_subs=["Legs", "Arms"])
        b = WorkoutRecord(date="2024-01-01", categories=["Gym"], gym_subs=["Arms", "Legs"])
        assert fingerprint(a) == fingerprint(b)

    def test_id_and_timestamp_ignored(self):
        """Test two separate entries with the same content are duplicates."""
        a = WorkoutRecord(id="x", timestamp=1, date="2024-01-01", categories=["Yoga"])
        b = WorkoutRecord(id="y", timestamp=2, date="2024-01-01", categories=["Yoga"])
        assert fingerprint(a) == fingerprint(b)

    def test_notes_and_date_matter(self):
        """Test notes and date are part of the key."""
        base = WorkoutRecord(date="2024-01-01", categories=["Yoga"])
        assert fingerprint(base) != fingerprint(
            WorkoutRecord(date="2024-01-01", categories=["Yoga"], notes="hot")
        )
        assert fingerprint(base) != fingerprint(
            WorkoutRecord(date="2024-01-02", categories=["Yoga"])
        )

    def test_format(self):
        """Test the key layout."""
        record = WorkoutRecord(
            date="2024-01-15",
            categories=["Gym", "Cardio"],
            gym_subs=["Chest", "Back"],
            cardio_subs=["Run"],
            notes="leg day",
        )
        assert fingerprint(record) == "2024-01-15::Cardio|Gym::Back|Chest::Run::leg day"

    def test_does_not_reorder_record(self):
        """Test computing the key leaves the record untouched."""
        record = WorkoutRecord(date="2024-01-01", categories=["Yoga", "Gym"])
        fingerprint(record)
        assert record.categories == ["Yoga", "Gym"]

    def test_mapping_matches_record(self):
        """Test a stored dict and its record share a fingerprint."""
        record = WorkoutRecord(
            date="2024-01-01", categories=["Gym"], gym_subs=["Abs"], notes="core"
        )
        assert fingerprint(record.to_dict()) == record.fingerprint


class TestWorkoutRecord:
    """Tests for WorkoutRecord serialization."""

    def test_to_dict_uses_stored_field_names(self):
        """Test serialization keeps the export field names."""
        record = WorkoutRecord(
            id="abc",
            date="2024-01-15",
            categories=["Gym"],
            gym_subs=["Chest"],
            timestamp=1700000000000,
        )
        assert record.to_dict() == {
            "id": "abc",
            "date": "2024-01-15",
            "categories": ["Gym"],
            "gymSubs": ["Chest"],
            "cardioSubs": [],
            "notes": "",
            "timestamp": 1700000000000,
        }

    def test_from_dict_defaults_missing_fields(self):
        """Test older entries without sub-tags or notes still load."""
        record = WorkoutRecord.from_dict(
            {"id": "old", "date": "2023-05-01", "categories": ["Cardio"], "timestamp": 5}
        )
        assert record.gym_subs == []
        assert record.cardio_subs == []
        assert record.notes == ""
        assert record.id == "old"

    def test_from_dict_requires_date(self):
        """Test a stored entry without a date is rejected."""
        with pytest.raises(KeyError):
            WorkoutRecord.from_dict({"categories": ["Gym"]})

    def test_tags(self):
        """Test tags list categories before sub-tags."""
        record = WorkoutRecord(
            date="2024-01-15",
            categories=["Gym", "Cardio"],
            gym_subs=["Chest"],
            cardio_subs=["Run"],
        )
        assert record.tags == ["Gym", "Cardio", "Chest", "Run"]
