"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from workout_log.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner with an isolated data directory."""
    monkeypatch.setenv("WORKOUT_LOG_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


def test_requires_init(runner):
    """Test commands refuse to run before init."""
    result = runner.invoke(main, ["recent"])

    assert result.exit_code == 1
    assert "not initialized" in result.output


def test_log_and_list(initialized):
    """Test logging a workout and listing it."""
    result = initialized.invoke(
        main, ["log", "-d", "2024-01-15", "-c", "Gym", "-g", "Chest", "-n", "bench"]
    )
    assert result.exit_code == 0, result.output
    assert "Workout saved" in result.output

    result = initialized.invoke(main, ["recent"])
    assert "Mon, Jan 15, 2024" in result.output
    assert "Gym, Chest" in result.output

    result = initialized.invoke(main, ["history"])
    assert "Total: 1 workout(s)" in result.output


def test_log_rejects_bad_date(initialized):
    """Test an invalid date fails with an error."""
    result = initialized.invoke(main, ["log", "-d", "2024-02-30", "-c", "Yoga"])

    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_log_warns_about_orphan_sub_tags(initialized):
    """Test sub-tags without their category are reported."""
    result = initialized.invoke(main, ["log", "-d", "2024-01-15", "-c", "Yoga", "-g", "Legs"])

    assert result.exit_code == 0
    assert "Gym sub-categories ignored" in result.output


def test_import_csv_twice(initialized, tmp_path):
    """Test a second import of the same file only reports duplicates."""
    csv_path = tmp_path / "workouts.csv"
    csv_path.write_text("date,categories\n2024-01-15,Gym\n2024-01-16,Yoga\nbad,Gym\n")

    first = initialized.invoke(main, ["import", "csv", str(csv_path)])
    assert "Imported 2 workout(s), 1 error(s)" in first.output

    second = initialized.invoke(main, ["import", "csv", str(csv_path)])
    assert "Imported 0 workout(s), 2 duplicate(s) skipped, 1 error(s)" in second.output


def test_import_json_format_error(initialized, tmp_path):
    """Test a non-list JSON file fails."""
    json_path = tmp_path / "bad.json"
    json_path.write_text('"not an array"')

    result = initialized.invoke(main, ["import", "json", str(json_path)])

    assert result.exit_code == 1
    assert "Invalid JSON format" in result.output


def test_export_and_delete(initialized):
    """Test exporting and then deleting a workout by id."""
    initialized.invoke(main, ["log", "-d", "2024-01-15", "-c", "HIIT"])

    result = initialized.invoke(main, ["export", "--stdout"])
    workouts = json.loads(result.output)
    assert workouts[0]["categories"] == ["HIIT"]

    workout_id = workouts[0]["id"]
    result = initialized.invoke(main, ["delete", "-y", workout_id])
    assert result.exit_code == 0
    assert "Deleted" in result.output

    result = initialized.invoke(main, ["delete", "-y", workout_id])
    assert result.exit_code == 1


def test_export_to_file(initialized, tmp_path):
    """Test the export is written to the given file."""
    initialized.invoke(main, ["log", "-d", "2024-01-15", "-c", "HIIT"])

    out = tmp_path / "backup.json"
    result = initialized.invoke(main, ["export", "-o", str(out)])

    assert result.exit_code == 0
    assert len(json.loads(out.read_text())) == 1


def test_dashboard_and_compare(initialized):
    """Test the dashboard and comparison output."""
    initialized.invoke(main, ["log", "-d", "2022-03-01", "-c", "Gym"])
    initialized.invoke(main, ["log", "-d", "2021-03-01", "-c", "Gym"])
    initialized.invoke(main, ["log", "-d", "2021-03-02", "-c", "Yoga"])

    result = initialized.invoke(main, ["dashboard", "--year", "2021"])
    assert result.exit_code == 0, result.output
    assert "Total:        2" in result.output
    assert "Top-Level Categories" in result.output

    result = initialized.invoke(main, ["compare", "2022", "2021"])
    assert result.exit_code == 0, result.output
    assert "Total Workouts" in result.output
    assert "By Quarter" in result.output


def test_calendar(initialized):
    """Test the month grid marks workout days."""
    initialized.invoke(main, ["log", "-d", "2024-01-15", "-c", "Gym"])

    result = initialized.invoke(main, ["calendar", "--year", "2024", "--month", "1"])

    assert result.exit_code == 0
    assert "January 2024" in result.output
    assert "15*" in result.output


def test_day(initialized):
    """Test day details."""
    initialized.invoke(main, ["log", "-d", "2024-01-15", "-c", "Pilates"])

    result = initialized.invoke(main, ["day", "2024-01-15"])
    assert "Pilates" in result.output

    result = initialized.invoke(main, ["day", "2024-01-16"])
    assert "No workouts on this day" in result.output


class _Answer:
    """Stand-in for a questionary question with a fixed answer."""

    def __init__(self, value):
        self.value = value

    async def ask_async(self):
        return self.value


@pytest.fixture
def answers(monkeypatch):
    """Queue answers for the interactive questionnaire, in prompt order."""
    queue = []

    def ask(*args, **kwargs):
        return _Answer(queue.pop(0))

    monkeypatch.setattr("questionary.text", ask)
    monkeypatch.setattr("questionary.checkbox", ask)
    return queue


def test_log_interactive(initialized, answers):
    """Test logging a workout through the questionnaire."""
    answers.extend(["2024-01-15", ["Gym", "Cardio"], ["Legs"], ["Run"], "brick"])

    result = initialized.invoke(main, ["log"])
    assert result.exit_code == 0, result.output
    assert "Workout saved" in result.output
    assert answers == []

    exported = json.loads(initialized.invoke(main, ["export", "--stdout"]).output)
    assert exported[0]["gymSubs"] == ["Legs"]
    assert exported[0]["cardioSubs"] == ["Run"]
    assert exported[0]["notes"] == "brick"


@pytest.mark.parametrize(
    "given",
    [
        [None],
        ["2024-01-15", None],
        ["2024-01-15", ["Gym"], None],
        ["2024-01-15", ["Yoga"], None],
    ],
)
def test_log_interactive_cancelled(initialized, answers, given):
    """Test cancelling any prompt saves nothing and exits cleanly."""
    answers.extend(given)

    result = initialized.invoke(main, ["log"])
    assert result.exit_code == 0, result.output
    assert "Cancelled" in result.output

    result = initialized.invoke(main, ["history"])
    assert "No workouts yet" in result.output


def test_import_files_with_byte_order_mark(initialized, tmp_path):
    """Test UTF-8 files with a BOM import like plain UTF-8."""
    csv_path = tmp_path / "bom.csv"
    csv_path.write_bytes("2024-01-15,Gym\n".encode("utf-8-sig"))
    result = initialized.invoke(main, ["import", "csv", str(csv_path)])
    assert "Imported 1 workout(s)" in result.output

    json_path = tmp_path / "bom.json"
    json_path.write_bytes(
        json.dumps([{"date": "2024-01-16", "categories": ["Yoga"]}]).encode("utf-8-sig")
    )
    result = initialized.invoke(main, ["import", "json", str(json_path)])
    assert result.exit_code == 0, result.output
    assert "Imported 1 workout(s)" in result.output


def test_recent_rejects_non_positive_limit(initialized):
    """Test --limit must be at least 1."""
    result = initialized.invoke(main, ["recent", "--limit", "-1"])

    assert result.exit_code == 2
