"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import SQLiteWorkoutStore, get_db_path
from ..models.workout import WorkoutRecord
from ..services.workout_log import WorkoutLog
from ..utils.dates import format_date


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'workout-log init' first."
        )
        ctx.exit(1)


def get_workout_log() -> WorkoutLog:
    """Workout log backed by the configured database."""
    return WorkoutLog(SQLiteWorkoutStore(get_db_path()))


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_tags(record: WorkoutRecord) -> str:
    """Categories followed by sub-categories, comma separated."""
    return ", ".join(record.tags)


def workout_rows(records: list[WorkoutRecord]) -> list[list[str]]:
    """Table rows for a list of workouts."""
    return [[r.id, format_date(r.date), format_tags(r), r.notes] for r in records]


WORKOUT_HEADERS = ["ID", "Date", "Tags", "Notes"]


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
