"""Import workout data commands."""

from pathlib import Path

import click

from ..errors import ImportFormatError
from ..models.reports import ImportResult
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    get_workout_log,
)


def _report(result: ImportResult) -> None:
    if result.imported > 0:
        echo_success(result.summary())
    else:
        echo_warning(result.summary())


@click.group(name="import")
@click.pass_context
def import_data(ctx):
    """Import workouts from files.

    Available sources:
    - csv: date,categories,gymSubs,cardioSubs,notes rows
    - json: an export written by 'workout-log export'

    Workouts already in the log (same date, tags and notes) are skipped.
    """
    ensure_initialized(ctx)


@import_data.command(name="csv")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def import_csv(ctx, path: Path):
    """Import workouts from a CSV file.

    Tags inside a column are separated by '|', for example:

        date,categories,gymSubs,cardioSubs,notes
        2024-01-15,Gym|Cardio,Chest|Back,Run,leg day

    Example:
        workout-log import csv workouts.csv
    """
    echo_info(f"Importing CSV: {path}")

    text = path.read_text(encoding="utf-8-sig")
    if not text.strip():
        echo_error("Empty CSV")
        ctx.exit(1)

    _report(await get_workout_log().import_delimited(text))


@import_data.command(name="json")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def import_json(ctx, path: Path):
    """Import workouts from a JSON export.

    Example:
        workout-log import json workouts-2024-01-01.json
    """
    echo_info(f"Importing JSON: {path}")

    try:
        result = await get_workout_log().import_structured(
            path.read_text(encoding="utf-8-sig")
        )
    except ImportFormatError as e:
        echo_error(str(e))
        ctx.exit(1)

    _report(result)
