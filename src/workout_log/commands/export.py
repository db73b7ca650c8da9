"""Export workouts command."""

from pathlib import Path

import click

from ..services.workout_log import export_filename
from .base import async_command, echo_success, ensure_initialized, get_workout_log


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file instead of workouts-<date>.json",
)
@click.option("--stdout", is_flag=True, help="Print to stdout instead of a file")
@click.pass_context
@async_command
async def export(ctx, output: Path | None, stdout: bool):
    """Export all workouts as JSON.

    The export can be imported again with 'workout-log import json'.

    Examples:
        # Save to workouts-<today>.json
        workout-log export

        # Save to a specific file
        workout-log export -o backup.json

        # Print
        workout-log export --stdout
    """
    ensure_initialized(ctx)

    content = await get_workout_log().export_json()

    if stdout:
        click.echo(content)
        return

    if output is None:
        output = Path(export_filename())

    output.write_text(content, encoding="utf-8")
    echo_success(f"Exported to {output}")
