"""CLI entry point for workout-log."""

import logging

import click

from . import __version__
from .commands import (
    calendar_cmd,
    compare,
    dashboard,
    day,
    delete,
    export,
    history,
    import_data,
    init,
    log,
    recent,
    serve,
)


@click.group()
@click.version_option(version=__version__, prog_name="workout-log")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """workout-log: Personal Workout Log.

    Log workouts by category, import and export your history, and see
    dashboards and year-over-year comparisons.

    Example usage:

        # Initialize the project
        workout-log init

        # Log a workout
        workout-log log -c Gym -g Chest

        # Import existing data
        workout-log import csv workouts.csv

        # See how this year compares to last year
        workout-log compare
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(log)
main.add_command(delete)
main.add_command(recent)
main.add_command(history)
main.add_command(day)
main.add_command(import_data)
main.add_command(export)
main.add_command(dashboard)
main.add_command(compare)
main.add_command(calendar_cmd)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
