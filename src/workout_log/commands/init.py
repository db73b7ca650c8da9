"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the workout-log data directory and database.

    This creates the data directory and the SQLite database that holds
    your workouts. Running it again is safe.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing workout-log in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("workout-log is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Log a workout:")
    click.echo("     workout-log log                       # Interactive")
    click.echo("     workout-log log -c Gym -g Chest -g Back")
    click.echo()
    click.echo("  2. Or import existing data:")
    click.echo("     workout-log import csv workouts.csv")
    click.echo("     workout-log import json workouts-2024-01-01.json")
