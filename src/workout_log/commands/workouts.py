"""Workout logging and listing commands."""

from datetime import date

import click

from ..errors import RecordValidationError
from ..models.workout import CardioSub, Category, GymSub
from ..services.views import history as sorted_history
from ..services.views import recent_workouts, workouts_on
from ..utils.dates import format_date, is_iso_date, to_iso
from .base import (
    WORKOUT_HEADERS,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    get_workout_log,
    workout_rows,
)


@click.command()
@click.option(
    "--date",
    "-d",
    "workout_date",
    help="Workout date as YYYY-MM-DD (default: today)",
)
@click.option(
    "--category",
    "-c",
    "categories",
    multiple=True,
    type=click.Choice(Category.labels()),
    help="Category (repeatable)",
)
@click.option(
    "--gym",
    "-g",
    "gym_subs",
    multiple=True,
    type=click.Choice(GymSub.labels()),
    help="Gym sub-category (repeatable, needs -c Gym)",
)
@click.option(
    "--cardio",
    "cardio_subs",
    multiple=True,
    type=click.Choice(CardioSub.labels()),
    help="Cardio sub-category (repeatable, needs -c Cardio)",
)
@click.option("--notes", "-n", default="", help="Free-text notes")
@click.pass_context
@async_command
async def log(
    ctx: click.Context,
    workout_date: str | None,
    categories: tuple[str, ...],
    gym_subs: tuple[str, ...],
    cardio_subs: tuple[str, ...],
    notes: str,
):
    """Log a workout.

    Without --category an interactive questionnaire asks for the details.

    Examples:

        # Interactive
        workout-log log

        # Leg day today
        workout-log log -c Gym -g Legs

        # A run and a yoga class last Sunday
        workout-log log -d 2024-01-14 -c Cardio -c Yoga --cardio Run
    """
    ensure_initialized(ctx)

    if not categories:
        from ..clients.manual import ManualEntryClient

        entry = await ManualEntryClient().collect_entry()
        if entry is None:
            echo_info("Cancelled")
            return

        workout_date = entry.date
        categories = tuple(entry.categories)
        gym_subs = tuple(entry.gym_subs)
        cardio_subs = tuple(entry.cardio_subs)
        notes = entry.notes

    if workout_date is None:
        workout_date = to_iso(date.today())

    if gym_subs and Category.GYM.value not in categories:
        echo_warning("Gym sub-categories ignored without the Gym category")
    if cardio_subs and Category.CARDIO.value not in categories:
        echo_warning("Cardio sub-categories ignored without the Cardio category")

    try:
        record = await get_workout_log().add_record(
            date=workout_date,
            categories=categories,
            gym_subs=gym_subs,
            cardio_subs=cardio_subs,
            notes=notes,
        )
    except RecordValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Workout saved with ID: {record.id}")


@click.command()
@click.argument("workout_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, workout_id: str, yes: bool):
    """Delete a workout by ID."""
    ensure_initialized(ctx)

    if not yes and not click.confirm("Delete this workout?"):
        return

    if not await get_workout_log().delete_record(workout_id):
        echo_error(f"Workout ID {workout_id} not found")
        ctx.exit(1)

    echo_success(f"Deleted workout {workout_id}")


@click.command()
@click.option(
    "--limit",
    "-l",
    default=5,
    type=click.IntRange(min=1),
    help="Number of workouts to show",
)
@click.pass_context
@async_command
async def recent(ctx: click.Context, limit: int):
    """Show the most recent workouts."""
    ensure_initialized(ctx)

    records = await get_workout_log().load_all()
    if not records:
        echo_info("No workouts yet. Log your first workout!")
        return

    click.echo()
    click.echo(format_table(WORKOUT_HEADERS, workout_rows(recent_workouts(records, limit))))


@click.command()
@click.pass_context
@async_command
async def history(ctx: click.Context):
    """Show every workout, newest first."""
    ensure_initialized(ctx)

    records = await get_workout_log().load_all()
    if not records:
        echo_info("No workouts yet")
        return

    click.echo()
    click.echo(format_table(WORKOUT_HEADERS, workout_rows(sorted_history(records))))
    click.echo()
    click.echo(f"Total: {len(records)} workout(s)")


@click.command()
@click.argument("day")
@click.pass_context
@async_command
async def day(ctx: click.Context, day: str):
    """Show the workouts of one day (YYYY-MM-DD)."""
    ensure_initialized(ctx)

    if not is_iso_date(day):
        echo_error(f"Invalid date {day!r}, expected YYYY-MM-DD")
        ctx.exit(1)

    records = workouts_on(await get_workout_log().load_all(), day)

    click.echo()
    click.echo(click.style(format_date(day), bold=True))
    if not records:
        echo_info("No workouts on this day")
        return
    click.echo(format_table(WORKOUT_HEADERS, workout_rows(records)))
