"""Statistics commands: dashboard, year comparison and calendar."""

from datetime import date

import click

from ..services.comparison import compare_years
from ..services.stats import format_avg
from ..services.views import (
    available_years,
    calendar_month,
    dashboard_summary,
    default_comparison_years,
    default_dashboard_year,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_table,
    get_workout_log,
)

BAR_WIDTH = 30


def render_chart(title: str, data: dict[str, int]) -> str:
    """Horizontal bar chart of a count table."""
    peak = max([*data.values(), 1])
    label_width = max(len(label) for label in data)

    lines = [click.style(title, bold=True)]
    for label, count in data.items():
        bar = "#" * round(count / peak * BAR_WIDTH)
        lines.append(f"  {label.ljust(label_width)}  {str(count).rjust(4)}  {bar}")
    return "\n".join(lines)


def _signed(delta: int) -> str:
    text = f"+{delta}" if delta > 0 else str(delta)
    if delta > 0:
        return click.style(text, fg="green")
    if delta < 0:
        return click.style(text, fg="red")
    return text


@click.command()
@click.option("--year", "-y", type=int, help="Year to show (default: current or latest)")
@click.pass_context
@async_command
async def dashboard(ctx: click.Context, year: int | None):
    """Show totals and breakdowns for one year."""
    ensure_initialized(ctx)

    records = await get_workout_log().load_all()
    today = date.today()

    if year is None:
        year = default_dashboard_year(available_years(records), today)
    if year is None:
        echo_info("No workouts yet. Log your first workout!")
        return

    summary = dashboard_summary(records, year, today)

    click.echo()
    click.echo(click.style(f"Dashboard {year}", bold=True))
    click.echo("=" * 50)
    if summary.is_current_year:
        click.echo(f"Total (YTD):        {summary.total}")
        click.echo(f"Avg Per Week (YTD): {format_avg(summary.avg_per_week)}")
        click.echo(f"This Week:          {summary.this_week}")
        click.echo(f"This Month:         {summary.this_month}")
    else:
        click.echo(f"Total:        {summary.total}")
        click.echo(f"Avg Per Week: {format_avg(summary.avg_per_week)}")

    for title, table in summary.stats.tables():
        click.echo()
        click.echo(render_chart(title, table))


@click.command()
@click.argument("year_a", type=int, required=False)
@click.argument("year_b", type=int, required=False)
@click.pass_context
@async_command
async def compare(ctx: click.Context, year_a: int | None, year_b: int | None):
    """Compare two years side by side.

    When one of the years is the current year, both years are compared up
    to today's month and day.

    Examples:
        # Current year against last year
        workout-log compare

        workout-log compare 2024 2023
    """
    ensure_initialized(ctx)

    records = await get_workout_log().load_all()
    today = date.today()

    if year_a is None or year_b is None:
        defaults = default_comparison_years(available_years(records), today)
        if defaults is None:
            echo_info("No data to compare")
            return
        year_a = year_a if year_a is not None else defaults[0]
        year_b = year_b if year_b is not None else defaults[1]

    report = compare_years(records, year_a, year_b, today)

    if report.ytd:
        click.echo()
        echo_info("Comparing year-to-date (YTD)")

    for section in report.sections:
        rows = [
            [row.label, str(row.value_a), str(row.value_b), _signed(row.delta)]
            for row in section.rows
        ]
        click.echo()
        click.echo(click.style(section.title, bold=True))
        click.echo(format_table(["", str(year_a), str(year_b), "Delta"], rows))


@click.command(name="calendar")
@click.option("--year", "-y", type=int, help="Year (default: current)")
@click.option("--month", "-m", type=click.IntRange(1, 12), help="Month 1-12 (default: current)")
@click.pass_context
@async_command
async def calendar_cmd(ctx: click.Context, year: int | None, month: int | None):
    """Show a month calendar; days with workouts are marked with '*'."""
    ensure_initialized(ctx)

    today = date.today()
    try:
        view = calendar_month(
            await get_workout_log().load_all(),
            year or today.year,
            month or today.month,
            today,
        )
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    click.echo()
    click.echo(click.style(view.label, bold=True))
    click.echo(" ".join(d.rjust(4) for d in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]))
    for week in view.weeks():
        cells = []
        for cell in week:
            if cell is None:
                cells.append("    ")
                continue
            mark = "*" if cell.has_workouts else " "
            text = f"{cell.day}{mark}".rjust(4)
            cells.append(click.style(text, bold=True) if cell.is_today else text)
        click.echo(" ".join(cells))
