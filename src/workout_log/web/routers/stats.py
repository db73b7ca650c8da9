"""Dashboard, comparison and calendar routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...services.comparison import compare_years
from ...services.views import (
    available_years,
    calendar_month,
    dashboard_summary,
    default_comparison_years,
    default_dashboard_year,
)
from ...services.workout_log import WorkoutLog
from ..dependencies import get_workout_log

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/years")
async def years(log: WorkoutLog = Depends(get_workout_log)):
    """Years that have workouts, newest first."""
    return {"years": available_years(await log.load_all())}


@router.get("/dashboard")
async def dashboard(
    year: int | None = None, log: WorkoutLog = Depends(get_workout_log)
):
    """Totals and count tables for one year."""
    records = await log.load_all()
    today = date.today()

    if year is None:
        year = default_dashboard_year(available_years(records), today)
    if year is None:
        return JSONResponse({"error": "No workouts yet"}, status_code=404)

    return dashboard_summary(records, year, today).to_dict()


@router.get("/compare")
async def compare(
    year_a: int | None = None,
    year_b: int | None = None,
    log: WorkoutLog = Depends(get_workout_log),
):
    """Year-over-year comparison, year-to-date when the current year is involved."""
    records = await log.load_all()
    today = date.today()

    if year_a is None or year_b is None:
        defaults = default_comparison_years(available_years(records), today)
        if defaults is None:
            return JSONResponse({"error": "No data to compare"}, status_code=404)
        year_a = year_a if year_a is not None else defaults[0]
        year_b = year_b if year_b is not None else defaults[1]

    return compare_years(records, year_a, year_b, today).to_dict()


@router.get("/calendar")
async def calendar(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    selected: str | None = None,
    log: WorkoutLog = Depends(get_workout_log),
):
    """One month laid out Monday-first with per-day workout counts."""
    today = date.today()
    view = calendar_month(
        await log.load_all(),
        year or today.year,
        month or today.month,
        today,
        selected=selected,
    )
    return view.to_dict()
