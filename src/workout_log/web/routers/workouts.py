"""Workout entry and listing routes."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ...errors import RecordValidationError
from ...services.views import history, recent_workouts, workouts_on
from ...services.workout_log import WorkoutLog
from ...utils.dates import format_date, is_iso_date
from ..dependencies import get_workout_log

router = APIRouter(prefix="/workouts", tags=["workouts"])


class WorkoutIn(BaseModel):
    """Body of a new workout, in the same shape the API returns."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    categories: list[str]
    gym_subs: list[str] = Field(default_factory=list, alias="gymSubs")
    cardio_subs: list[str] = Field(default_factory=list, alias="cardioSubs")
    notes: str = ""


@router.get("")
async def list_workouts(log: WorkoutLog = Depends(get_workout_log)):
    """All workouts, newest first."""
    return [r.to_dict() for r in history(await log.load_all())]


@router.get("/recent")
async def list_recent(
    limit: int = Query(5, ge=1), log: WorkoutLog = Depends(get_workout_log)
):
    """The most recent workouts."""
    return [r.to_dict() for r in recent_workouts(await log.load_all(), limit)]


@router.get("/day/{day}")
async def day_details(day: str, log: WorkoutLog = Depends(get_workout_log)):
    """Workouts logged on one date."""
    if not is_iso_date(day):
        return JSONResponse({"error": f"Invalid date {day!r}"}, status_code=400)

    return {
        "date": day,
        "label": format_date(day),
        "workouts": [r.to_dict() for r in workouts_on(await log.load_all(), day)],
    }


@router.post("", status_code=201)
async def create_workout(body: WorkoutIn, log: WorkoutLog = Depends(get_workout_log)):
    """Log a new workout."""
    try:
        record = await log.add_record(
            date=body.date,
            categories=body.categories,
            gym_subs=body.gym_subs,
            cardio_subs=body.cardio_subs,
            notes=body.notes,
        )
    except RecordValidationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return record.to_dict()


@router.delete("/{workout_id}")
async def delete_workout(workout_id: str, log: WorkoutLog = Depends(get_workout_log)):
    """Delete a workout."""
    if not await log.delete_record(workout_id):
        return JSONResponse({"error": "Workout not found"}, status_code=404)

    return {"status": "deleted", "id": workout_id}
