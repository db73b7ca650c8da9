"""Import and export routes."""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse, Response

from ...errors import ImportFormatError
from ...services.workout_log import WorkoutLog, export_filename
from ..dependencies import get_workout_log

router = APIRouter(prefix="/data", tags=["data"])


@router.post("/import/csv")
async def import_csv(
    file: UploadFile = File(...), log: WorkoutLog = Depends(get_workout_log)
):
    """Import workouts from an uploaded CSV file."""
    content = await file.read()
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return JSONResponse({"error": "CSV must be UTF-8 text"}, status_code=400)

    if not text.strip():
        return JSONResponse({"error": "Empty CSV"}, status_code=400)

    result = await log.import_delimited(text)
    return result.to_dict()


@router.post("/import/json")
async def import_json(
    file: UploadFile = File(...), log: WorkoutLog = Depends(get_workout_log)
):
    """Import workouts from an uploaded JSON export."""
    content = await file.read()
    try:
        result = await log.import_structured(content)
    except ImportFormatError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return result.to_dict()


@router.get("/export")
async def export(log: WorkoutLog = Depends(get_workout_log)):
    """Download every workout as a JSON file."""
    return Response(
        content=await log.export_json(),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )
