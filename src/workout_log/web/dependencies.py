"""Request-scoped helpers shared by the routers."""

from fastapi import Request

from ..services.workout_log import WorkoutLog


def get_workout_log(request: Request) -> WorkoutLog:
    """Get the workout log bound to the app's store."""
    return WorkoutLog(request.app.state.store)
