"""FastAPI application for the workout-log API."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db import SQLiteWorkoutStore, WorkoutStore, get_db_path, init_db
from ..errors import StorageError
from .routers import data, stats, workouts


def create_app(db_path: Path | None = None, store: WorkoutStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database to use (defaults to the configured data dir)
        store: Use this store instead of SQLite
    """
    if store is None:
        db_path = db_path or get_db_path()
        store = SQLiteWorkoutStore(db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Startup: make sure the schema exists
        if isinstance(store, SQLiteWorkoutStore):
            await init_db(store.db_path)
        yield

    app = FastAPI(
        title="workout-log",
        description="Personal workout log API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.include_router(workouts.router)
    app.include_router(stats.router)
    app.include_router(data.router)

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        return JSONResponse({"error": str(exc)}, status_code=503)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
