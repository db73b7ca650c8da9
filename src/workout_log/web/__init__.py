"""Web API for workout-log."""

from .app import create_app

__all__ = ["create_app"]
