"""Utility helpers for workout-log."""
