"""Input clients for workout-log."""
