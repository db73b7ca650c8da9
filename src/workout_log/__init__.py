"""workout-log: personal workout log with statistics and year-over-year comparison."""

__version__ = "0.1.0"
