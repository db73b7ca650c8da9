"""Calendar-date helpers.

Workout dates are ``YYYY-MM-DD`` strings interpreted as local calendar
dates: only the year, month and day components are used and no timezone
conversion happens, so a date always maps to the same weekday, month and
quarter.
"""

import re
from datetime import date, datetime, timedelta

from ..models.workout import MONTH_LABELS, WEEKDAY_LABELS

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a date.

    Raises:
        ValueError: If the string is not a valid calendar date.
    """
    if not isinstance(value, str) or not ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"Invalid date: {value!r}")
    year_str, month_str, day_str = value.split("-")
    return date(int(year_str), int(month_str), int(day_str))


def is_iso_date(value) -> bool:
    """Check that a value is a ``YYYY-MM-DD`` string naming a real day."""
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


def year(value: str) -> int:
    return int(value.split("-")[0])


def month(value: str) -> int:
    """Month of the date, 0-based (January is 0)."""
    return int(value.split("-")[1]) - 1


def quarter(value: str) -> int:
    """Quarter of the date, 1-based."""
    return month(value) // 3 + 1


def day_of_week(value: str) -> int:
    """Day of week with Monday as 0 and Sunday as 6."""
    return parse_date(value).weekday()


def start_of_week(instant: date | datetime) -> datetime:
    """Monday 00:00:00 on or before the given instant.

    A Sunday belongs to the week that started six days earlier.
    """
    if isinstance(instant, datetime):
        day = instant.date()
    else:
        day = instant
    monday = day - timedelta(days=day.weekday())
    return datetime(monday.year, monday.month, monday.day)


def project_onto_year(day: date, target_year: int) -> date:
    """Same month and day in another year.

    February 29 rolls over to March 1 when the target year is not a leap year.
    """
    try:
        return day.replace(year=target_year)
    except ValueError:
        return date(target_year, 2, 28) + timedelta(days=1)


def to_iso(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def format_date(value: str | date) -> str:
    """Display form of a date, e.g. ``Mon, Jan 15, 2024``."""
    if isinstance(value, str):
        value = parse_date(value)
    weekday = WEEKDAY_LABELS[value.weekday()][:3]
    return f"{weekday}, {MONTH_LABELS[value.month - 1]} {value.day}, {value.year}"
