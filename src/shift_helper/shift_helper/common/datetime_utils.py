from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Tuple

from ..core.exceptions import ValidationError


def parse_iso_date(value: Any) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}")


def parse_time_of_day(value: Any) -> time:
    """Normalize a time-of-day value.

    Supabase returns `time` columns and JSON segment bounds as strings
    ('08:30' or '08:30:00'); callers may also pass datetime.time.
    """

    if isinstance(value, time):
        return value

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
            raise ValidationError(f"Invalid time: {value!r}")
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
        try:
            return time(hour=hours, minute=minutes, second=seconds)
        except ValueError:
            raise ValidationError(f"Invalid time: {value!r}")

    raise ValidationError(f"Unsupported time value: {value!r}")


def format_time_of_day(value: time) -> str:
    return value.strftime("%H:%M")


def weekday_index(value: date) -> int:
    """Monday=1 .. Sunday=7."""
    return value.isoweekday()


def week_bounds(value: date) -> Tuple[date, date]:
    """Monday and Sunday of the week containing `value`."""
    monday = value - timedelta(days=value.isoweekday() - 1)
    return monday, monday + timedelta(days=6)
