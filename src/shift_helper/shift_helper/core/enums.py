from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employee status stored in the `employees` table."""

    NORMAL = "normal"
    RESIGNED = "resigned"


class Weekday(int, Enum):
    """Weekday index used by the schedule board (Monday=1 .. Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7
