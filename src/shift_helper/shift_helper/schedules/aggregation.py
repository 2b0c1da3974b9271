"""Reshape flat shift rows into the per-employee weekly board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from ..common.datetime_utils import weekday_index
from ..core.enums import Weekday
from ..employees.model import Employee
from ..shifts.model import Shift


@dataclass(frozen=True)
class EmployeeWeek:
    employee: Employee
    days: Dict[int, List[Shift]]
    total_minutes: int

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60

    def to_dict(self) -> dict:
        out = self.employee.to_dict()
        out["days"] = {str(day): [s.to_dict() for s in shifts] for day, shifts in self.days.items()}
        out["total_hours"] = self.total_hours
        return out


def empty_days() -> Dict[int, List[Shift]]:
    return {day.value: [] for day in Weekday}


def process_shift_data(employees: Sequence[Employee], raw_shifts: Iterable[Shift]) -> List[EmployeeWeek]:
    """Group shifts per employee and weekday (Monday=1 .. Sunday=7).

    Every employee is returned exactly once, in input order, even without
    shifts. Shifts of unknown employees are dropped.
    """

    by_employee: Dict[int, List[Shift]] = {}
    for s in raw_shifts:
        by_employee.setdefault(s.employee_id, []).append(s)

    out: List[EmployeeWeek] = []
    for emp in employees:
        days = empty_days()
        total = 0
        for s in by_employee.get(emp.employee_id, []):
            days[weekday_index(s.work_date)].append(s)
            total += s.minutes
        out.append(EmployeeWeek(employee=emp, days=days, total_minutes=total))
    return out
