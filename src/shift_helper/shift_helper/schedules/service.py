from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import week_bounds
from ..common.validators import require_date_order, require_positive_id
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.model import Shift, ShiftSegment
from ..shifts.repository import ShiftRepository
from .aggregation import EmployeeWeek, process_shift_data

logger = logging.getLogger(__name__)


def build_segments(raw_segments: Optional[Iterable]) -> List[ShiftSegment]:
    """Validate segment input (dicts with start/end, or ShiftSegment)."""

    segments: List[ShiftSegment] = []
    for raw in raw_segments or []:
        if isinstance(raw, ShiftSegment):
            seg = raw
        elif isinstance(raw, dict):
            seg = ShiftSegment.from_dict(raw)
        else:
            raise ValidationError(f"Invalid segment: {raw!r}")

        if any(t.second or t.microsecond for t in (seg.start, seg.end)):
            raise ValidationError("Segment times must be whole minutes (HH:MM)")
        if seg.start == seg.end:
            raise ValidationError("Segment start and end must differ")
        segments.append(seg)

    if not segments:
        raise ValidationError("At least one segment is required")
    return segments


@dataclass(frozen=True)
class InitialData:
    employees: Sequence[Employee]
    raw_shifts: Sequence[Shift]


class ScheduleService:
    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository):
        self._employees = employees
        self._shifts = shifts

    def fetch_initial_data(self) -> InitialData:
        return InitialData(
            employees=list(self._employees.list_active() or []),
            raw_shifts=list(self._shifts.list_all() or []),
        )

    def fetch_shifts_by_range(self, start: date, end: date) -> Sequence[Shift]:
        require_date_order(start, end)
        return list(self._shifts.list_range(start=start, end=end) or [])

    def save_shift(self, *, employee_id: int, work_date: date, segments: Iterable) -> Shift:
        employee_id = require_positive_id(employee_id, "Employee")
        shift = self._shifts.upsert(employee_id=employee_id, work_date=work_date, segments=build_segments(segments))
        logger.info("Saved shift for employee %s on %s", employee_id, work_date)
        return shift

    def delete_shift(self, *, employee_id: int, work_date: date) -> None:
        employee_id = require_positive_id(employee_id, "Employee")
        self._shifts.delete(employee_id=employee_id, work_date=work_date)

    def weekly_board(self, week_of: Optional[date] = None) -> List[EmployeeWeek]:
        """Board for the Monday..Sunday week containing `week_of`, or for all shifts."""

        if week_of is None:
            data = self.fetch_initial_data()
            return process_shift_data(data.employees, data.raw_shifts)

        monday, sunday = week_bounds(week_of)
        employees = self._employees.list_active()
        return process_shift_data(employees, self.fetch_shifts_by_range(monday, sunday))
