from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Shift, ShiftSegment


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[Shift]:
        """Shifts with start <= date <= end."""

        raise NotImplementedError

    def upsert(self, *, employee_id: int, work_date: date, segments: Sequence[ShiftSegment]) -> Shift:
        """Create or replace the shift keyed by (employee_id, work_date).

        Returns the stored row.
        """

        raise NotImplementedError

    def delete(self, *, employee_id: int, work_date: date) -> None:
        raise NotImplementedError

    def delete_for_employee(self, *, employee_id: int) -> None:
        raise NotImplementedError
