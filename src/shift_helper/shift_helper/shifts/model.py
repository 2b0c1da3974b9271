from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional, Tuple

from ..common.datetime_utils import format_time_of_day, parse_time_of_day

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ShiftSegment:
    """One contiguous working interval within a day."""

    start: time
    end: time

    @property
    def minutes(self) -> int:
        """Worked minutes; an end earlier than the start runs past midnight."""
        start = self.start.hour * 60 + self.start.minute
        end = self.end.hour * 60 + self.end.minute
        if end < start:
            end += MINUTES_PER_DAY
        return end - start

    @classmethod
    def from_dict(cls, raw: dict) -> "ShiftSegment":
        return cls(start=parse_time_of_day(raw.get("start")), end=parse_time_of_day(raw.get("end")))

    def to_dict(self) -> dict:
        return {"start": format_time_of_day(self.start), "end": format_time_of_day(self.end)}


@dataclass(frozen=True)
class Shift:
    """A day's assignment for one employee, unique per (employee_id, work_date)."""

    employee_id: int
    work_date: date
    segments: Tuple[ShiftSegment, ...] = field(default_factory=tuple)
    shift_id: Optional[int] = None

    @property
    def minutes(self) -> int:
        return sum(seg.minutes for seg in self.segments)

    def to_dict(self) -> dict:
        out = {
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "segments": [seg.to_dict() for seg in self.segments],
        }
        if self.shift_id is not None:
            out["id"] = self.shift_id
        return out
