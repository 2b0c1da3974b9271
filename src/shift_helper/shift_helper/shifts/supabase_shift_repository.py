from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import SHIFT_CONFLICT_KEY, SHIFTS_TABLE
from ..core.exceptions import StoreError
from ..database.connection import SupabaseConnection
from ..database.supabase_base import fetchall, fetchone, row_errors, store_errors
from .model import Shift, ShiftSegment
from .repository import ShiftRepository


def _to_shift(row: dict) -> Shift:
    with row_errors(SHIFTS_TABLE):
        return Shift(
            shift_id=int(row["id"]) if row.get("id") is not None else None,
            employee_id=int(row["employee_id"]),
            # date columns may come back as full timestamps
            work_date=parse_iso_date(str(row["date"]).split("T")[0]),
            segments=tuple(ShiftSegment.from_dict(s) for s in (row.get("segments") or [])),
        )


class SupabaseShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def _table(self):
        return self._conn_factory.client().table(SHIFTS_TABLE)

    def list_all(self) -> Sequence[Shift]:
        with store_errors("Fetching shifts"):
            response = self._table().select("*").execute()
        return [_to_shift(r) for r in fetchall(response)]

    def list_range(self, *, start: date, end: date) -> Sequence[Shift]:
        with store_errors("Fetching shifts by range"):
            response = (
                self._table()
                .select("*")
                .gte("date", start.isoformat())
                .lte("date", end.isoformat())
                .execute()
            )
        return [_to_shift(r) for r in fetchall(response)]

    def upsert(self, *, employee_id: int, work_date: date, segments: Sequence[ShiftSegment]) -> Shift:
        payload = {
            "employee_id": int(employee_id),
            "date": work_date.isoformat(),
            "segments": [seg.to_dict() for seg in segments],
        }
        with store_errors("Saving shift"):
            response = self._table().upsert([payload], on_conflict=SHIFT_CONFLICT_KEY).execute()

        row = fetchone(response)
        if not row:
            raise StoreError("Saving shift returned no row")
        return _to_shift(row)

    def delete(self, *, employee_id: int, work_date: date) -> None:
        with store_errors("Deleting shift"):
            (
                self._table()
                .delete()
                .eq("employee_id", int(employee_id))
                .eq("date", work_date.isoformat())
                .execute()
            )

    def delete_for_employee(self, *, employee_id: int) -> None:
        with store_errors("Deleting shifts of employee"):
            self._table().delete().eq("employee_id", int(employee_id)).execute()
