from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_TABLE
from ..core.enums import EmployeeStatus
from ..database.connection import SupabaseConnection
from ..database.supabase_base import fetchall, fetchone, store_errors
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        name=row.get("name") or "",
        status=row.get("status") or EmployeeStatus.NORMAL.value,
    )


class SupabaseEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def _table(self):
        return self._conn_factory.client().table(EMPLOYEES_TABLE)

    def list_active(self) -> Sequence[Employee]:
        with store_errors("Fetching employees"):
            response = (
                self._table()
                .select("*")
                .eq("status", EmployeeStatus.NORMAL.value)
                .order("id")
                .execute()
            )
        return [_to_employee(r) for r in fetchall(response)]

    def create(self, *, name: str, status: str) -> Optional[Employee]:
        with store_errors("Adding employee"):
            response = self._table().insert([{"name": name, "status": status}]).execute()
        row = fetchone(response)
        return _to_employee(row) if row else None

    def delete_by_id(self, employee_id: int) -> None:
        with store_errors("Deleting employee"):
            self._table().delete().eq("id", int(employee_id)).execute()
