from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a schedulable employee (row in `employees`)."""

    employee_id: int
    name: str
    status: str = EmployeeStatus.NORMAL.value

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.NORMAL.value

    def to_dict(self) -> dict:
        return {"id": self.employee_id, "name": self.name, "status": self.status}
