from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, never on the Supabase client directly.
    """

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, status: str) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError
