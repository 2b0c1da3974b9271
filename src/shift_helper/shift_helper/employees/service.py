from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository):
        self._employees = employees
        self._shifts = shifts

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def add_employee(self, name: str, status: str = EmployeeStatus.NORMAL.value) -> Optional[Employee]:
        name = require_non_empty(name, "Name")
        status = require_non_empty(status, "Status")
        try:
            EmployeeStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown employee status: {status}")

        employee = self._employees.create(name=name, status=status)
        logger.info("Added employee %r", name)
        return employee

    def delete_employee(self, employee_id: int) -> None:
        """Delete an employee and their shifts.

        Shifts go first so no row is left pointing at a missing employee. The two
        deletes are separate remote calls: if the second one fails the shifts stay
        deleted.
        """

        employee_id = require_positive_id(employee_id, "Employee")
        self._shifts.delete_for_employee(employee_id=employee_id)
        self._employees.delete_by_id(employee_id)
        logger.info("Deleted employee %s and their shifts", employee_id)
