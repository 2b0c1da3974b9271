from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, login_required
from ..container import Container
from ..core.enums import EmployeeStatus


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", endpoint="employees")
    @login_required
    def employees():
        rows = container.employee_service.list_active()
        return jsonify({"success": True, "employees": [e.to_dict() for e in rows]})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        data = json_body()
        employee = container.employee_service.add_employee(
            str(data.get("name") or ""),
            str(data.get("status") or EmployeeStatus.NORMAL.value),
        )
        return (
            jsonify({"success": True, "employee": employee.to_dict() if employee else None}),
            201,
        )

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"success": True, "message": "Employee deleted"})
