from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/board", endpoint="board")
    @login_required
    def board():
        week_of_s = request.args.get("week_of")
        week_of = parse_iso_date(week_of_s) if week_of_s else None
        rows = container.schedule_service.weekly_board(week_of)
        return jsonify({"success": True, "employees": [r.to_dict() for r in rows]})

    @app.route("/api/shifts", endpoint="shifts")
    @login_required
    def shifts():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if not start_s or not end_s:
            raise ValidationError("Both start and end are required")

        rows = container.schedule_service.fetch_shifts_by_range(parse_iso_date(start_s), parse_iso_date(end_s))
        return jsonify({"success": True, "shifts": [s.to_dict() for s in rows]})

    @app.route("/api/shifts", methods=["PUT"], endpoint="save_shift")
    @login_required
    def save_shift():
        data = json_body()
        if not data.get("date"):
            raise ValidationError("Date is required")

        shift = container.schedule_service.save_shift(
            employee_id=data.get("employee_id"),
            work_date=parse_iso_date(data["date"]),
            segments=data.get("segments"),
        )
        return jsonify({"success": True, "shift": shift.to_dict()})

    @app.route("/api/shifts/<int:employee_id>/<work_date>", methods=["DELETE"], endpoint="delete_shift")
    @login_required
    def delete_shift(employee_id: int, work_date: str):
        container.schedule_service.delete_shift(employee_id=employee_id, work_date=parse_iso_date(work_date))
        return jsonify({"success": True, "message": "Shift deleted"})
