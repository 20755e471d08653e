from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import check_in_time_options, parse_iso_date
from ..common.responses import json_errors, ok
from ..core.constants import ALL_STATUSES
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .session import AttendanceSession, records_for_view


def register(app: Flask, container: Container) -> None:
    def open_session(date_s: object) -> AttendanceSession:
        session = container.attendance_session()
        if date_s:
            try:
                day = parse_iso_date(str(date_s))
            except ValueError:
                raise ValidationError("Date must be YYYY-MM-DD")
            session.select_date(day)
        return session

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @json_errors
    def list_attendance():
        session = open_session(request.args.get("date"))
        records = session.filter(
            name=request.args.get("name", ""),
            status=request.args.get("status", ALL_STATUSES),
        )
        return ok(date=session.date_key, records=records_for_view(records))

    @app.route("/api/attendance/eligible", methods=["GET"], endpoint="eligible_employees")
    @json_errors
    def eligible_employees():
        session = open_session(request.args.get("date"))
        employees = [
            {"id": e.employee_id, "name": e.name, "role": e.role}
            for e in session.eligible_employees()
        ]
        return ok(date=session.date_key, employees=employees)

    @app.route("/api/attendance/time-options", methods=["GET"], endpoint="time_options")
    def time_options():
        return ok(times=check_in_time_options())

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @json_errors
    def mark_attendance():
        data = request.get_json(silent=True) or {}
        session = open_session(data.get("date"))

        session.select_employee(str(data.get("employee_id") or ""))
        record = session.submit(data.get("status"), data.get("time_in"))
        return ok("Attendance marked", 201, record=records_for_view([record])[0])

    @app.route("/api/attendance/<record_id>", methods=["PUT"], endpoint="edit_attendance")
    @json_errors
    def edit_attendance(record_id: str):
        data = request.get_json(silent=True) or {}
        session = open_session(data.get("date"))

        record = session.find_record(record_id)
        if record is None:
            raise NotFoundError(f"Attendance record {record_id} not found for {session.date_key}")

        session.begin_edit(record)
        updated = session.apply_edit(data.get("status", ""), data.get("time_in"))
        return ok("Attendance updated", record=records_for_view([updated])[0])
