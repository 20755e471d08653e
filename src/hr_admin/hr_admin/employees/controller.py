from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request

from ..common.responses import json_errors, ok
from ..container import Container
from .model import Employee


def _employee_view(e: Employee) -> dict:
    data = asdict(e)
    data.pop("password_hash", None)
    data["id"] = data.pop("employee_id")
    return data


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @json_errors
    def list_employees():
        return ok(employees=[_employee_view(e) for e in service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @json_errors
    def create_employee():
        employee = service.create_employee(request.get_json(silent=True) or {})
        return ok("Employee added", 201, employee=_employee_view(employee))

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @json_errors
    def get_employee(employee_id: str):
        return ok(employee=_employee_view(service.get_employee(employee_id)))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @json_errors
    def update_employee(employee_id: str):
        employee = service.update_employee(employee_id, request.get_json(silent=True) or {})
        return ok("Employee updated", employee=_employee_view(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @json_errors
    def delete_employee(employee_id: str):
        service.delete_employee(employee_id)
        return ok("Employee deleted")

    @app.route("/api/employees/<employee_id>/freeze", methods=["POST"], endpoint="freeze_employee")
    @json_errors
    def freeze_employee(employee_id: str):
        archive_id = service.freeze_employee(employee_id)
        return ok(
            "Employee and related salary details have been frozen and removed from active records.",
            archive_id=archive_id,
        )

    @app.route("/api/employees/<employee_id>/salaries", methods=["GET"], endpoint="list_salaries")
    @json_errors
    def list_salaries(employee_id: str):
        salaries = [
            {"id": s.record_id, "month": s.month, "amount": s.amount, "note": s.note}
            for s in service.list_salaries(employee_id)
        ]
        return ok(salaries=salaries)

    @app.route("/api/employees/<employee_id>/salaries", methods=["POST"], endpoint="add_salary")
    @json_errors
    def add_salary(employee_id: str):
        data = request.get_json(silent=True) or {}
        salary = service.add_salary(
            employee_id,
            month=str(data.get("month") or ""),
            amount=data.get("amount"),
            note=str(data.get("note") or ""),
        )
        return ok("Salary added", 201, salary={"id": salary.record_id, "month": salary.month, "amount": salary.amount})
