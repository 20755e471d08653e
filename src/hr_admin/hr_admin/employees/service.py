from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Mapping, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import require_fields, require_non_empty
from ..core.enums import EmploymentType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, SalaryRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "name",
    "dob",
    "gender",
    "address",
    "email",
    "phone",
    "employee_code",
    "role",
    "joining_date",
    "employment_type",
)

OPTIONAL_FIELDS = (
    "department",
    "emergency_contact",
    "bank_account",
    "cnic",
    "salary",
)


class EmployeeService:
    """Use case: manage employee records, their salaries, and archival (freeze)."""

    def __init__(self, employees: EmployeeRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._employees = employees
        self._clock = clock or datetime.now

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _from_form(self, employee_id: str, form: Mapping[str, str], *, password_hash: str = "") -> Employee:
        require_fields(form, REQUIRED_FIELDS, "Please fill in all required fields")

        values = {f: str(form[f]).strip() for f in REQUIRED_FIELDS}
        try:
            EmploymentType(values["employment_type"])
        except ValueError:
            raise ValidationError("Invalid employment type")

        values.update({f: str(form.get(f) or "").strip() for f in OPTIONAL_FIELDS})

        password = form.get("password") or ""
        if password:
            password_hash = generate_password_hash(password)

        return Employee(employee_id=employee_id, password_hash=password_hash, **values)

    def create_employee(self, form: Mapping[str, str]) -> Employee:
        employee = self._from_form("", form)
        new_id = self._employees.create(employee)
        logger.info("Employee %s created as %s", employee.employee_code, new_id)
        return replace(employee, employee_id=new_id)

    def update_employee(self, employee_id: str, form: Mapping[str, str]) -> Employee:
        current = self.get_employee(employee_id)
        # A blank password keeps the stored hash.
        employee = self._from_form(employee_id, form, password_hash=current.password_hash)
        self._employees.update(employee)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        self._employees.delete_by_id(employee_id)
        logger.info("Employee %s deleted", employee_id)

    def add_salary(self, employee_id: str, *, month: str, amount, note: str = "") -> SalaryRecord:
        self.get_employee(employee_id)
        month = require_non_empty(month, "Month")
        try:
            value = float(amount)
        except (TypeError, ValueError):
            raise ValidationError("Amount must be a number")
        if value < 0:
            raise ValidationError("Amount cannot be negative")

        salary = SalaryRecord(record_id=None, month=month, amount=value, note=note or "", created_at=self._clock())
        record_id = self._employees.add_salary(employee_id, salary)
        return replace(salary, record_id=record_id)

    def list_salaries(self, employee_id: str) -> Sequence[SalaryRecord]:
        return self._employees.list_salaries(employee_id)

    def freeze_employee(self, employee_id: str) -> str:
        """Move an employee and their salaries into the frozen archive.

        Steps run one after another with no compensation: if one fails, the
        steps before it stay applied and the StoreError propagates.
        """
        employee = self.get_employee(employee_id)
        frozen_at = self._clock().isoformat()

        archive_id = self._employees.archive(employee, frozen_at=frozen_at)
        logger.info("Employee %s frozen to archive %s", employee_id, archive_id)

        for salary in self._employees.list_salaries(employee_id):
            self._employees.archive_salary(archive_id, salary, frozen_at=frozen_at)
            self._employees.delete_salary(employee_id, salary.record_id)

        self._employees.delete_by_id(employee_id)
        return archive_id
