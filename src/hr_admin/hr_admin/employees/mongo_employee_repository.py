from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from pymongo.collection import Collection

from ..core.constants import (
    EMPLOYEES_COLLECTION,
    FROZEN_EMPLOYEES_COLLECTION,
    FROZEN_SALARIES_SUBCOLLECTION,
    SALARIES_SUBCOLLECTION,
)
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mongo_base import id_filter, store_errors, str_id
from .model import Employee, SalaryRecord
from .repository import EmployeeRepository

# model attribute -> document field
_FIELDS = {
    "name": "name",
    "role": "role",
    "employment_type": "employmentType",
    "dob": "dob",
    "gender": "gender",
    "address": "address",
    "email": "email",
    "phone": "phone",
    "employee_code": "employeeId",
    "department": "department",
    "joining_date": "joiningDate",
    "password_hash": "password",
    "emergency_contact": "emergencyContact",
    "bank_account": "bankAccount",
    "cnic": "cnic",
    "salary": "salary",
}


def employee_to_doc(employee: Employee) -> Dict[str, Any]:
    return {field: getattr(employee, attr) for attr, field in _FIELDS.items()}


def employee_from_doc(doc: Dict[str, Any]) -> Employee:
    values = {attr: str(doc.get(field) or "") for attr, field in _FIELDS.items()}
    return Employee(employee_id=str_id(doc), **values)


def salary_from_doc(doc: Dict[str, Any]) -> SalaryRecord:
    return SalaryRecord(
        record_id=str_id(doc),
        month=str(doc.get("month") or ""),
        amount=float(doc.get("amount") or 0),
        note=str(doc.get("note") or ""),
        created_at=doc.get("createdAt"),
    )


class MongoEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _employees(self) -> Collection:
        return self._conn_factory.db()[EMPLOYEES_COLLECTION]

    def _salaries(self, employee_id: str) -> Collection:
        # employees.<id>.salaries
        return self._employees()[employee_id][SALARIES_SUBCOLLECTION]

    def list_all(self) -> Sequence[Employee]:
        with store_errors("list_employees"):
            return [employee_from_doc(d) for d in self._employees().find({})]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with store_errors("get_employee"):
            doc = self._employees().find_one(id_filter(employee_id))
        return employee_from_doc(doc) if doc else None

    def create(self, employee: Employee) -> str:
        with store_errors("create_employee"):
            result = self._employees().insert_one(employee_to_doc(employee))
        return str(result.inserted_id)

    def update(self, employee: Employee) -> None:
        with store_errors("update_employee"):
            result = self._employees().update_one(id_filter(employee.employee_id), {"$set": employee_to_doc(employee)})
        if result.matched_count == 0:
            raise NotFoundError(f"Employee {employee.employee_id} not found")

    def delete_by_id(self, employee_id: str) -> None:
        with store_errors("delete_employee"):
            result = self._employees().delete_one(id_filter(employee_id))
        if result.deleted_count == 0:
            raise NotFoundError(f"Employee {employee_id} not found")

    def add_salary(self, employee_id: str, salary: SalaryRecord) -> str:
        doc = {
            "month": salary.month,
            "amount": salary.amount,
            "note": salary.note,
            "createdAt": salary.created_at or datetime.now(),
        }
        with store_errors("add_salary"):
            result = self._salaries(employee_id).insert_one(doc)
        return str(result.inserted_id)

    def list_salaries(self, employee_id: str) -> Sequence[SalaryRecord]:
        with store_errors("list_salaries"):
            return [salary_from_doc(d) for d in self._salaries(employee_id).find({})]

    def delete_salary(self, employee_id: str, record_id: str) -> None:
        with store_errors("delete_salary"):
            self._salaries(employee_id).delete_one(id_filter(record_id))

    def archive(self, employee: Employee, *, frozen_at: str) -> str:
        doc = employee_to_doc(employee)
        doc["id"] = employee.employee_id
        doc["frozenAt"] = frozen_at
        with store_errors("archive_employee"):
            result = self._conn_factory.db()[FROZEN_EMPLOYEES_COLLECTION].insert_one(doc)
        return str(result.inserted_id)

    def archive_salary(self, archive_id: str, salary: SalaryRecord, *, frozen_at: str) -> str:
        doc = {
            "month": salary.month,
            "amount": salary.amount,
            "note": salary.note,
            "createdAt": salary.created_at,
            "frozenAt": frozen_at,
        }
        target = self._conn_factory.db()[FROZEN_EMPLOYEES_COLLECTION][archive_id][FROZEN_SALARIES_SUBCOLLECTION]
        with store_errors("archive_salary"):
            result = target.insert_one(doc)
        return str(result.inserted_id)
