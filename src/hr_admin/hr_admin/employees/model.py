from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object (no database access code).
    `employee_id` is the store identifier; `employee_code` is the human-facing code.
    """

    employee_id: str
    name: str
    role: str
    employment_type: str
    dob: str = ""
    gender: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""
    employee_code: str = ""
    department: str = ""
    joining_date: str = ""
    password_hash: str = ""
    emergency_contact: str = ""
    bank_account: str = ""
    cnic: str = ""
    salary: str = ""


@dataclass(frozen=True)
class SalaryRecord:
    record_id: Optional[str]
    month: str
    amount: float
    note: str = ""
    created_at: Optional[datetime] = None
