from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_admin.hr_admin.database.connection import DatabaseConnection, MongoConfig
from src.hr_admin.hr_admin.employees.mongo_employee_repository import MongoEmployeeRepository
from src.hr_admin.hr_admin.employees.service import EmployeeService

DEMO_EMPLOYEES = [
    {
        "name": "Aisha Khan",
        "dob": "1994-05-12",
        "gender": "Female",
        "address": "12 Main Street",
        "email": "aisha@example.com",
        "phone": "0300-0000001",
        "employee_code": "E101",
        "role": "Sales Agent",
        "joining_date": "2023-01-09",
        "employment_type": "Full-time",
    },
    {
        "name": "Bilal Ahmed",
        "dob": "1990-11-02",
        "gender": "Male",
        "address": "4 Park Road",
        "email": "bilal@example.com",
        "phone": "0300-0000002",
        "employee_code": "E102",
        "role": "Support Lead",
        "joining_date": "2022-06-15",
        "employment_type": "Full-time",
    },
    {
        "name": "Sara Malik",
        "dob": "1998-02-20",
        "gender": "Female",
        "address": "88 Lake View",
        "email": "sara@example.com",
        "phone": "0300-0000003",
        "employee_code": "E103",
        "role": "Designer",
        "joining_date": "2024-03-01",
        "employment_type": "Remote",
    },
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    mongo_config = dict(settings.MONGO_CONFIG)

    service = EmployeeService(MongoEmployeeRepository(DatabaseConnection(MongoConfig(**mongo_config))))
    existing = {e.employee_code for e in service.list_employees()}
    created = 0
    for form in DEMO_EMPLOYEES:
        if form["employee_code"] in existing:
            continue
        service.create_employee(form)
        created += 1

    print(f"OK: Seeded {created} employees -> {mongo_config.get('uri')}/{mongo_config.get('database')}")


if __name__ == "__main__":
    main()
