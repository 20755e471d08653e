from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, SalaryRecord


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, never on the concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> str:
        raise NotImplementedError

    def update(self, employee: Employee) -> None:
        """Overwrite profile fields; raises NotFoundError when the id is gone."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> None:
        raise NotImplementedError

    def add_salary(self, employee_id: str, salary: SalaryRecord) -> str:
        raise NotImplementedError

    def list_salaries(self, employee_id: str) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def delete_salary(self, employee_id: str, record_id: str) -> None:
        raise NotImplementedError

    def archive(self, employee: Employee, *, frozen_at: str) -> str:
        """Copy the employee into the frozen-employee archive and return the archive id."""

        raise NotImplementedError

    def archive_salary(self, archive_id: str, salary: SalaryRecord, *, frozen_at: str) -> str:
        raise NotImplementedError
