from __future__ import annotations

from typing import Protocol, Sequence

from ..employees.model import Employee
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Store adapter used by the attendance sheet.

    Every method may raise StoreError; nothing is retried.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_for_date(self, date_key: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> str:
        """Write to the per-employee history, then to the date-queryable set. Returns the queryable id."""

        raise NotImplementedError

    def update(self, record_id: str, record: AttendanceRecord) -> None:
        """Overwrite status/check-in; raises NotFoundError when the id is gone."""

        raise NotImplementedError
