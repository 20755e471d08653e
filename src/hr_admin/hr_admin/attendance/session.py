from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, List, Optional, Sequence, Union

from ..common.datetime_utils import check_in_time_options, format_date_key, now_local
from ..core.constants import ALL_STATUSES, EXCLUDED_EMPLOYMENT_TYPES
from ..core.enums import AttendanceStatus, DateKeyFormat
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .classifier import classify, needs_time, parse_requested_status
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass
class PendingForm:
    """The mark-attendance form. Status and time survive a submit; the employee part does not."""

    employee_id: str = ""
    name: str = ""
    role: str = ""
    requested_status: AttendanceStatus = AttendanceStatus.HOLIDAY
    time_in: str = check_in_time_options()[0]

    def clear_employee(self) -> None:
        self.employee_id = ""
        self.name = ""
        self.role = ""


class AttendanceSession:
    """Operator state for the attendance mark sheet of one date.

    Two modes: viewing, and editing one record (`edit_target`). Cached lists are
    only changed after the store call they depend on has succeeded, so a
    StoreError leaves the session as it was.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        date_key_format: DateKeyFormat = DateKeyFormat.LOCALE,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._clock = clock or now_local
        self._date_key_format = date_key_format
        self._factory = strategy_factory or AttendanceStrategyFactory()

        self.selected_date: date = self._clock().date()
        self.employees: List[Employee] = []
        self.records: List[AttendanceRecord] = []
        self.form = PendingForm()
        self.edit_target: Optional[AttendanceRecord] = None

    @property
    def date_key(self) -> str:
        return format_date_key(self.selected_date, self._date_key_format)

    @property
    def is_editing(self) -> bool:
        return self.edit_target is not None

    def _today(self) -> date:
        return self._clock().date()

    def load(self) -> None:
        """Fetch employees and the records of the selected date."""
        employees = list(self._attendance.list_employees())
        records = list(self._attendance.list_for_date(self.date_key))
        self.employees = employees
        self.records = records

    def select_date(self, value: date) -> None:
        if value > self._today():
            raise ValidationError("Selected date cannot be in the future.")

        records = list(self._attendance.list_for_date(format_date_key(value, self._date_key_format)))
        self.selected_date = value
        self.records = records

    def _has_record(self, employee_id: str) -> bool:
        key = self.date_key
        return any(r.employee_id == employee_id and r.date == key for r in self.records)

    def eligible_employees(self) -> List[Employee]:
        return [
            e
            for e in self.employees
            if e.employment_type not in EXCLUDED_EMPLOYMENT_TYPES and not self._has_record(e.employee_id)
        ]

    def select_employee(self, employee_id: str) -> Optional[Employee]:
        """Fill the form from an eligible employee; anything else just clears the employee fields."""
        for employee in self.eligible_employees():
            if employee.employee_id == employee_id:
                self.form.employee_id = employee.employee_id
                self.form.name = employee.name
                self.form.role = employee.role
                return employee

        self.form.clear_employee()
        return None

    def submit(
        self,
        requested_status: Union[str, AttendanceStatus, None] = None,
        time_in: Optional[str] = None,
    ) -> AttendanceRecord:
        """Mark the selected employee. A value left as None is taken from the form; "" means empty."""
        form = self.form
        if not form.employee_id or not form.name.strip() or not form.role.strip():
            raise ValidationError("Please select an employee (name and role).")

        status = parse_requested_status(form.requested_status if requested_status is None else requested_status)
        time_in = (form.time_in if time_in is None else str(time_in)).strip()
        if needs_time(status) and not time_in:
            raise ValidationError("Please select Time In.")

        if self.selected_date > self._today():
            raise ValidationError("Selected date cannot be in the future.")

        decision = classify(status, time_in, factory=self._factory)
        record = AttendanceRecord(
            record_id=None,
            employee_id=form.employee_id,
            name=form.name,
            role=form.role,
            requested_status=status,
            status=decision.status,
            time_in=decision.time_in,
            date=self.date_key,
            created_at=self._clock(),
        )
        record_id = self._attendance.create(record)
        saved = replace(record, record_id=record_id)

        self.records = self.records + [saved]
        form.requested_status = status
        form.time_in = time_in or form.time_in
        form.clear_employee()
        return saved

    def begin_edit(self, record: AttendanceRecord) -> AttendanceRecord:
        key = self.date_key
        current = next(
            (r for r in self.records if r.employee_id == record.employee_id and r.date == key),
            None,
        )
        if current is None:
            raise ValidationError("No attendance record to edit. Please mark attendance first.")

        self.edit_target = replace(current)
        return self.edit_target

    def cancel_edit(self) -> None:
        self.edit_target = None

    def apply_edit(self, new_status: Union[str, AttendanceStatus], new_time_in: Optional[str]) -> AttendanceRecord:
        target = self.edit_target
        if target is None:
            raise ValidationError("No attendance record is being edited.")
        if not target.name.strip() or not target.role.strip():
            raise ValidationError("Name and Role cannot be changed.")

        decision = classify(new_status, new_time_in, factory=self._factory)
        updated = replace(
            target,
            requested_status=parse_requested_status(new_status),
            status=decision.status,
            time_in=decision.time_in,
        )
        self._attendance.update(target.record_id, updated)

        self.records = [updated if r.record_id == updated.record_id else r for r in self.records]
        self.edit_target = None
        logger.info("Attendance %s updated to %s", updated.record_id, updated.status.value)
        return updated

    def filter(self, name: str = "", status: str = ALL_STATUSES) -> List[AttendanceRecord]:
        needle = (name or "").strip().lower()
        status = status or ALL_STATUSES

        out: List[AttendanceRecord] = []
        for r in self.records:
            if needle and needle not in r.name.lower():
                continue
            if status != ALL_STATUSES and r.status.value != status:
                continue
            out.append(r)
        return out

    def find_record(self, record_id: str) -> Optional[AttendanceRecord]:
        return next((r for r in self.records if r.record_id == record_id), None)


def records_for_view(records: Sequence[AttendanceRecord]) -> list[dict]:
    return [
        {
            "id": r.record_id,
            "employee_id": r.employee_id,
            "name": r.name,
            "role": r.role,
            "requested_status": r.requested_status.value,
            "status": r.status.value,
            "date": r.date,
            "time_in": r.time_in,
        }
        for r in records
    ]
