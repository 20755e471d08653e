from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.hr_admin.hr_admin.attendance.model import AttendanceRecord
from src.hr_admin.hr_admin.attendance.session import AttendanceSession
from src.hr_admin.hr_admin.core.enums import AttendanceStatus
from src.hr_admin.hr_admin.core.exceptions import NotFoundError, StoreError, ValidationError
from src.hr_admin.hr_admin.employees.model import Employee


class InMemoryAttendance:
    def __init__(self, employees: list[Employee], records: Optional[list[AttendanceRecord]] = None):
        self._employees = employees
        self._records: dict[str, AttendanceRecord] = {r.record_id: r for r in records or []}
        self._id = 0
        self.history: list[AttendanceRecord] = []
        self.updated: list[tuple[str, AttendanceRecord]] = []
        self.fail = False

    def list_employees(self):
        return list(self._employees)

    def list_for_date(self, date_key: str):
        if self.fail:
            raise StoreError("list_attendance failed")
        return [r for r in self._records.values() if r.date == date_key]

    def create(self, record: AttendanceRecord) -> str:
        if self.fail:
            raise StoreError("create_attendance failed")
        self._id += 1
        rid = f"rec-{self._id}"
        self.history.append(record)
        self._records[rid] = replace(record, record_id=rid)
        return rid

    def update(self, record_id: str, record: AttendanceRecord) -> None:
        if self.fail:
            raise StoreError("update_attendance failed")
        if record_id not in self._records:
            raise NotFoundError(record_id)
        self._records[record_id] = record
        self.updated.append((record_id, record))


EMPLOYEES = [
    Employee(employee_id="E101", name="Aisha", role="Sales Agent", employment_type="Full-time"),
    Employee(employee_id="E102", name="Bilal", role="Support Lead", employment_type="Full-time"),
    Employee(employee_id="E103", name="Sara", role="Designer", employment_type="Remote"),
    Employee(employee_id="E104", name="Owner", role="Director", employment_type="Myself"),
    Employee(employee_id="E105", name="Dania", role="Accountant", employment_type="Contract"),
]


def _absent_record(record_id: str = "rec-absent") -> AttendanceRecord:
    return AttendanceRecord(
        record_id=record_id,
        employee_id="E105",
        name="Dania",
        role="Accountant",
        requested_status=AttendanceStatus.ABSENT,
        status=AttendanceStatus.ABSENT,
        time_in="-",
        date="3/1/2024",
        created_at=datetime(2024, 3, 1, 9, 0),
    )


def _session(clock, records=None) -> tuple[AttendanceSession, InMemoryAttendance]:
    repo = InMemoryAttendance(EMPLOYEES, records)
    session = AttendanceSession(repo, clock=clock)
    session.load()
    return session, repo


def test_mark_late_present_is_half_present(clock):
    session, repo = _session(clock)

    session.select_employee("E101")
    record = session.submit("Present", "08:15")

    assert record.status == AttendanceStatus.HALF_PRESENT
    assert record.requested_status == AttendanceStatus.PRESENT
    assert record.time_in == "08:15"
    assert record.date == "3/1/2024"
    assert record.name == "Aisha"
    assert record.role == "Sales Agent"
    assert record.record_id == "rec-1"
    assert session.records[-1] == record
    assert repo.history[0].employee_id == "E101"


def test_mark_holiday_is_billed_present(clock):
    session, _ = _session(clock)

    session.select_employee("E102")
    record = session.submit("Holiday", "06:00")

    assert record.status == AttendanceStatus.PRESENT
    assert record.requested_status == AttendanceStatus.HOLIDAY


def test_submit_uses_form_defaults_when_values_omitted(clock):
    session, repo = _session(clock)

    session.select_employee("E102")
    record = session.submit("Holiday", None)

    assert record.status == AttendanceStatus.PRESENT
    assert record.time_in == "06:00"
    assert repo.history[0].employee_id == "E102"


def test_submit_without_status_uses_form_status(clock):
    session, _ = _session(clock)

    session.select_employee("E101")
    session.submit("Present", "07:30")
    session.select_employee("E102")
    record = session.submit(None, "08:15")

    assert record.requested_status == AttendanceStatus.PRESENT
    assert record.status == AttendanceStatus.HALF_PRESENT


def test_submit_clears_employee_but_keeps_status_and_time(clock):
    session, _ = _session(clock)

    session.select_employee("E101")
    session.submit("Present", "07:30")

    assert session.form.employee_id == ""
    assert session.form.name == ""
    assert session.form.role == ""
    assert session.form.requested_status == AttendanceStatus.PRESENT
    assert session.form.time_in == "07:30"


def test_submit_without_employee_fails(clock):
    session, repo = _session(clock)

    with pytest.raises(ValidationError):
        session.submit("Absent", "")
    assert repo.history == []


@pytest.mark.parametrize("status", ["Present", "Work From Home", "Holiday"])
def test_submit_requires_time_for_timed_statuses(clock, status):
    session, repo = _session(clock)
    session.select_employee("E101")

    with pytest.raises(ValidationError):
        session.submit(status, "")
    assert repo.history == []
    assert session.records == []


def test_submit_rejects_future_selected_date(clock):
    session, repo = _session(clock)
    session.select_employee("E101")
    session.selected_date = date(2024, 3, 2)

    with pytest.raises(ValidationError):
        session.submit("Absent", "")
    assert repo.history == []


def test_submit_store_failure_leaves_state_unchanged(clock):
    session, repo = _session(clock)
    session.select_employee("E101")
    repo.fail = True

    with pytest.raises(StoreError):
        session.submit("Present", "07:00")

    assert session.records == []
    assert session.form.employee_id == "E101"


def test_marked_employee_is_no_longer_eligible(clock):
    session, _ = _session(clock)
    session.select_employee("E101")
    session.submit("Absent", "")

    ids = [e.employee_id for e in session.eligible_employees()]
    assert "E101" not in ids
    assert session.select_employee("E101") is None
    assert session.form.employee_id == ""


def test_remote_and_self_never_eligible(clock):
    session, _ = _session(clock, [_absent_record()])

    ids = [e.employee_id for e in session.eligible_employees()]
    assert ids == ["E101", "E102"]


def test_select_unknown_employee_clears_form(clock):
    session, _ = _session(clock)
    session.select_employee("E101")

    assert session.select_employee("nope") is None
    assert (session.form.employee_id, session.form.name, session.form.role) == ("", "", "")

    assert session.select_employee("E103") is None
    assert session.form.employee_id == ""


def test_select_future_date_fails_and_keeps_date(clock):
    session, _ = _session(clock)

    with pytest.raises(ValidationError):
        session.select_date(date(2024, 3, 2))
    assert session.selected_date == date(2024, 3, 1)


def test_select_past_date_reloads_records(clock):
    earlier = replace(_absent_record("rec-old"), date="2/29/2024")
    session, _ = _session(clock, [_absent_record(), earlier])
    assert [r.record_id for r in session.records] == ["rec-absent"]

    session.select_date(date(2024, 2, 29))

    assert session.date_key == "2/29/2024"
    assert [r.record_id for r in session.records] == ["rec-old"]


def test_select_date_store_failure_keeps_previous_state(clock):
    session, repo = _session(clock, [_absent_record()])
    repo.fail = True

    with pytest.raises(StoreError):
        session.select_date(date(2024, 2, 29))

    assert session.selected_date == date(2024, 3, 1)
    assert len(session.records) == 1


def test_begin_edit_requires_existing_record(clock):
    session, _ = _session(clock)
    stray = replace(_absent_record(), employee_id="E101")

    with pytest.raises(ValidationError):
        session.begin_edit(stray)
    assert not session.is_editing


def test_edit_absent_to_work_from_home(clock):
    session, repo = _session(clock, [_absent_record()])

    session.begin_edit(session.records[0])
    assert session.is_editing

    updated = session.apply_edit("Work From Home", "09:00")

    assert updated.status == AttendanceStatus.PRESENT
    assert updated.requested_status == AttendanceStatus.WORK_FROM_HOME
    assert updated.time_in == "09:00"
    assert updated.name == "Dania"
    assert repo.updated[0][0] == "rec-absent"
    assert session.records == [updated]
    assert not session.is_editing


def test_apply_edit_requires_time(clock):
    session, repo = _session(clock, [_absent_record()])
    session.begin_edit(session.records[0])

    with pytest.raises(ValidationError):
        session.apply_edit("Present", "")

    assert repo.updated == []
    assert session.records[0].status == AttendanceStatus.ABSENT


def test_apply_edit_rejects_blank_name(clock):
    session, repo = _session(clock, [replace(_absent_record(), name=" ")])
    session.begin_edit(session.records[0])

    with pytest.raises(ValidationError):
        session.apply_edit("Absent", "")
    assert repo.updated == []


def test_apply_edit_without_begin_fails(clock):
    session, _ = _session(clock, [_absent_record()])

    with pytest.raises(ValidationError):
        session.apply_edit("Absent", "")


def test_apply_edit_missing_record_raises_not_found(clock):
    session, repo = _session(clock, [_absent_record()])
    session.begin_edit(session.records[0])
    repo._records.clear()

    with pytest.raises(NotFoundError):
        session.apply_edit("Absent", "")
    assert session.records[0].record_id == "rec-absent"


def test_cancel_edit_closes_edit_state(clock):
    session, repo = _session(clock, [_absent_record()])
    session.begin_edit(session.records[0])
    session.cancel_edit()

    assert not session.is_editing
    assert repo.updated == []


def test_filter_by_name_and_status(clock):
    session, _ = _session(clock, [_absent_record()])
    session.select_employee("E101")
    session.submit("Present", "08:30")
    session.select_employee("E102")
    session.submit("Present", "07:00")

    assert [r.name for r in session.filter(name="aIs")] == ["Aisha"]
    assert [r.name for r in session.filter(status="Half Present")] == ["Aisha"]
    assert [r.name for r in session.filter(status="Absent")] == ["Dania"]
    assert len(session.filter(status="All")) == 3
    assert session.filter(name="bil", status="Absent") == []


def test_filter_is_pure(clock):
    session, _ = _session(clock, [_absent_record()])
    before = list(session.records)

    first = session.filter(name="dan", status="All")
    second = session.filter(name="dan", status="All")

    assert first == second
    assert first is not session.records
    assert session.records == before
