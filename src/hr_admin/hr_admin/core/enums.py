from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance statuses, as stored in the documents."""

    PRESENT = "Present"
    HALF_PRESENT = "Half Present"
    APPROVED_LEAVE = "Approved Leave"
    WORK_FROM_HOME = "Work From Home"
    EMERGENCY_LEAVE = "Emergency Leave"
    MEDICAL_LEAVE = "Medical Leave"
    ABSENT = "Absent"
    HOLIDAY = "Holiday"


# What an operator may pick. HALF_PRESENT is only ever derived.
REQUESTABLE_STATUSES = frozenset(
    {
        AttendanceStatus.PRESENT,
        AttendanceStatus.APPROVED_LEAVE,
        AttendanceStatus.WORK_FROM_HOME,
        AttendanceStatus.EMERGENCY_LEAVE,
        AttendanceStatus.MEDICAL_LEAVE,
        AttendanceStatus.ABSENT,
        AttendanceStatus.HOLIDAY,
    }
)

TIME_REQUIRED_STATUSES = frozenset(
    {
        AttendanceStatus.PRESENT,
        AttendanceStatus.WORK_FROM_HOME,
        AttendanceStatus.HOLIDAY,
    }
)


class EmploymentType(str, Enum):
    """Employment category of an employee."""

    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    REMOTE = "Remote"
    TRAINEE = "Trainee"
    INTERNSHIP = "Internship"
    MYSELF = "Myself"


class DateKeyFormat(str, Enum):
    """How a calendar date is written into the `date` field of attendance documents."""

    LOCALE = "locale"
    ISO = "iso"
