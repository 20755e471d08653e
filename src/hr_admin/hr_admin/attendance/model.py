from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for one employee on one date.

    `requested_status` is what the operator picked; `status` is the billed
    status derived from it by the classifier. `date` is the stored date key.
    """

    record_id: Optional[str]
    employee_id: str
    name: str
    role: str
    requested_status: AttendanceStatus
    status: AttendanceStatus
    time_in: str
    date: str
    created_at: Optional[datetime] = None
