from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PaidAsPresentStrategy(AttendanceStrategy):
    """Holiday and Work From Home are billed as a full Present day, whatever the time."""

    def decide(self, *, requested: AttendanceStatus, time_in: str) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, time_in=time_in)
