from __future__ import annotations

from ...core.constants import NO_TIME
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NoTimeStrategy(AttendanceStrategy):
    """Leaves and absence: status kept as requested, check-in forced to the sentinel."""

    def decide(self, *, requested: AttendanceStatus, time_in: str) -> StatusDecision:
        return StatusDecision(status=requested, time_in=NO_TIME)
