from __future__ import annotations

from ...core.constants import HALF_DAY_CUTOFF
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """Present in the office; arriving at or after the cutoff counts as half a day."""

    def __init__(self, cutoff: str = HALF_DAY_CUTOFF):
        self._cutoff = cutoff

    def decide(self, *, requested: AttendanceStatus, time_in: str) -> StatusDecision:
        # Zero-padded HH:MM compares correctly as plain strings.
        if time_in >= self._cutoff:
            return StatusDecision(status=AttendanceStatus.HALF_PRESENT, time_in=time_in)
        return StatusDecision(status=AttendanceStatus.PRESENT, time_in=time_in)
