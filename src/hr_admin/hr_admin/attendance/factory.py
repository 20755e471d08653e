from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import HALF_DAY_CUTOFF
from ..core.enums import AttendanceStatus
from .strategies.base import AttendanceStrategy
from .strategies.no_time_strategy import NoTimeStrategy
from .strategies.paid_as_present_strategy import PaidAsPresentStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the requested status."""

    half_day_cutoff: str = field(default=HALF_DAY_CUTOFF)

    def for_status(self, requested: AttendanceStatus) -> AttendanceStrategy:
        if requested == AttendanceStatus.PRESENT:
            return PresentStrategy(self.half_day_cutoff)
        if requested in (AttendanceStatus.HOLIDAY, AttendanceStatus.WORK_FROM_HOME):
            return PaidAsPresentStrategy()
        return NoTimeStrategy()
