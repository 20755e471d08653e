from __future__ import annotations

from typing import Optional, Union

from ..common.validators import parse_hhmm
from ..core.constants import CHECK_IN_END_MINUTES, CHECK_IN_START_MINUTES
from ..core.enums import REQUESTABLE_STATUSES, TIME_REQUIRED_STATUSES, AttendanceStatus
from ..core.exceptions import ValidationError
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision

_default_factory = AttendanceStrategyFactory()


def parse_requested_status(value: Union[str, AttendanceStatus]) -> AttendanceStatus:
    try:
        status = AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value}")
    if status not in REQUESTABLE_STATUSES:
        raise ValidationError(f"{status.value} cannot be selected directly")
    return status


def needs_time(status: AttendanceStatus) -> bool:
    return status in TIME_REQUIRED_STATUSES


def classify(
    requested: Union[str, AttendanceStatus],
    time_in: Optional[str],
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    """Map the operator's status and check-in to the billed status and stored check-in.

    Holiday and Work From Home bill as Present, Present at or after the
    cutoff bills as Half Present, and statuses without a check-in store "-".
    """
    status = parse_requested_status(requested)
    time_in = str(time_in).strip() if time_in is not None else ""

    if needs_time(status):
        if not time_in:
            raise ValidationError("Check-in time required")
        parsed = parse_hhmm(time_in, "Check-in time")
        minutes = parsed.hour * 60 + parsed.minute
        if not CHECK_IN_START_MINUTES <= minutes <= CHECK_IN_END_MINUTES:
            raise ValidationError(f"Check-in time {time_in} is outside office timing (06:00 to 15:00)")

    strategy = (factory or _default_factory).for_status(status)
    return strategy.decide(requested=status, time_in=time_in)
