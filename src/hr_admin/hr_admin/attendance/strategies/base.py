from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    time_in: str


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a requested status becomes a billed status."""

    @abstractmethod
    def decide(self, *, requested: AttendanceStatus, time_in: str) -> StatusDecision:
        raise NotImplementedError
