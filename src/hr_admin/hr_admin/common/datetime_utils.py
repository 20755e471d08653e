from __future__ import annotations

from datetime import date, datetime

from ..core.constants import CHECK_IN_END_MINUTES, CHECK_IN_START_MINUTES, CHECK_IN_STEP_MINUTES
from ..core.enums import DateKeyFormat


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_date_key(value: date, fmt: DateKeyFormat = DateKeyFormat.LOCALE) -> str:
    """Date key stored on attendance documents.

    The locale form is the US short date without zero padding (3/1/2024),
    which is what existing documents carry.
    """
    if fmt == DateKeyFormat.ISO:
        return value.isoformat()
    return f"{value.month}/{value.day}/{value.year}"


def check_in_time_options() -> list[str]:
    """Selectable check-in times, 06:00 to 15:00 every 15 minutes."""
    out: list[str] = []
    for t in range(CHECK_IN_START_MINUTES, CHECK_IN_END_MINUTES + 1, CHECK_IN_STEP_MINUTES):
        out.append(f"{t // 60:02d}:{t % 60:02d}")
    return out
