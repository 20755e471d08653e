from __future__ import annotations

import re
from datetime import datetime, time
from typing import Iterable, Mapping

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^\d{2}:\d{2}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_fields(data: Mapping[str, object], fields: Iterable[str], message: str) -> None:
    for field in fields:
        value = data.get(field)
        if value is None or not str(value).strip():
            raise ValidationError(message)


def parse_hhmm(value: str, field_name: str) -> time:
    """Parse a zero-padded 24-hour HH:MM string into a time."""
    # Zero padding is required: check-in times are ordered as plain strings.
    if not _HHMM.match(value or ""):
        raise ValidationError(f"{field_name} must be HH:MM, got {value!r}")
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid time: {value!r}")
