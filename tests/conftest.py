from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 10, 0, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now
