from datetime import date, datetime

import pytest

# 2025-01-04 is a Saturday
SATURDAY = date(2025, 1, 4)
SUNDAY = date(2025, 1, 5)
MONDAY = date(2025, 1, 6)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def saturday() -> date:
    return SATURDAY


@pytest.fixture
def sunday() -> date:
    return SUNDAY


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 6, 8, 0)


@pytest.fixture
def at():
    """Naive local datetime on a given day: ``at(MONDAY, 17, 1)``."""

    def _at(day: date, hour: int, minute: int = 0, second: int = 0) -> datetime:
        return datetime(day.year, day.month, day.day, hour, minute, second)

    return _at
