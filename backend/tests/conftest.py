import pytest
from datetime import date

from compliance.types import RegulatoryLimits, TimeEntry


@pytest.fixture
def default_limits():
    """EU road transport limits."""
    return RegulatoryLimits()


@pytest.fixture
def reference_date():
    """Wednesday; its week runs Monday 2025-01-20 to Sunday 2025-01-26."""
    return date(2025, 1, 22)


@pytest.fixture
def make_entry():
    """Factory to create TimeEntry objects."""
    def _make_entry(
        entry_date="2025-01-22",
        total_hours: float = 0.0,
        driving_hours: float = 0.0,
        break_hours: float = 0.0,
        overtime_hours: float = 0.0,
        driver_id: str = "driver-1",
        status: str = "completed",
    ) -> TimeEntry:
        return TimeEntry(
            driver_id=driver_id,
            entry_date=entry_date,
            total_hours=total_hours,
            driving_hours=driving_hours,
            break_hours=break_hours,
            overtime_hours=overtime_hours,
            status=status,
        )
    return _make_entry
