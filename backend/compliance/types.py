"""Type definitions for the compliance module."""

import logging
import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """Raised when the analysis is called with input of the wrong shape."""


class ViolationType(str, Enum):
    """Types of working-time findings."""
    DAILY_WORKING_TIME = "DAILY_WORKING_TIME"
    DAILY_DRIVING_TIME = "DAILY_DRIVING_TIME"
    WEEKLY_WORKING_TIME = "WEEKLY_WORKING_TIME"
    WEEKLY_DRIVING_TIME = "WEEKLY_DRIVING_TIME"


class ViolationSeverity(str, Enum):
    """Severity levels for findings."""
    CRITICAL = "critical"  # Hard limit breached
    WARNING = "warning"  # Approaching a limit


class Period(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class Violation:
    """A single limit finding."""
    rule_type: ViolationType
    severity: ViolationSeverity
    period: Period
    message: str = ""
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "rule_type": self.rule_type.value,
            "severity": self.severity.value,
            "period": self.period.value,
            "message": self.message,
            "details": self.details,
        }


_ENTRY_KEYS = {
    "driver_id": ("driver_id", "driverId"),
    "entry_date": ("entry_date", "entryDate"),
    "total_hours": ("total_hours", "totalHours"),
    "driving_hours": ("driving_hours", "drivingHours"),
    "break_hours": ("break_hours", "breakHours"),
    "overtime_hours": ("overtime_hours", "overtimeHours"),
    "status": ("status",),
}


def to_hours(value: Any, field_name: str = "hours") -> float:
    """Coerce a stored hour value to float, treating missing values as 0."""
    if value is None or value == "":
        return 0.0
    try:
        hours = float(value)
    except (TypeError, ValueError):
        logging.warning(f"Non-numeric {field_name} value {value!r}, counting as 0")
        return 0.0
    if not math.isfinite(hours):
        logging.warning(f"Non-finite {field_name} value {value!r}, counting as 0")
        return 0.0
    return hours


def format_hours(value: float) -> str:
    """Render an hour figure for messages, e.g. 14.0 -> "14", 13.25 -> "13.25"."""
    return f"{round(value, 2):g}"


@dataclass(frozen=True)
class TimeEntry:
    """One recorded working day for a driver."""
    driver_id: Optional[str] = None
    entry_date: Any = None  # ISO date string, date or datetime
    total_hours: float = 0.0
    driving_hours: float = 0.0
    break_hours: float = 0.0
    overtime_hours: float = 0.0
    status: Optional[str] = None  # "active" while clocked in, "completed" after

    @classmethod
    def from_dict(cls, record: Mapping) -> "TimeEntry":
        """Create from a raw time_entries row (snake_case or camelCase keys)."""
        values = {}
        for name, keys in _ENTRY_KEYS.items():
            for key in keys:
                if key in record:
                    values[name] = record[key]
                    break

        return cls(
            driver_id=values.get("driver_id"),
            entry_date=values.get("entry_date"),
            total_hours=to_hours(values.get("total_hours"), "total_hours"),
            driving_hours=to_hours(values.get("driving_hours"), "driving_hours"),
            break_hours=to_hours(values.get("break_hours"), "break_hours"),
            overtime_hours=to_hours(values.get("overtime_hours"), "overtime_hours"),
            status=values.get("status"),
        )


@dataclass(frozen=True)
class RegulatoryLimits:
    """Working Time Directive limits for road transport."""
    jurisdiction: str = "EU"

    # Daily limits (hours)
    max_daily_working_time: float = 13.0
    max_daily_driving_time: float = 9.0
    max_daily_driving_time_extended: float = 10.0  # Allowed twice per week

    # Weekly limits (hours)
    max_weekly_working_time: float = 60.0
    max_weekly_driving_time: float = 56.0

    # Fortnightly limits (hours)
    max_fortnightly_driving_time: float = 90.0

    # Break requirements (minutes)
    break_after_4_5_hours: int = 45
    break_after_6_hours: int = 30
    break_after_9_hours: int = 45

    # Rest periods (hours)
    daily_rest: float = 11.0
    reduced_daily_rest: float = 9.0  # Allowed three times per week
    weekly_rest: float = 45.0
    reduced_weekly_rest: float = 24.0

    # Approaching-limit margins (hours); advisory, not regulatory
    daily_working_warning_margin: float = 1.0
    daily_driving_warning_margin: float = 0.5
    weekly_working_warning_margin: float = 2.0
    weekly_driving_warning_margin: float = 2.0

    week_start_weekday: int = 0  # Monday

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return asdict(self)


@dataclass(frozen=True)
class PeriodTotals:
    """Summed hours for a slice of time entries."""
    entry_count: int = 0
    working_time: float = 0.0
    driving_time: float = 0.0
    break_time: float = 0.0
    overtime: float = 0.0


@dataclass(frozen=True)
class WTDAnalysis:
    """Result of a working-time compliance analysis for one driver.

    Frozen, with tuples for the message lists, so a returned analysis can be
    shared between callers without copying.
    """
    reference_date: date
    week_start: date
    week_end: date

    # Daily analysis
    daily_working_time: float = 0.0
    daily_driving_time: float = 0.0
    daily_breaks: float = 0.0
    daily_rest: float = 0.0  # Not derived yet
    daily_compliance: bool = True
    daily_warnings: tuple[str, ...] = ()

    # Weekly analysis
    weekly_working_time: float = 0.0
    weekly_driving_time: float = 0.0
    weekly_rest: float = 0.0  # Not derived yet
    weekly_compliance: bool = True
    weekly_warnings: tuple[str, ...] = ()

    # Break analysis
    break_compliance: bool = True
    required_breaks: float = 0.0
    taken_breaks: float = 0.0
    break_warnings: tuple[str, ...] = ()

    # Rest analysis
    rest_compliance: bool = True
    rest_warnings: tuple[str, ...] = ()

    # Overall
    overall_compliance: bool = True
    compliance_score: int = 100
    critical_violations: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    violations: tuple[Violation, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        data["violations"] = [v.to_dict() for v in self.violations]
        return data


@dataclass(frozen=True)
class TimeStats:
    """Aggregate statistics over a driver's time entries."""
    total_hours: float = 0.0
    total_overtime: float = 0.0
    total_breaks: float = 0.0
    average_hours_per_day: float = 0.0
    total_days: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_reference_date(reference_date: Any) -> Optional[date]:
    """Validate a reference date argument and reduce it to a calendar date."""
    if reference_date is None:
        return None
    if isinstance(reference_date, datetime):
        return reference_date.date()
    if isinstance(reference_date, date):
        return reference_date
    raise InvalidArgumentError(
        f"reference_date must be a date, datetime or None, got {type(reference_date).__name__}"
    )
