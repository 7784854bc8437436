from datetime import date

from pydantic import BaseModel, Field


class TimeEntrySchema(BaseModel):
    driver_id: str | None = None
    entry_date: str | None = None  # ISO date string: "2025-01-20"
    total_hours: float | None = Field(default=None, ge=0)
    driving_hours: float | None = Field(default=None, ge=0)
    break_hours: float | None = Field(default=None, ge=0)
    overtime_hours: float | None = Field(default=None, ge=0)
    status: str | None = None  # "active", "completed"


class AnalyzeRequest(BaseModel):
    time_entries: list[TimeEntrySchema] = []
    reference_date: date | None = None  # Defaults to today


class TimeStatsRequest(BaseModel):
    time_entries: list[TimeEntrySchema] = []


class ViolationSchema(BaseModel):
    """Limit finding in a working-time analysis."""
    rule_type: str  # "DAILY_WORKING_TIME", "WEEKLY_DRIVING_TIME", etc.
    severity: str  # "critical", "warning"
    period: str  # "daily", "weekly"
    message: str
    details: dict | None = None


class WTDAnalysisSchema(BaseModel):
    reference_date: str  # ISO date string: "2025-01-22"
    week_start: str
    week_end: str

    daily_working_time: float
    daily_driving_time: float
    daily_breaks: float
    daily_rest: float
    daily_compliance: bool
    daily_warnings: list[str] = []

    weekly_working_time: float
    weekly_driving_time: float
    weekly_rest: float
    weekly_compliance: bool
    weekly_warnings: list[str] = []

    break_compliance: bool
    required_breaks: float
    taken_breaks: float
    break_warnings: list[str] = []

    rest_compliance: bool
    rest_warnings: list[str] = []

    overall_compliance: bool
    compliance_score: int
    critical_violations: list[str] = []
    warnings: list[str] = []
    violations: list[ViolationSchema] = []


class RegulatoryLimitsSchema(BaseModel):
    jurisdiction: str
    max_daily_working_time: float
    max_daily_driving_time: float
    max_daily_driving_time_extended: float
    max_weekly_working_time: float
    max_weekly_driving_time: float
    max_fortnightly_driving_time: float
    break_after_4_5_hours: int
    break_after_6_hours: int
    break_after_9_hours: int
    daily_rest: float
    reduced_daily_rest: float
    weekly_rest: float
    reduced_weekly_rest: float
    daily_working_warning_margin: float
    daily_driving_warning_margin: float
    weekly_working_warning_margin: float
    weekly_driving_warning_margin: float
    week_start_weekday: int


class TimeStatsSchema(BaseModel):
    total_hours: float
    total_overtime: float
    total_breaks: float
    average_hours_per_day: float
    total_days: int
