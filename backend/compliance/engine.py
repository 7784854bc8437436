"""Working-time compliance engine that orchestrates aggregation, rules and scoring."""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Optional, Sequence, Union
from zoneinfo import ZoneInfoNotFoundError

from utils.time import resolve_timezone, today_in

from .limits import DEFAULT_LIMITS
from .periods import PeriodAggregator
from .scoring import ScoreCalculator, ScorePenalties, limit_status
from .types import (
    InvalidArgumentError,
    Period,
    PeriodTotals,
    RegulatoryLimits,
    TimeEntry,
    Violation,
    ViolationSeverity,
    ViolationType,
    WTDAnalysis,
    format_hours,
    normalize_reference_date,
)
from .validators import BaseRestRule, BreakRuleEngine, PlaceholderRestRule


def coerce_time_entries(time_entries) -> list[TimeEntry]:
    """
    Validate the shape of the input and convert raw rows to TimeEntry.

    Raises:
        InvalidArgumentError: If time_entries is not a list/tuple, or holds
            something other than TimeEntry objects or mappings.
    """
    if not isinstance(time_entries, (list, tuple)):
        raise InvalidArgumentError(
            f"time_entries must be a list of time entries, got {type(time_entries).__name__}"
        )

    entries = []
    for idx, entry in enumerate(time_entries):
        if isinstance(entry, TimeEntry):
            entries.append(entry)
        elif isinstance(entry, Mapping):
            entries.append(TimeEntry.from_dict(entry))
        else:
            raise InvalidArgumentError(
                f"time_entries[{idx}] must be a TimeEntry or a mapping, got {type(entry).__name__}"
            )
    return entries


class ComplianceAnalyzer:
    """
    Main engine for Working Time Directive analysis.

    Slices a driver's entries into the reference day and week, checks the
    totals against the regulatory limits, evaluates break and rest rules and
    scores the result. Instances hold only immutable configuration and can be
    shared between callers.
    """

    def __init__(
        self,
        limits: RegulatoryLimits = DEFAULT_LIMITS,
        rest_rule: Optional[BaseRestRule] = None,
        penalties: Optional[ScorePenalties] = None,
        timezone: str = "UTC",
    ):
        try:
            resolve_timezone(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise RuntimeError(
                f"Invalid WTD_TIMEZONE {timezone!r}: not a known IANA timezone. "
                "Please set a name such as Europe/London in your .env file."
            ) from e

        self.limits = limits
        self.timezone = timezone
        self.aggregator = PeriodAggregator(limits)
        self.break_rules = BreakRuleEngine(limits)
        self.rest_rule = rest_rule or PlaceholderRestRule(limits)
        self.scorer = ScoreCalculator(limits, penalties)

    def analyze(
        self,
        time_entries: Sequence[Union[TimeEntry, Mapping]],
        reference_date: Optional[Union[date, datetime]] = None,
    ) -> WTDAnalysis:
        """
        Run the working-time analysis for one driver.

        Args:
            time_entries: The driver's entries, unsorted and unfiltered by date
            reference_date: Day to analyze (defaults to today)

        Returns:
            WTDAnalysis for the reference day and its week
        """
        entries = coerce_time_entries(time_entries)
        day = normalize_reference_date(reference_date) or today_in(self.timezone)
        week_start, week_end = self.aggregator.week_bounds(day)

        daily = self.aggregator.totals(self.aggregator.daily_slice(entries, day))
        weekly = self.aggregator.totals(self.aggregator.weekly_slice(entries, day))

        violations = self._check_limits(daily, weekly)

        break_compliance = self.break_rules.is_break_compliant(daily.working_time, daily.break_time)
        break_warnings = self.break_rules.break_warnings(daily.working_time, daily.break_time)

        rest_compliance = self.rest_rule.is_rest_compliant(entries, day)
        rest_warnings = self.rest_rule.rest_warnings(entries, day)

        score = self.scorer.calculate(
            daily_working_time=daily.working_time,
            daily_driving_time=daily.driving_time,
            weekly_working_time=weekly.working_time,
            weekly_driving_time=weekly.driving_time,
            break_compliance=break_compliance,
            rest_compliance=rest_compliance,
        )

        critical = tuple(v.message for v in violations if v.severity == ViolationSeverity.CRITICAL)
        warnings = [v for v in violations if v.severity == ViolationSeverity.WARNING]

        logging.debug(
            f"WTD analysis for {day.isoformat()}: {daily.entry_count} daily / "
            f"{weekly.entry_count} weekly entries, score {score}, "
            f"{len(critical)} critical, {len(warnings)} warnings"
        )

        limits = self.limits
        return WTDAnalysis(
            reference_date=day,
            week_start=week_start,
            week_end=week_end,
            daily_working_time=daily.working_time,
            daily_driving_time=daily.driving_time,
            daily_breaks=daily.break_time,
            daily_rest=0.0,
            daily_compliance=(
                daily.working_time <= limits.max_daily_working_time
                and daily.driving_time <= limits.max_daily_driving_time
            ),
            daily_warnings=tuple(w.message for w in warnings if w.period == Period.DAILY),
            weekly_working_time=weekly.working_time,
            weekly_driving_time=weekly.driving_time,
            weekly_rest=0.0,
            weekly_compliance=(
                weekly.working_time <= limits.max_weekly_working_time
                and weekly.driving_time <= limits.max_weekly_driving_time
            ),
            weekly_warnings=tuple(w.message for w in warnings if w.period == Period.WEEKLY),
            break_compliance=break_compliance,
            required_breaks=self.break_rules.required_break_hours(daily.working_time),
            taken_breaks=daily.break_time,
            break_warnings=tuple(break_warnings),
            rest_compliance=rest_compliance,
            rest_warnings=tuple(rest_warnings),
            overall_compliance=not critical,
            compliance_score=score,
            critical_violations=critical,
            warnings=tuple(w.message for w in warnings),
            violations=tuple(violations),
        )

    def _check_limits(self, daily: PeriodTotals, weekly: PeriodTotals) -> list[Violation]:
        """Classify the four period totals as exceeded or approaching their limits."""
        limits = self.limits
        checks = [
            (ViolationType.DAILY_WORKING_TIME, Period.DAILY, "Daily working time",
             daily.working_time, limits.max_daily_working_time, limits.daily_working_warning_margin),
            (ViolationType.DAILY_DRIVING_TIME, Period.DAILY, "Daily driving time",
             daily.driving_time, limits.max_daily_driving_time, limits.daily_driving_warning_margin),
            (ViolationType.WEEKLY_WORKING_TIME, Period.WEEKLY, "Weekly working time",
             weekly.working_time, limits.max_weekly_working_time, limits.weekly_working_warning_margin),
            (ViolationType.WEEKLY_DRIVING_TIME, Period.WEEKLY, "Weekly driving time",
             weekly.driving_time, limits.max_weekly_driving_time, limits.weekly_driving_warning_margin),
        ]

        violations = []
        for rule_type, period, label, value, limit, margin in checks:
            status = limit_status(value, limit, margin)
            if status is None:
                continue

            if status == "exceeded":
                severity = ViolationSeverity.CRITICAL
                verb = "exceeds"
            else:
                severity = ViolationSeverity.WARNING
                verb = "approaching"

            violations.append(Violation(
                rule_type=rule_type,
                severity=severity,
                period=period,
                message=f"{label} ({format_hours(value)}h) {verb} limit ({format_hours(limit)}h)",
                details={
                    "hours": round(value, 2),
                    "limit": limit,
                    "margin": margin,
                },
            ))

        return violations


_default_analyzer = ComplianceAnalyzer()


def analyze_compliance(
    time_entries: Sequence[Union[TimeEntry, Mapping]],
    reference_date: Optional[Union[date, datetime]] = None,
) -> WTDAnalysis:
    """
    Analyze a driver's time entries with the default EU limits.

    This is a convenience function for callers that do not need custom
    limits or rest rules.
    """
    return _default_analyzer.analyze(time_entries, reference_date)
