"""Break and rest rules for working-time compliance."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from .types import RegulatoryLimits, TimeEntry, format_hours

# Working-time tiers (hours) that trigger a break requirement
FIRST_BREAK_TIER = 4.5
SECOND_BREAK_TIER = 6.0
THIRD_BREAK_TIER = 9.0


class BreakRuleEngine:
    """Checks taken break time against the tiered break requirement."""

    def __init__(self, limits: RegulatoryLimits):
        self.limits = limits

    def required_break_minutes(self, working_time: float) -> int:
        """Minutes of break required for a day with working_time hours."""
        if working_time <= FIRST_BREAK_TIER:
            return 0
        if working_time <= SECOND_BREAK_TIER:
            return self.limits.break_after_4_5_hours
        if working_time <= THIRD_BREAK_TIER:
            return self.limits.break_after_6_hours
        return self.limits.break_after_9_hours

    def required_break_hours(self, working_time: float) -> float:
        return self.required_break_minutes(working_time) / 60

    def is_break_compliant(self, working_time: float, break_time: float) -> bool:
        """Whether break_time hours meet the requirement for working_time hours."""
        return break_time >= self.required_break_hours(working_time)

    def break_warnings(self, working_time: float, break_time: float) -> list[str]:
        """
        Warnings for insufficient breaks.

        The tiered shortfall and the after-6h shortfall are reported
        independently, so both can appear for the same day.
        """
        warnings = []
        required = self.required_break_hours(working_time)

        if working_time > FIRST_BREAK_TIER and break_time < required:
            warnings.append(
                f"Break time ({format_hours(break_time)}h) is less than required "
                f"({format_hours(required)}h) for {format_hours(working_time)}h of work"
            )

        if working_time > SECOND_BREAK_TIER and break_time < self.limits.break_after_6_hours / 60:
            warnings.append("Additional break required after 6 hours of work")

        return warnings


class BaseRestRule(ABC):
    """Base class for rest-period rules."""

    def __init__(self, limits: RegulatoryLimits):
        self.limits = limits

    @abstractmethod
    def is_rest_compliant(self, entries: Sequence[TimeEntry], reference_date: date) -> bool:
        """Whether daily and weekly rest requirements are met."""
        pass

    @abstractmethod
    def rest_warnings(self, entries: Sequence[TimeEntry], reference_date: date) -> list[str]:
        """Warnings about rest periods."""
        pass


class PlaceholderRestRule(BaseRestRule):
    """
    Rest rule that always reports compliance.

    Time entries carry daily totals only, so the gap between one shift's end
    and the next shift's start cannot be derived from them.
    """

    def is_rest_compliant(self, entries: Sequence[TimeEntry], reference_date: date) -> bool:
        return True

    def rest_warnings(self, entries: Sequence[TimeEntry], reference_date: date) -> list[str]:
        return []
