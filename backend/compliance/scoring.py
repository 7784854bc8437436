"""Compliance score calculation.

The score is an advisory scorecard for dashboards: 100 minus fixed penalties
for breached or nearly breached limits. It is not a legal determination.
"""

from dataclasses import dataclass
from typing import Optional

from .types import RegulatoryLimits


@dataclass(frozen=True)
class ScorePenalties:
    """Points deducted per finding."""
    daily_working_exceeded: int = 20
    daily_driving_exceeded: int = 20
    weekly_working_exceeded: int = 15
    weekly_driving_exceeded: int = 15
    approaching_limit: int = 5
    break_non_compliance: int = 10
    rest_non_compliance: int = 10


def limit_status(value: float, limit: float, margin: float) -> Optional[str]:
    """
    Classify a total against a limit.

    Returns:
        "exceeded" when value > limit, "approaching" when value is above
        limit - margin, otherwise None. A value equal to the limit is
        approaching, not exceeded.
    """
    if value > limit:
        return "exceeded"
    if value > limit - margin:
        return "approaching"
    return None


class ScoreCalculator:
    """Folds period totals and rule outcomes into a 0-100 score."""

    def __init__(self, limits: RegulatoryLimits, penalties: Optional[ScorePenalties] = None):
        self.limits = limits
        self.penalties = penalties or ScorePenalties()

    def _deduction(self, value: float, limit: float, margin: float, exceeded_penalty: int) -> int:
        status = limit_status(value, limit, margin)
        if status == "exceeded":
            return exceeded_penalty
        if status == "approaching":
            return self.penalties.approaching_limit
        return 0

    def calculate(
        self,
        daily_working_time: float,
        daily_driving_time: float,
        weekly_working_time: float,
        weekly_driving_time: float,
        break_compliance: bool,
        rest_compliance: bool,
    ) -> int:
        """Return the compliance score, never below 0."""
        limits = self.limits
        penalties = self.penalties
        score = 100

        score -= self._deduction(
            daily_working_time,
            limits.max_daily_working_time,
            limits.daily_working_warning_margin,
            penalties.daily_working_exceeded,
        )
        score -= self._deduction(
            daily_driving_time,
            limits.max_daily_driving_time,
            limits.daily_driving_warning_margin,
            penalties.daily_driving_exceeded,
        )
        score -= self._deduction(
            weekly_working_time,
            limits.max_weekly_working_time,
            limits.weekly_working_warning_margin,
            penalties.weekly_working_exceeded,
        )
        score -= self._deduction(
            weekly_driving_time,
            limits.max_weekly_driving_time,
            limits.weekly_driving_warning_margin,
            penalties.weekly_driving_exceeded,
        )

        if not break_compliance:
            score -= penalties.break_non_compliance
        if not rest_compliance:
            score -= penalties.rest_non_compliance

        return max(0, score)
