"""Working Time Directive compliance module for driver time entries."""

from .types import (
    InvalidArgumentError,
    Period,
    PeriodTotals,
    RegulatoryLimits,
    TimeEntry,
    TimeStats,
    Violation,
    ViolationSeverity,
    ViolationType,
    WTDAnalysis,
)
from .limits import DEFAULT_LIMITS, load_limits
from .periods import PeriodAggregator
from .validators import (
    BaseRestRule,
    BreakRuleEngine,
    PlaceholderRestRule,
)
from .scoring import ScoreCalculator, ScorePenalties
from .engine import ComplianceAnalyzer, analyze_compliance
from .stats import summarize_time_entries

__all__ = [
    "InvalidArgumentError",
    "Period",
    "PeriodTotals",
    "RegulatoryLimits",
    "TimeEntry",
    "TimeStats",
    "Violation",
    "ViolationSeverity",
    "ViolationType",
    "WTDAnalysis",
    "DEFAULT_LIMITS",
    "load_limits",
    "PeriodAggregator",
    "BaseRestRule",
    "BreakRuleEngine",
    "PlaceholderRestRule",
    "ScoreCalculator",
    "ScorePenalties",
    "ComplianceAnalyzer",
    "analyze_compliance",
    "summarize_time_entries",
]
