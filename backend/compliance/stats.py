"""Summary statistics over a driver's time entries."""

from collections.abc import Mapping
from typing import Sequence, Union

from .engine import coerce_time_entries
from .periods import PeriodAggregator
from .types import TimeEntry, TimeStats


def summarize_time_entries(time_entries: Sequence[Union[TimeEntry, Mapping]]) -> TimeStats:
    """
    Total hours, overtime and breaks across all supplied entries.

    Entries are not filtered by date; the caller decides the range.
    """
    entries = coerce_time_entries(time_entries)
    totals = PeriodAggregator.totals(entries)

    return TimeStats(
        total_hours=totals.working_time,
        total_overtime=totals.overtime,
        total_breaks=totals.break_time,
        average_hours_per_day=totals.working_time / totals.entry_count if totals.entry_count else 0.0,
        total_days=totals.entry_count,
    )
