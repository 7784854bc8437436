"""Slicing of time entries into the analyzed day and week."""

import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from utils.time import parse_entry_date

from .types import PeriodTotals, RegulatoryLimits, TimeEntry, to_hours


def _entry_day(entry: TimeEntry, warn: bool) -> Optional[date]:
    try:
        return parse_entry_date(entry.entry_date)
    except (ValueError, OverflowError):
        if warn:
            logging.warning(
                f"Invalid entry_date format: {entry.entry_date!r} "
                f"(driver {entry.driver_id}), skipping entry"
            )
        return None


class PeriodAggregator:
    """Groups time entries into the reference day and its calendar week."""

    def __init__(self, limits: RegulatoryLimits):
        self.limits = limits

    def week_bounds(self, reference_date: date) -> tuple[date, date]:
        """Return (week_start, week_end) of the week containing reference_date."""
        offset = (reference_date.weekday() - self.limits.week_start_weekday) % 7
        week_start = reference_date - timedelta(days=offset)
        return week_start, week_start + timedelta(days=6)

    def daily_slice(self, entries: Iterable[TimeEntry], reference_date: date) -> list[TimeEntry]:
        """Entries recorded on reference_date. Undated entries are dropped."""
        return [e for e in entries if _entry_day(e, warn=False) == reference_date]

    def weekly_slice(self, entries: Iterable[TimeEntry], reference_date: date) -> list[TimeEntry]:
        """Entries recorded within the week of reference_date, bounds inclusive."""
        week_start, week_end = self.week_bounds(reference_date)
        weekly = []
        for entry in entries:
            if entry.entry_date is None:
                continue
            day = _entry_day(entry, warn=True)
            if day is not None and week_start <= day <= week_end:
                weekly.append(entry)
        return weekly

    @staticmethod
    def totals(entries: Iterable[TimeEntry]) -> PeriodTotals:
        """Sum the hour fields of a slice; missing or non-finite values count as 0."""
        count = 0
        working = driving = breaks = overtime = 0.0
        for entry in entries:
            count += 1
            working += to_hours(entry.total_hours, "total_hours")
            driving += to_hours(entry.driving_hours, "driving_hours")
            breaks += to_hours(entry.break_hours, "break_hours")
            overtime += to_hours(entry.overtime_hours, "overtime_hours")

        return PeriodTotals(
            entry_count=count,
            working_time=working,
            driving_time=driving,
            break_time=breaks,
            overtime=overtime,
        )
