"""Time-related utility functions."""

import re
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

FULL_DATE_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}|\d{8})(?=$|[^\d-])")


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def resolve_timezone(tz_name: str = "UTC") -> tzinfo:
    """
    Look up an IANA timezone by name.

    Raises:
        ZoneInfoNotFoundError: If the name is not in the timezone database.
        ValueError: If the name is not a valid timezone key.
    """
    if not tz_name or tz_name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(tz_name)


def today_in(tz_name: str = "UTC") -> date:
    """Return today's calendar date in the given IANA timezone."""
    return utc_now().astimezone(resolve_timezone(tz_name)).date()


def parse_entry_date(value: Any) -> Optional[date]:
    """
    Reduce a stored entry date to a calendar date.

    Accepts ISO strings ("2025-01-20" or a full ISO timestamp, in which case
    the date component is used), date and datetime objects.

    Returns:
        The date, or None when the value is missing.

    Raises:
        ValueError: If the value is present but not an ISO date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported entry date type: {type(value).__name__}")

    value = value.strip()
    if not value:
        return None

    # isoparse also takes "2025-01" or "2025"; entries need a full calendar date
    if not FULL_DATE_PATTERN.match(value):
        raise ValueError(f"Entry date is not a full YYYY-MM-DD date: {value!r}")
    return date_parser.isoparse(value).date()
