from .time import utc_now, resolve_timezone, today_in, parse_entry_date
from .log import setup_logging

__all__ = ["utc_now", "resolve_timezone", "today_in", "parse_entry_date", "setup_logging"]
