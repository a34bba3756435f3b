from __future__ import annotations

from datetime import date, datetime

from .config import DATE_FORMAT
from .errors import CalendarInputError


def parse_date(s: str) -> date:
    """
    Parse a date-only value in format 'yyyy-mm-dd'. Times and offsets are
    rejected: days are compared as calendar dates, never as instants.
    """
    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise CalendarInputError(f"Invalid date {s!r}; expected YYYY-MM-DD") from e


def parse_month(s: str) -> tuple[int, int]:
    """Parse 'yyyy-mm' into (year, month)."""
    try:
        parsed = datetime.strptime(s, "%Y-%m")
    except (TypeError, ValueError) as e:
        raise CalendarInputError(f"Invalid month {s!r}; expected YYYY-MM") from e
    return parsed.year, parsed.month


def fmt_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)
