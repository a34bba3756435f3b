from __future__ import annotations

from datetime import date

from .config import DISPLAY_DATE_FORMAT, HOLIDAY_TYPE_LABELS, SATURDAY_PATTERN_LABELS


def fmt_days(days: int) -> str:
    return f"{days} {'Day' if days == 1 else 'Days'}"


def format_date_range(start: date, end: date) -> str:
    """
    Format as 'Mar 10, 2025' for a single day, or
    'Mar 10, 2025 - Mar 12, 2025' for a longer range.
    """
    first = start.strftime(DISPLAY_DATE_FORMAT)
    if end <= start:
        return first
    return f"{first} - {end.strftime(DISPLAY_DATE_FORMAT)}"


def holiday_type_label(holiday_type: str) -> str:
    return HOLIDAY_TYPE_LABELS.get(holiday_type, holiday_type)


def saturday_pattern_label(pattern: str) -> str:
    return SATURDAY_PATTERN_LABELS.get(pattern, pattern)
