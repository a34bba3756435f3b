from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from .config import UPCOMING_HOLIDAYS_LIMIT, WEEKEND_HOLIDAY_TYPES
from .intervals import DateRange
from .models import Holiday, WorkingDayPolicy
from .policy import generate_weekend_holidays


def merge_calendar(api_holidays: Iterable[Holiday], generated_weekend_holidays: Iterable[Holiday]) -> List[Holiday]:
    """
    Concatenate declared and generated holidays, declared first.

    No deduplication: a date can be both a declared holiday and a weekend,
    and both records are kept.
    """
    return [*api_holidays, *generated_weekend_holidays]


def holidays_on_date(holidays: Iterable[Holiday], d: date) -> List[Holiday]:
    return [h for h in holidays if h.covers(d)]


def organization_holidays_on_date(holidays: Iterable[Holiday], d: date) -> List[Holiday]:
    return [h for h in holidays if not h.is_weekend and h.covers(d)]


def filter_by_display_window(holidays: Iterable[Holiday], window_start: date, window_end: date) -> List[Holiday]:
    """
    Keep every holiday overlapping [window_start, window_end]: starting inside,
    ending inside, or spanning the whole window.
    """
    window = DateRange(window_start, window_end)
    return [h for h in holidays if window.overlaps(DateRange(h.start_date, h.end_date))]


def filter_non_weekend_holidays(holidays: Iterable[Holiday]) -> List[Holiday]:
    return [h for h in holidays if not h.is_weekend]


def filter_weekend_types(types: Iterable[str]) -> List[str]:
    return [t for t in types if t not in WEEKEND_HOLIDAY_TYPES]


def sort_holidays_by_date(holidays: Iterable[Holiday]) -> List[Holiday]:
    # sorted() is stable: equal start dates keep their input order
    return sorted(holidays, key=lambda h: h.start_date)


def upcoming_holidays(
    holidays: Iterable[Holiday], from_date: date, limit: int = UPCOMING_HOLIDAYS_LIMIT
) -> List[Holiday]:
    """Declared holidays starting on/after from_date, earliest first."""
    upcoming = [h for h in filter_non_weekend_holidays(holidays) if h.start_date >= from_date]
    return sort_holidays_by_date(upcoming)[: max(limit, 0)]


def duration_in_days(holiday: Holiday) -> int:
    return max((holiday.end_date - holiday.start_date).days + 1, 1)


def is_past(holiday: Holiday, today: date) -> bool:
    return holiday.end_date < today


def build_display_calendar(
    api_holidays: Iterable[Holiday],
    policy: Optional[WorkingDayPolicy],
    window: DateRange,
) -> List[Holiday]:
    """Declared holidays plus the policy's weekend days, scoped to `window`."""
    weekends = generate_weekend_holidays(window.start, window.end, policy)
    merged = merge_calendar(api_holidays, weekends)
    return filter_by_display_window(merged, window.start, window.end)
