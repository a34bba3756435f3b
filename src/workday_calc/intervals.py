from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days [start, end]."""

    start: date
    end: date

    def is_valid(self) -> bool:
        return self.end >= self.start

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1 if self.is_valid() else 0

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def __iter__(self) -> Iterator[date]:
        return date_range(self.start, self.end)


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield all dates between start and end (inclusive)."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_window(year: int, month: int) -> DateRange:
    last_day = calendar.monthrange(year, month)[1]
    return DateRange(date(year, month, 1), date(year, month, last_day))
