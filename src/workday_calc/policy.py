from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

from .config import SATURDAY_OCCURRENCES
from .intervals import date_range
from .models import Holiday, WorkingDayPolicy

# date.weekday(): Monday=0 .. Sunday=6
SATURDAY = 5
SUNDAY = 6


def nth_weekday_of_month(d: date) -> int:
    """1-indexed occurrence of d's weekday within its month (the 2nd Saturday -> 2)."""
    return (d.day - 1) // 7 + 1


def is_weekend_non_working(d: date, policy: Optional[WorkingDayPolicy]) -> bool:
    """
    True when the weekly pattern of `policy` makes `d` a non-working day.

    Dates outside the policy's validity window get no weekend rule at all;
    organization holidays and exceptions still apply to them.
    """
    if policy is None or not policy.covers(d):
        return False

    weekday = d.weekday()
    if weekday == SUNDAY:
        return policy.sunday_off
    if weekday != SATURDAY:
        return False

    pattern = policy.saturday_off_pattern
    if pattern == "ALL":
        return True
    if pattern == "NONE":
        return False
    return nth_weekday_of_month(d) in SATURDAY_OCCURRENCES.get(pattern, set())


def weekend_holiday(d: date) -> Holiday:
    """Synthetic one-day holiday record for a weekend non-working day."""
    iso = d.isoformat()
    if d.weekday() == SUNDAY:
        return Holiday(id=f"sunday-{iso}", start_date=d, end_date=d, type="SUNDAY", description="Sunday")
    return Holiday(id=f"saturday-{iso}", start_date=d, end_date=d, type="SATURDAY", description="Saturday")


@dataclass(frozen=True)
class WeekendHolidays:
    """
    Weekend holidays of a policy over [from_date, to_date], one entry per day.

    Lazy and restartable: every iteration walks the range again, so the same
    object can be consumed by several views.
    """

    from_date: date
    to_date: date
    policy: Optional[WorkingDayPolicy]

    def __iter__(self) -> Iterator[Holiday]:
        for d in date_range(self.from_date, self.to_date):
            if is_weekend_non_working(d, self.policy):
                yield weekend_holiday(d)


def generate_weekend_holidays(
    from_date: date, to_date: date, policy: Optional[WorkingDayPolicy]
) -> WeekendHolidays:
    return WeekendHolidays(from_date, to_date, policy)


def select_active_policy(policies: Iterable[WorkingDayPolicy], d: date) -> Optional[WorkingDayPolicy]:
    """
    Pick the policy in force on `d`. When windows overlap the most recently
    effective one wins; None if no policy covers the date.
    """
    active: Optional[WorkingDayPolicy] = None
    for policy in policies:
        if not policy.covers(d):
            continue
        if active is None or policy.effective_from > active.effective_from:
            active = policy
    return active
