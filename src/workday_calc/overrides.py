from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence

from .config import DISPLAY_DATE_FORMAT, REASON_MAX_LENGTH
from .errors import ValidationError
from .holiday_calendar import organization_holidays_on_date
from .intervals import DateRange
from .models import CalendarException, Holiday, ResolvedDayStatus, WorkingDayPolicy
from .policy import is_weekend_non_working

log = logging.getLogger(__name__)


def _display(d: date) -> str:
    return d.strftime(DISPLAY_DATE_FORMAT)


def is_working_day(d: date, calendar: Iterable[Holiday], policy: Optional[WorkingDayPolicy]) -> bool:
    """Working day before exceptions: no declared holiday and no weekend rule."""
    return not organization_holidays_on_date(calendar, d) and not is_weekend_non_working(d, policy)


def validate_exception(
    candidate: CalendarException,
    resolved_calendar: Sequence[Holiday],
    policy: Optional[WorkingDayPolicy],
) -> Optional[ValidationError]:
    """
    Check a calendar exception before it is submitted.

    Returns None when the exception is acceptable, otherwise the first rule
    it breaks. An override that would not change the day's status is
    rejected as redundant.
    """
    if candidate.date is None:
        return ValidationError("MissingField", "date", "Please select a date")

    reason = candidate.reason.strip() if candidate.reason else ""
    if not reason:
        return ValidationError("MissingField", "reason", "Please provide a reason")
    if len(reason) > REASON_MAX_LENGTH:
        return ValidationError("MissingField", "reason", "Reason too long")

    if not candidate.applies_to_all_classes and not candidate.class_ids:
        return ValidationError(
            "NoClassesSelected", "class_ids", "Please select at least one class or apply to all classes"
        )

    d = candidate.date
    if candidate.override_type == "FORCE_HOLIDAY":
        if organization_holidays_on_date(resolved_calendar, d):
            return ValidationError(
                "RedundantException",
                "date",
                f"{_display(d)} is already an organization holiday. "
                "You don't need to create a FORCE_HOLIDAY exception.",
            )
        if is_weekend_non_working(d, policy):
            return ValidationError(
                "RedundantException",
                "date",
                f"{_display(d)} is already a weekend. You don't need to create a FORCE_HOLIDAY exception.",
            )

    if candidate.override_type == "FORCE_WORKING" and is_working_day(d, resolved_calendar, policy):
        return ValidationError(
            "RedundantException",
            "date",
            f"{_display(d)} is already a working day. You don't need to create a FORCE_WORKING exception.",
        )

    return None


def exceptions_on_date(
    exceptions: Iterable[CalendarException], d: date, class_id: Optional[str] = None
) -> List[CalendarException]:
    """Exceptions dated `d` that apply to `class_id` (all-class ones only when None)."""
    return [e for e in exceptions if e.date == d and e.applies_to(class_id)]


def resolve_day_status(
    d: date,
    class_id: Optional[str],
    resolved_calendar: Sequence[Holiday],
    exceptions: Sequence[CalendarException],
    policy: Optional[WorkingDayPolicy],
) -> ResolvedDayStatus:
    # Explicit overrides beat declared holidays, which beat the weekly pattern.
    matching = exceptions_on_date(exceptions, d, class_id)
    if matching:
        exc = matching[0]
        if len(matching) > 1:
            log.debug("%d exceptions on %s for class %s; using %s", len(matching), d, class_id, exc.id)
        return ResolvedDayStatus(
            date=d,
            is_working_day=exc.override_type == "FORCE_WORKING",
            reason="EXCEPTION_OVERRIDE",
            source_exception=exc,
        )

    declared = organization_holidays_on_date(resolved_calendar, d)
    if declared:
        return ResolvedDayStatus(date=d, is_working_day=False, reason="ORG_HOLIDAY", source_holiday=declared[0])

    if is_weekend_non_working(d, policy):
        return ResolvedDayStatus(date=d, is_working_day=False, reason="WEEKEND")

    return ResolvedDayStatus(date=d, is_working_day=True, reason="REGULAR")


def resolve_window(
    window: DateRange,
    class_id: Optional[str],
    resolved_calendar: Sequence[Holiday],
    exceptions: Sequence[CalendarException],
    policy: Optional[WorkingDayPolicy],
) -> List[ResolvedDayStatus]:
    return [resolve_day_status(d, class_id, resolved_calendar, exceptions, policy) for d in window]


def count_working_days(statuses: Iterable[ResolvedDayStatus]) -> int:
    return sum(1 for s in statuses if s.is_working_day)
