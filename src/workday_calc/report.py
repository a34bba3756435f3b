from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .formatting import saturday_pattern_label
from .holiday_calendar import build_display_calendar, upcoming_holidays
from .intervals import month_window
from .io_json import holiday_to_dict
from .models import CalendarCase, Holiday, MonthReport
from .national import national_holidays
from .overrides import count_working_days, resolve_window
from .parsing import fmt_date

log = logging.getLogger(__name__)


def with_national_holidays(
    declared: Sequence[Holiday], from_date: date, to_date: date, country: str
) -> List[Holiday]:
    """Declared holidays plus the country's public holidays in [from_date, to_date]."""
    seeded = national_holidays(from_date, to_date, country)
    known = {(h.start_date, h.end_date) for h in declared}
    # Declared records win over seeded ones for the same day
    merged = list(declared)
    merged.extend(h for h in seeded if (h.start_date, h.end_date) not in known)
    log.debug("seeded %d national holidays for %s", len(seeded), country)
    return merged


def build_month_report(
    case: CalendarCase,
    year: int,
    month: int,
    class_id: Optional[str],
    today: date,
    country: Optional[str] = None,
) -> MonthReport:
    """
    Resolve every day of a month for one class (or the whole organization
    when class_id is None):
    - declared holidays, plus national ones when `country` is given
    - weekend days generated from the policy for this month only
    - exceptions applied on top, per class
    """
    window = month_window(year, month)

    declared = list(case.holidays)
    if country:
        declared = with_national_holidays(declared, window.start, window.end, country)

    calendar = build_display_calendar(declared, case.policy, window)
    statuses = resolve_window(window, class_id, calendar, case.exceptions, case.policy)
    working = count_working_days(statuses)

    reasons = Counter(s.reason for s in statuses)
    policy = case.policy
    explain: Dict[str, Any] = {
        "window": {"start": fmt_date(window.start), "end": fmt_date(window.end), "days": window.days},
        "class_id": class_id,
        "policy": None
        if policy is None
        else {
            "sunday_off": policy.sunday_off,
            "saturday_off_pattern": saturday_pattern_label(policy.saturday_off_pattern),
            "effective_from": fmt_date(policy.effective_from),
            "effective_to": fmt_date(policy.effective_to) if policy.effective_to else None,
        },
        "calendar": [holiday_to_dict(h) for h in calendar],
        "reasons": dict(sorted(reasons.items())),
        "exceptions_applied": [
            {"date": fmt_date(s.date), "exception": s.source_exception.id}
            for s in statuses
            if s.source_exception is not None
        ],
    }

    log.info("%04d-%02d class=%s: %d working days of %d", year, month, class_id, working, window.days)

    return MonthReport(
        year=year,
        month=month,
        class_id=class_id,
        calendar=calendar,
        statuses=statuses,
        upcoming=upcoming_holidays(declared, today),
        working_days=working,
        non_working_days=window.days - working,
        explain=explain,
    )
