from __future__ import annotations

from datetime import date
from typing import Iterable

import pandas as pd

from .formatting import holiday_type_label
from .holiday_calendar import duration_in_days, is_past, sort_holidays_by_date
from .models import Holiday, ResolvedDayStatus

HOLIDAY_COLUMNS = ["id", "start_date", "end_date", "type", "label", "days", "is_past"]
STATUS_COLUMNS = ["date", "weekday", "is_working_day", "reason", "source"]


def holidays_frame(holidays: Iterable[Holiday], today: date) -> pd.DataFrame:
    """Table of holidays ordered by start date."""
    rows = [
        {
            "id": h.id,
            "start_date": h.start_date,
            "end_date": h.end_date,
            "type": h.type,
            "label": h.description or holiday_type_label(h.type),
            "days": duration_in_days(h),
            "is_past": is_past(h, today),
        }
        for h in sort_holidays_by_date(holidays)
    ]
    return pd.DataFrame(rows, columns=HOLIDAY_COLUMNS)


def _source(status: ResolvedDayStatus) -> str:
    if status.source_exception is not None:
        return f"{status.source_exception.override_type}: {status.source_exception.reason}"
    if status.source_holiday is not None:
        return status.source_holiday.description
    return ""


def status_frame(statuses: Iterable[ResolvedDayStatus]) -> pd.DataFrame:
    rows = [
        {
            "date": s.date,
            "weekday": s.date.strftime("%a"),
            "is_working_day": s.is_working_day,
            "reason": s.reason,
            "source": _source(s),
        }
        for s in statuses
    ]
    return pd.DataFrame(rows, columns=STATUS_COLUMNS)
