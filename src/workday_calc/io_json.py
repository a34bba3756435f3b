from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .config import HOLIDAY_TYPES, OVERRIDE_TYPES, SATURDAY_OFF_PATTERNS
from .errors import CalendarInputError
from .models import CalendarCase, CalendarException, Holiday, ResolvedDayStatus, WorkingDayPolicy
from .parsing import fmt_date, parse_date

log = logging.getLogger(__name__)


def _literal(value: Any, allowed: set, what: str) -> str:
    if value not in allowed:
        raise CalendarInputError(f"Unknown {what}: {value!r}")
    return value


def _boolean(value: Any, what: str) -> bool:
    # JSON true/false only; "false" or 0 would silently flip meaning
    if not isinstance(value, bool):
        raise CalendarInputError(f"{what} must be true or false, got {value!r}")
    return value


def policy_from_dict(data: Dict[str, Any]) -> WorkingDayPolicy:
    try:
        return WorkingDayPolicy(
            sunday_off=_boolean(data["sunday_off"], "sunday_off"),
            saturday_off_pattern=_literal(data["saturday_off_pattern"], SATURDAY_OFF_PATTERNS, "saturday_off_pattern"),  # type: ignore
            effective_from=parse_date(data["effective_from"]),
            effective_to=parse_date(data["effective_to"]) if data.get("effective_to") else None,
        )
    except KeyError as e:
        raise CalendarInputError(f"Working day policy is missing {e.args[0]!r}") from e
    except TypeError as e:
        raise CalendarInputError(f"Malformed working day policy: {e}") from e


def holiday_from_dict(data: Dict[str, Any]) -> Holiday:
    try:
        start = parse_date(data["start_date"])
        return Holiday(
            id=str(data["id"]),
            start_date=start,
            end_date=parse_date(data["end_date"]) if data.get("end_date") else start,
            type=_literal(data["type"], HOLIDAY_TYPES, "holiday type"),  # type: ignore
            description=data.get("description") or "",
        )
    except KeyError as e:
        raise CalendarInputError(f"Holiday is missing {e.args[0]!r}") from e
    except TypeError as e:
        raise CalendarInputError(f"Malformed holiday: {e}") from e


def exception_from_dict(data: Dict[str, Any]) -> CalendarException:
    try:
        applies_to_all = _boolean(data.get("applies_to_all_classes", False), "applies_to_all_classes")
        return CalendarException(
            id=str(data["id"]),
            date=parse_date(data["date"]) if data.get("date") else None,
            override_type=_literal(data["override_type"], OVERRIDE_TYPES, "override_type"),  # type: ignore
            applies_to_all_classes=applies_to_all,
            class_ids=frozenset() if applies_to_all else frozenset(data.get("class_ids") or []),
            reason=data.get("reason") or "",
        )
    except KeyError as e:
        raise CalendarInputError(f"Calendar exception is missing {e.args[0]!r}") from e
    except TypeError as e:
        raise CalendarInputError(f"Malformed calendar exception: {e}") from e


def case_from_dict(data: Dict[str, Any]) -> CalendarCase:
    policy: Optional[WorkingDayPolicy] = None
    if data.get("policy"):
        policy = policy_from_dict(data["policy"])

    holidays: List[Holiday] = [holiday_from_dict(h) for h in data.get("holidays") or []]
    exceptions: List[CalendarException] = [exception_from_dict(e) for e in data.get("exceptions") or []]
    return CalendarCase(policy=policy, holidays=holidays, exceptions=exceptions)


def load_case(path: str) -> CalendarCase:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CalendarInputError(f"{path} is not valid JSON: {e}") from e

    case = case_from_dict(data)
    log.info(
        "loaded %s: %d holidays, %d exceptions, policy=%s",
        path,
        len(case.holidays),
        len(case.exceptions),
        "yes" if case.policy else "none",
    )
    return case


def holiday_to_dict(h: Holiday) -> Dict[str, Any]:
    return {
        "id": h.id,
        "start_date": fmt_date(h.start_date),
        "end_date": fmt_date(h.end_date),
        "type": h.type,
        "description": h.description,
    }


def dump_status(status: ResolvedDayStatus) -> Dict[str, Any]:
    return {
        "date": fmt_date(status.date),
        "is_working_day": status.is_working_day,
        "reason": status.reason,
        "source_holiday": holiday_to_dict(status.source_holiday) if status.source_holiday else None,
        "source_exception": status.source_exception.id if status.source_exception else None,
    }
