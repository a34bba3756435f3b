from __future__ import annotations

from typing import Optional

from .config import ORGANIZATION_HOLIDAY_TYPES, SATURDAY_OFF_PATTERNS
from .errors import ValidationError
from .models import Holiday, WorkingDayPolicy


def validate_policy(policy: WorkingDayPolicy) -> Optional[ValidationError]:
    if policy.saturday_off_pattern not in SATURDAY_OFF_PATTERNS:
        return ValidationError(
            "InvalidValue", "saturday_off_pattern", f"Unknown Saturday pattern: {policy.saturday_off_pattern}"
        )
    if not policy.is_valid():
        return ValidationError("InvalidRange", "effective_to", "Effective to date cannot be before effective from")
    return None


def validate_holiday(holiday: Holiday) -> Optional[ValidationError]:
    """Checks a holiday an organization wants to declare."""
    if not holiday.description.strip():
        return ValidationError("MissingField", "description", "Please provide a description")
    if holiday.end_date < holiday.start_date:
        return ValidationError("InvalidRange", "end_date", "End date cannot be before start date")
    if holiday.type not in ORGANIZATION_HOLIDAY_TYPES:
        # SUNDAY/SATURDAY come from the working-day policy
        return ValidationError("InvalidValue", "type", f"Holiday type {holiday.type} cannot be declared")
    return None
