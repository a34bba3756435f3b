from __future__ import annotations

# Date-only values, ISO on the wire
DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%b %d, %Y"

# Holiday types generated from the working-day policy (never persisted)
WEEKEND_HOLIDAY_TYPES = {"SUNDAY", "SATURDAY"}

# Holiday types an organization may declare
ORGANIZATION_HOLIDAY_TYPES = {
    "NATIONAL_HOLIDAY",
    "FESTIVAL",
    "SECOND_SATURDAY",
    "ORGANIZATION_HOLIDAY",
    "OTHER",
}

HOLIDAY_TYPES = WEEKEND_HOLIDAY_TYPES | ORGANIZATION_HOLIDAY_TYPES

SATURDAY_OFF_PATTERNS = {"ALL", "SECOND_ONLY", "SECOND_AND_FOURTH", "NONE"}

# nth Saturdays of the month that are off, per pattern (ALL/NONE handled apart)
SATURDAY_OCCURRENCES = {
    "SECOND_ONLY": {2},
    "SECOND_AND_FOURTH": {2, 4},
}

OVERRIDE_TYPES = {"FORCE_WORKING", "FORCE_HOLIDAY"}

REASON_MAX_LENGTH = 500
UPCOMING_HOLIDAYS_LIMIT = 5

# Country used to seed NATIONAL_HOLIDAY records (override with WORKDAY_CALC_COUNTRY)
DEFAULT_COUNTRY = "IN"

HOLIDAY_TYPE_LABELS = {
    "SUNDAY": "Sunday",
    "SATURDAY": "Saturday",
    "SECOND_SATURDAY": "Second Saturday",
    "NATIONAL_HOLIDAY": "National Holiday",
    "FESTIVAL": "Festival",
    "ORGANIZATION_HOLIDAY": "Organization Holiday",
    "OTHER": "Other",
}

SATURDAY_PATTERN_LABELS = {
    "ALL": "All Saturdays Off",
    "SECOND_ONLY": "Second Saturday Only",
    "SECOND_AND_FOURTH": "Second and Fourth Saturday",
    "NONE": "No Saturday Off",
}
