"""
tests/validation/test_validation.py

Covers:
  - Working-day policy checks (pattern, effective range)
  - Declared holiday checks (description, range, declarable types)
"""

from datetime import date

from workday_calc.models import Holiday, WorkingDayPolicy
from workday_calc.validation import validate_holiday, validate_policy


class TestValidatePolicy:

    def test_valid(self, second_saturday_policy):
        assert validate_policy(second_saturday_policy) is None

    def test_same_day_range(self):
        p = WorkingDayPolicy(True, "ALL", date(2025, 1, 1), date(2025, 1, 1))
        assert validate_policy(p) is None

    def test_effective_to_before_from(self):
        p = WorkingDayPolicy(True, "ALL", date(2025, 6, 1), date(2025, 1, 1))
        error = validate_policy(p)
        assert (error.code, error.field) == ("InvalidRange", "effective_to")

    def test_unknown_pattern(self):
        p = WorkingDayPolicy(True, "FIRST_ONLY", date(2025, 1, 1))
        assert validate_policy(p).code == "InvalidValue"


class TestValidateHoliday:

    def test_valid(self, summer_break):
        assert validate_holiday(summer_break) is None

    def test_blank_description(self):
        h = Holiday("x", date(2025, 1, 1), date(2025, 1, 1), "OTHER", "  ")
        assert (validate_holiday(h).code, validate_holiday(h).field) == ("MissingField", "description")

    def test_reversed_range(self):
        h = Holiday("x", date(2025, 1, 5), date(2025, 1, 1), "OTHER", "Break")
        assert validate_holiday(h).code == "InvalidRange"

    def test_weekend_type_not_declarable(self):
        h = Holiday("x", date(2025, 2, 9), date(2025, 2, 9), "SUNDAY", "Sunday")
        assert (validate_holiday(h).code, validate_holiday(h).field) == ("InvalidValue", "type")
