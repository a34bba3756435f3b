"""Shared fixtures: policies and records used across the test suite."""

from datetime import date

import pytest

from workday_calc.models import CalendarException, Holiday, WorkingDayPolicy


@pytest.fixture
def second_saturday_policy():
    """Sundays off plus the 2nd Saturday, open-ended from 2025-01-01."""
    return WorkingDayPolicy(
        sunday_off=True,
        saturday_off_pattern="SECOND_ONLY",
        effective_from=date(2025, 1, 1),
    )


@pytest.fixture
def weekends_off_policy():
    return WorkingDayPolicy(
        sunday_off=True,
        saturday_off_pattern="ALL",
        effective_from=date(2000, 1, 1),
    )


@pytest.fixture
def holi():
    # Friday 2025-03-14
    return Holiday(
        id="h-holi",
        start_date=date(2025, 3, 14),
        end_date=date(2025, 3, 14),
        type="FESTIVAL",
        description="Holi",
    )


@pytest.fixture
def summer_break():
    return Holiday(
        id="h-summer",
        start_date=date(2025, 5, 20),
        end_date=date(2025, 6, 10),
        type="ORGANIZATION_HOLIDAY",
        description="Summer break",
    )


@pytest.fixture
def make_exception():
    """Factory: an all-class exception unless `classes` is given."""

    def _make(d, override_type="FORCE_WORKING", classes=None, reason="Annual day rehearsal", eid="e1"):
        return CalendarException(
            id=eid,
            date=d,
            override_type=override_type,
            applies_to_all_classes=classes is None,
            class_ids=frozenset(classes or ()),
            reason=reason,
        )

    return _make
