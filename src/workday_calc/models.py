from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, FrozenSet, List, Literal, Optional

from .config import WEEKEND_HOLIDAY_TYPES


SaturdayOffPattern = Literal["ALL", "SECOND_ONLY", "SECOND_AND_FOURTH", "NONE"]
HolidayType = Literal[
    "SUNDAY",
    "SATURDAY",
    "SECOND_SATURDAY",
    "NATIONAL_HOLIDAY",
    "FESTIVAL",
    "ORGANIZATION_HOLIDAY",
    "OTHER",
]
OverrideType = Literal["FORCE_WORKING", "FORCE_HOLIDAY"]
DayReason = Literal["REGULAR", "WEEKEND", "ORG_HOLIDAY", "EXCEPTION_OVERRIDE"]


@dataclass(frozen=True)
class WorkingDayPolicy:
    sunday_off: bool
    saturday_off_pattern: SaturdayOffPattern
    effective_from: date
    effective_to: Optional[date] = None      # None = open-ended

    def is_valid(self) -> bool:
        return self.effective_to is None or self.effective_to >= self.effective_from

    def covers(self, d: date) -> bool:
        if d < self.effective_from:
            return False
        return self.effective_to is None or d <= self.effective_to


@dataclass(frozen=True)
class Holiday:
    id: str
    start_date: date
    end_date: date                # inclusive
    type: HolidayType
    description: str

    @property
    def is_weekend(self) -> bool:
        return self.type in WEEKEND_HOLIDAY_TYPES

    def covers(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date


@dataclass(frozen=True)
class CalendarException:
    id: str
    date: Optional[date]          # None only for an incomplete candidate
    override_type: OverrideType
    applies_to_all_classes: bool
    class_ids: FrozenSet[str] = frozenset()
    reason: str = ""

    def applies_to(self, class_id: Optional[str]) -> bool:
        if self.applies_to_all_classes:
            return True
        return class_id is not None and class_id in self.class_ids


@dataclass(frozen=True)
class ResolvedDayStatus:
    date: date
    is_working_day: bool
    reason: DayReason
    source_holiday: Optional[Holiday] = None
    source_exception: Optional[CalendarException] = None


@dataclass
class CalendarCase:
    policy: Optional[WorkingDayPolicy]
    holidays: List[Holiday] = field(default_factory=list)
    exceptions: List[CalendarException] = field(default_factory=list)


@dataclass
class MonthReport:
    year: int
    month: int
    class_id: Optional[str]

    # Declared + national + generated weekend holidays inside the month
    calendar: List[Holiday]
    statuses: List[ResolvedDayStatus]
    upcoming: List[Holiday]

    working_days: int
    non_working_days: int

    # Explain / evidence
    explain: Dict[str, Any]
