from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

import holidays

from .errors import CalendarInputError
from .models import Holiday

log = logging.getLogger(__name__)


@dataclass
class NationalHolidaysCalendar:
    """
    Public holidays of one country (optionally one subdivision), as provided
    by the `holidays` package. Years are loaded lazily and cached.
    """

    country: str
    subdiv: Optional[str] = None
    _cache: Dict[int, Dict[date, str]] = field(default_factory=dict, repr=False)

    def holidays_for_year(self, year: int) -> Dict[date, str]:
        if year in self._cache:
            return self._cache[year]
        log.debug("loading %s/%s public holidays for %d", self.country, self.subdiv, year)
        try:
            country_holidays = holidays.country_holidays(self.country, subdiv=self.subdiv, years=[year])
        except NotImplementedError as e:
            raise CalendarInputError(f"No public holiday data for {self.country!r} (subdivision {self.subdiv!r})") from e
        self._cache[year] = dict(country_holidays.items())
        return self._cache[year]

    def between(self, from_date: date, to_date: date) -> List[Holiday]:
        """One NATIONAL_HOLIDAY record per public holiday in [from_date, to_date]."""
        found: List[Tuple[date, str]] = []
        for year in range(from_date.year, to_date.year + 1):
            for d, name in self.holidays_for_year(year).items():
                if from_date <= d <= to_date:
                    found.append((d, name))

        return [
            Holiday(
                id=f"national-{d.isoformat()}",
                start_date=d,
                end_date=d,
                type="NATIONAL_HOLIDAY",
                description=name,
            )
            for d, name in sorted(found)
        ]


_calendars: Dict[Tuple[str, Optional[str]], NationalHolidaysCalendar] = {}


def national_holidays(from_date: date, to_date: date, country: str, subdiv: Optional[str] = None) -> List[Holiday]:
    key = (country, subdiv)
    if key not in _calendars:
        _calendars[key] = NationalHolidaysCalendar(country, subdiv)
    return _calendars[key].between(from_date, to_date)
