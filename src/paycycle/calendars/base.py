"""
PayCycle Holiday Calendar

Pure holiday and business day lookups against a caller-supplied
holiday list. Nothing is cached and nothing is fetched: the payroll
record store supplies holidays already filtered to the payroll's region,
which keeps every downstream component testable with injected sets.

Malformed holiday entries are skipped with a warning, never raised.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Optional

from ..exceptions import MalformedHolidayError
from ..models import Holiday
from .parsing import parse_holiday

logger = logging.getLogger(__name__)


# Saturday and Sunday (date.weekday(): 0=Monday, 6=Sunday)
WEEKEND_DAYS = frozenset({5, 6})


def _as_holiday(entry: Any) -> Optional[Holiday]:
    """Coerce one entry to a usable Holiday, or None if it is malformed."""
    if isinstance(entry, Holiday):
        if isinstance(entry.date, datetime):
            return Holiday(
                date=entry.date.date(),
                name=entry.name,
                recurring=entry.recurring,
                region=entry.region,
                id=entry.id,
            )
        if isinstance(entry.date, date):
            return entry
        logger.warning(
            "Skipping holiday %r: date %r is not a date", entry.name, entry.date
        )
        return None

    try:
        return parse_holiday(entry)
    except MalformedHolidayError as e:
        logger.warning("Skipping malformed holiday entry: %s", e.message)
        return None


def is_weekend(d: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return d.weekday() in WEEKEND_DAYS


def is_holiday(d: date, holidays: Iterable[Any]) -> bool:
    """
    Check if a date is a holiday.

    Non-recurring holidays match on the exact date; recurring holidays
    match on month and day in any year.

    Args:
        d: Date to check
        holidays: Holiday values (raw mappings are coerced leniently)

    Returns:
        True if any well-formed holiday falls on the date
    """
    for entry in holidays:
        holiday = _as_holiday(entry)
        if holiday is not None and holiday.matches(d):
            return True
    return False


def is_business_day(d: date, holidays: Iterable[Any] = ()) -> bool:
    """A business day is a weekday that is not a holiday."""
    if is_weekend(d):
        return False
    return not is_holiday(d, holidays)


@dataclass
class HolidayCalendar:
    """
    A fixed holiday list with business day helpers.

    Holidays are coerced once on construction, so repeated lookups do not
    re-log malformed entries.

    Usage:
        calendar = HolidayCalendar.from_entries(raw_holidays)
        if calendar.is_business_day(date(2025, 12, 24)):
            ...
    """

    holidays: tuple[Holiday, ...] = field(default_factory=tuple)

    @classmethod
    def from_entries(cls, entries: Iterable[Any]) -> HolidayCalendar:
        """Build a calendar, dropping malformed entries."""
        usable = []
        for entry in entries:
            holiday = _as_holiday(entry)
            if holiday is not None:
                usable.append(holiday)
        return cls(holidays=tuple(usable))

    def is_weekend(self, d: date) -> bool:
        return is_weekend(d)

    def is_holiday(self, d: date) -> bool:
        return any(h.matches(d) for h in self.holidays)

    def is_business_day(self, d: date) -> bool:
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def holiday_for(self, d: date) -> Optional[Holiday]:
        """Get the first holiday falling on a date, if any."""
        for holiday in self.holidays:
            if holiday.matches(d):
                return holiday
        return None

    def get_holidays_in_range(self, start: date, end: date) -> list[tuple[date, Holiday]]:
        """
        Get holiday occurrences within a date range.

        Recurring holidays are expanded into each year of the range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive)

        Returns:
            (occurrence date, holiday) pairs sorted by date
        """
        return holidays_in_range(self.holidays, start, end)


def holidays_in_range(
    holidays: Iterable[Holiday],
    start: date,
    end: date,
) -> list[tuple[date, Holiday]]:
    """
    Materialise holiday occurrences between two dates (inclusive).

    Recurring holidays yield one occurrence per year in the window.
    """
    if start > end:
        return []

    occurrences: list[tuple[date, Holiday]] = []
    for holiday in holidays:
        for year in range(start.year, end.year + 1):
            occurs = holiday.occurs_in_year(year)
            if occurs is not None and start <= occurs <= end:
                occurrences.append((occurs, holiday))

    occurrences.sort(key=lambda pair: (pair[0], pair[1].name))
    return occurrences
