"""
PayCycle Calendars

Holiday lookups for business day calculations.

Provides:
- is_holiday / is_weekend / is_business_day pure checks
- HolidayCalendar for repeated lookups against one holiday list
- Lenient holiday parsing and region filtering

Usage:
    from paycycle.calendars import (
        HolidayCalendar,
        filter_by_region,
        is_business_day,
        parse_holidays,
    )

    holidays = filter_by_region(parse_holidays(raw_entries), "NSW")
    if is_business_day(date(2025, 12, 26), holidays):
        ...
"""
from __future__ import annotations

from .base import (
    WEEKEND_DAYS,
    HolidayCalendar,
    holidays_in_range,
    is_business_day,
    is_holiday,
    is_weekend,
)
from .parsing import (
    filter_by_region,
    parse_holiday,
    parse_holidays,
)

__all__ = [
    "WEEKEND_DAYS",
    "HolidayCalendar",
    "holidays_in_range",
    "is_business_day",
    "is_holiday",
    "is_weekend",
    "filter_by_region",
    "parse_holiday",
    "parse_holidays",
]
