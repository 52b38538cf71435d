"""
PayCycle Date Type Resolver

Refines a cycle-advanced candidate date to the payroll's anchor semantics.

- FIXED_DATE: day of month date_value (1-31), clamped to the month's length
- END_OF_MONTH / START_OF_MONTH: last / first day of the candidate's month
- WEEK_A: first date_value weekday of the candidate's month
- WEEK_B: first date_value weekday on or after the 15th, exactly 14 days
  after WEEK_A's result
- DAY_OF_WEEK: next date_value weekday on or after the candidate

Weekday date values count from Sunday: 0=Sunday ... 6=Saturday.
A required date value that is missing or out of range raises
InvalidConfigurationError; it is never defaulted.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..exceptions import InvalidConfigurationError, UnboundedScanError
from ..models import DateType, validate_date_value
from .business_day_adjuster import MAX_SCAN_DAYS
from .cycle_advancer import end_of_month, last_day_of_month, start_of_month

# Offset from the 1st that starts the week B scan.
WEEK_B_OFFSET_DAYS = 14


def sunday_based_weekday(d: date) -> int:
    """Weekday with 0=Sunday ... 6=Saturday."""
    return d.isoweekday() % 7


def next_weekday_on_or_after(start: date, weekday: int) -> date:
    """
    Scan forward from start (inclusive) to the given weekday.

    Raises:
        UnboundedScanError: if the scan runs past its cap
    """
    current = start
    for _ in range(MAX_SCAN_DAYS):
        if sunday_based_weekday(current) == weekday:
            return current
        current += timedelta(days=1)

    raise UnboundedScanError(
        message=f"Weekday {weekday} not found within {MAX_SCAN_DAYS} days of {start.isoformat()}",
        details={"date": start.isoformat(), "weekday": weekday, "cap": MAX_SCAN_DAYS},
    )


def resolve(candidate: date, date_type: DateType, date_value: Optional[int] = None) -> date:
    """
    Apply date type semantics to a candidate date.

    Args:
        candidate: Date produced by the cycle advancer
        date_type: Anchor semantics to apply
        date_value: Day of month or weekday, as required by date_type

    Returns:
        The anchor (original EFT) date

    Raises:
        InvalidConfigurationError: if date_value is missing or out of range
        UnboundedScanError: if a weekday scan runs past its cap
    """
    try:
        date_type = DateType(date_type)
    except ValueError:
        raise InvalidConfigurationError(
            message=f"Unsupported date_type '{date_type}'",
            details={"field": "date_type", "value": str(date_type)},
        )

    validate_date_value(date_type, date_value)

    if date_type == DateType.FIXED_DATE:
        day = min(date_value, last_day_of_month(candidate.year, candidate.month))
        return candidate.replace(day=day)

    elif date_type == DateType.END_OF_MONTH:
        return end_of_month(candidate)

    elif date_type == DateType.START_OF_MONTH:
        return start_of_month(candidate)

    elif date_type == DateType.WEEK_A:
        return next_weekday_on_or_after(start_of_month(candidate), date_value)

    elif date_type == DateType.WEEK_B:
        week_b_start = start_of_month(candidate) + timedelta(days=WEEK_B_OFFSET_DAYS)
        return next_weekday_on_or_after(week_b_start, date_value)

    elif date_type == DateType.DAY_OF_WEEK:
        return next_weekday_on_or_after(candidate, date_value)

    raise InvalidConfigurationError(
        message=f"No resolution defined for date_type '{date_type.value}'",
        details={"field": "date_type", "value": date_type.value},
    )
