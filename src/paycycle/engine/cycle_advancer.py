"""
PayCycle Cycle Advancer

Advances a base date by one cycle period of raw calendar arithmetic.
No weekend or holiday logic happens here.

- WEEKLY: +7 days
- FORTNIGHTLY: +14 days
- BI_MONTHLY: alternates between the 15th and the last day of the month
- MONTHLY: +1 calendar month, day clamped to the month's last day
- QUARTERLY: +3 calendar months, day clamped the same way
"""
from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..exceptions import InvalidConfigurationError
from ..models import CycleType

# Bi-monthly mid-month anchor.
MID_MONTH_DAY = 15


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in a month."""
    return calendar.monthrange(year, month)[1]


def start_of_month(d: date) -> date:
    return d.replace(day=1)


def end_of_month(d: date) -> date:
    return d.replace(day=last_day_of_month(d.year, d.month))


def add_months(d: date, months: int) -> date:
    """
    Add calendar months, keeping the day of month where it exists.

    Days past the end of the target month clamp to its last day
    (Jan 31 + 1 month = Feb 28, or Feb 29 in a leap year).
    """
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, last_day_of_month(year, month))
    return date(year, month, day)


def advance(base_date: date, cycle_type: CycleType) -> date:
    """
    Advance a base date by one cycle period.

    Args:
        base_date: Usually the previous period's adjusted EFT date
        cycle_type: The payroll's cycle

    Returns:
        The raw candidate date before date-type refinement

    Raises:
        InvalidConfigurationError: if the cycle type is not recognised
    """
    if cycle_type == CycleType.WEEKLY:
        return base_date + timedelta(weeks=1)

    elif cycle_type == CycleType.FORTNIGHTLY:
        return base_date + timedelta(weeks=2)

    elif cycle_type == CycleType.BI_MONTHLY:
        if base_date.day < MID_MONTH_DAY:
            return base_date.replace(day=MID_MONTH_DAY)
        elif base_date.day == MID_MONTH_DAY:
            return end_of_month(base_date)
        else:
            return add_months(base_date, 1).replace(day=MID_MONTH_DAY)

    elif cycle_type == CycleType.MONTHLY:
        return add_months(base_date, 1)

    elif cycle_type == CycleType.QUARTERLY:
        return add_months(base_date, 3)

    else:
        raise InvalidConfigurationError(
            message=f"Unsupported cycle_type '{cycle_type}'",
            details={"field": "cycle_type", "value": str(cycle_type)},
        )
