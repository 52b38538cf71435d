"""
PayCycle Schedule Describer

Human-readable schedule summaries and the cycle/date type catalog
offered to payroll editors.

Summaries read like "Monthly - 31st of the Month" or
"Fortnightly - Week A - Monday".
"""
from __future__ import annotations

from datetime import date, timedelta

from ..models import WEEKDAY_NAMES, CycleType, DateType, ScheduleConfig, WeekType
from .date_type_resolver import sunday_based_weekday


# Date types offered for each cycle.
SUPPORTED_DATE_TYPES: dict[CycleType, tuple[DateType, ...]] = {
    CycleType.WEEKLY: (DateType.DAY_OF_WEEK,),
    CycleType.FORTNIGHTLY: (DateType.DAY_OF_WEEK, DateType.WEEK_A, DateType.WEEK_B),
    # Start of month re-anchors the mid-month step back to the 1st and
    # never advances.
    CycleType.BI_MONTHLY: (DateType.END_OF_MONTH,),
    CycleType.MONTHLY: (
        DateType.START_OF_MONTH,
        DateType.END_OF_MONTH,
        DateType.FIXED_DATE,
    ),
    CycleType.QUARTERLY: (
        DateType.START_OF_MONTH,
        DateType.END_OF_MONTH,
        DateType.FIXED_DATE,
    ),
}


def supported_date_types(cycle_type: CycleType) -> tuple[DateType, ...]:
    return SUPPORTED_DATE_TYPES[CycleType(cycle_type)]


def is_supported_combination(cycle_type: CycleType, date_type: DateType) -> bool:
    return DateType(date_type) in supported_date_types(cycle_type)


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix: 1 -> "st", 12 -> "th", 22 -> "nd"."""
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal(n: int) -> str:
    return f"{n}{ordinal_suffix(n)}"


def weekday_name(value: int) -> str:
    if 0 <= value <= 6:
        return WEEKDAY_NAMES[value]
    return f"Day {value}"


def week_type_for(d: date) -> WeekType:
    """
    Fortnightly week label for a date.

    Weeks are counted from the first Sunday of the date's year; even weeks
    are A, odd weeks are B. Days before that Sunday belong to week -1 (B).
    """
    first_day = date(d.year, 1, 1)
    days_to_sunday = (7 - sunday_based_weekday(first_day)) % 7
    first_sunday = first_day + timedelta(days=days_to_sunday)

    week_number = (d - first_sunday).days // 7
    return WeekType.A if week_number % 2 == 0 else WeekType.B


def describe_schedule(config: ScheduleConfig) -> str:
    """Summarise a schedule config in one line."""
    cycle = config.cycle_type
    date_type = config.date_type
    value = config.date_value
    prefix = cycle.display_name

    if date_type.uses_weekday:
        if value is None:
            return f"{prefix} - Day not selected"
        day = weekday_name(value)
        if date_type == DateType.DAY_OF_WEEK:
            return f"{prefix} - {day}"
        return f"{prefix} - {date_type.display_name} - {day}"

    if date_type == DateType.FIXED_DATE:
        if value is None:
            return f"{prefix} - Day not selected"
        return f"{prefix} - {ordinal(value)} of the Month"
    if date_type == DateType.START_OF_MONTH:
        return f"{prefix} - Start of the Month"
    return f"{prefix} - End of the Month"
