"""
PayCycle Enumerations

All enumeration types used throughout the PayCycle system.

All enums inherit from (str, Enum) for JSON serialization compatibility.
Wire values match the payroll record store's enum columns.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Cycle Types
# =============================================================================

class CycleType(str, Enum):
    """How often a payroll runs."""
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    BI_MONTHLY = "bi_monthly"          # 15th and last day of month
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"

    @property
    def display_name(self) -> str:
        return _CYCLE_DISPLAY_NAMES[self]


_CYCLE_DISPLAY_NAMES = {
    CycleType.WEEKLY: "Weekly",
    CycleType.FORTNIGHTLY: "Fortnightly",
    CycleType.BI_MONTHLY: "Bi-Monthly",
    CycleType.MONTHLY: "Monthly",
    CycleType.QUARTERLY: "Quarterly",
}


# =============================================================================
# Date Types
# =============================================================================

class DateType(str, Enum):
    """
    Anchor semantics applied after the cycle has advanced.

    FIXED_DATE, WEEK_A, WEEK_B and DAY_OF_WEEK need a date value:
    a day of month (1-31) for FIXED_DATE, otherwise a weekday
    (0=Sunday ... 6=Saturday).
    """
    FIXED_DATE = "fixed_date"
    END_OF_MONTH = "eom"
    START_OF_MONTH = "som"
    WEEK_A = "week_a"
    WEEK_B = "week_b"
    DAY_OF_WEEK = "dow"

    @property
    def display_name(self) -> str:
        return _DATE_TYPE_DISPLAY_NAMES[self]

    @property
    def requires_value(self) -> bool:
        """True when the date type cannot be resolved without a date value."""
        return self in (
            DateType.FIXED_DATE,
            DateType.WEEK_A,
            DateType.WEEK_B,
            DateType.DAY_OF_WEEK,
        )

    @property
    def uses_weekday(self) -> bool:
        """True when the date value is a weekday rather than a day of month."""
        return self in (DateType.WEEK_A, DateType.WEEK_B, DateType.DAY_OF_WEEK)


_DATE_TYPE_DISPLAY_NAMES = {
    DateType.FIXED_DATE: "Fixed Date",
    DateType.END_OF_MONTH: "End of Month",
    DateType.START_OF_MONTH: "Start of Month",
    DateType.WEEK_A: "Week A",
    DateType.WEEK_B: "Week B",
    DateType.DAY_OF_WEEK: "Day of Week",
}


# =============================================================================
# Adjustment Rules
# =============================================================================

class AdjustmentRule(str, Enum):
    """How a date landing on a weekend or holiday is moved."""
    PREVIOUS = "previous"              # Last business day before
    NEXT = "next"                      # First business day after
    NEAREST = "nearest"                # Closest; ties go to the earlier date


# =============================================================================
# Fortnightly Week Labels
# =============================================================================

class WeekType(str, Enum):
    """Alternating fortnightly week label, counted from the year's first Sunday."""
    A = "A"
    B = "B"


# =============================================================================
# Weekdays
# =============================================================================

# Date values use 0=Sunday ... 6=Saturday.
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
