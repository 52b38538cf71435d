"""
PayCycle Models

All domain models for payroll schedule generation:

    from paycycle.models import (
        # Enums
        CycleType, DateType, AdjustmentRule, WeekType,
        # Holidays
        Holiday,
        # Schedules
        ScheduleConfig, PayrollDateResult, ScheduleOutcome,
    )
"""
from __future__ import annotations

from .enums import (
    WEEKDAY_NAMES,
    AdjustmentRule,
    CycleType,
    DateType,
    WeekType,
)
from .holiday import NATIONAL_REGIONS, Holiday
from .schedule import (
    DEFAULT_PERIODS,
    MAX_DAY_OF_MONTH,
    MAX_WEEKDAY,
    MAX_PERIODS,
    MIN_DAY_OF_MONTH,
    MIN_WEEKDAY,
    PayrollDateResult,
    PayrollDefinition,
    ScheduleConfig,
    ScheduleOutcome,
    ScheduleRequest,
    validate_date_value,
)

__all__ = [
    # Enums
    "CycleType",
    "DateType",
    "AdjustmentRule",
    "WeekType",
    "WEEKDAY_NAMES",
    # Holidays
    "Holiday",
    "NATIONAL_REGIONS",
    # Schedules
    "ScheduleConfig",
    "PayrollDateResult",
    "ScheduleRequest",
    "ScheduleOutcome",
    "PayrollDefinition",
    "validate_date_value",
    "MIN_DAY_OF_MONTH",
    "MAX_DAY_OF_MONTH",
    "MIN_WEEKDAY",
    "MAX_WEEKDAY",
    "DEFAULT_PERIODS",
    "MAX_PERIODS",
]
