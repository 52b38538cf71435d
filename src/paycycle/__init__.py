"""
PayCycle - Payroll Schedule Date Engine

PayCycle computes recurring pay run dates: the EFT (pay) date and the
processing date that precedes it, adjusted around weekends and holidays,
chained across many periods.

Core Principle: "Same config, same base date, same schedule."
No calculation reads the current date; only the outermost caller
(API or CLI) decides what "today" is.

Key Features:
- Weekly, fortnightly, bi-monthly, monthly and quarterly cycles
- Fixed date, start/end of month, week A/B and day-of-week anchors
- Previous / next / nearest business day adjustment
- Recurring and one-off regional holidays
- Batch generation with per-payroll typed errors
- YAML/JSON payroll packs, HTTP API and CLI

Quick Start:
    from datetime import date
    from paycycle import ScheduleConfig, ScheduleGenerator, CycleType, DateType

    config = ScheduleConfig(
        cycle_type=CycleType.MONTHLY,
        date_type=DateType.FIXED_DATE,
        date_value=31,
        processing_days_before_eft=2,
    )
    schedule = ScheduleGenerator().generate(date(2025, 1, 31), config, periods=12)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "PayCycle Team"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    WEEKDAY_NAMES,
    AdjustmentRule,
    CycleType,
    DateType,
    Holiday,
    PayrollDateResult,
    PayrollDefinition,
    ScheduleConfig,
    ScheduleOutcome,
    ScheduleRequest,
    WeekType,
)

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    HolidayCalendar,
    filter_by_region,
    is_business_day,
    is_holiday,
    parse_holidays,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    DEFAULT_PERIODS,
    MAX_PERIODS,
    BatchScheduler,
    BusinessDayAdjuster,
    PayrollDateCalculator,
    ScheduleGenerator,
    adjust_date,
    advance,
    calculate_payroll_dates,
    describe_schedule,
    generate_batch,
    generate_schedule,
    resolve,
    supported_date_types,
    week_type_for,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    InvalidConfigurationError,
    MalformedHolidayError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    PayCycleError,
    PayrollNotFoundError,
    UnboundedScanError,
)

__all__ = [
    "__version__",
    # Models
    "AdjustmentRule",
    "CycleType",
    "DateType",
    "WeekType",
    "WEEKDAY_NAMES",
    "Holiday",
    "PayrollDateResult",
    "PayrollDefinition",
    "ScheduleConfig",
    "ScheduleOutcome",
    "ScheduleRequest",
    # Calendars
    "HolidayCalendar",
    "filter_by_region",
    "is_business_day",
    "is_holiday",
    "parse_holidays",
    # Engine
    "DEFAULT_PERIODS",
    "MAX_PERIODS",
    "BatchScheduler",
    "BusinessDayAdjuster",
    "PayrollDateCalculator",
    "ScheduleGenerator",
    "adjust_date",
    "advance",
    "calculate_payroll_dates",
    "describe_schedule",
    "generate_batch",
    "generate_schedule",
    "resolve",
    "supported_date_types",
    "week_type_for",
    # Exceptions
    "PayCycleError",
    "InvalidConfigurationError",
    "UnboundedScanError",
    "MalformedHolidayError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
    "PayrollNotFoundError",
]
