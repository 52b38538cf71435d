"""
PayCycle Engine

Services for pay run date generation, leaves first:

- BusinessDayAdjuster: move weekend/holiday dates to business days
- advance: one cycle period of raw calendar arithmetic
- resolve: apply date type (anchor) semantics
- PayrollDateCalculator: one period's EFT and processing dates
- ScheduleGenerator: N chained periods
- BatchScheduler: many payrolls, one typed outcome each
- describe_schedule: human-readable summaries

Usage:
    from paycycle.engine import ScheduleGenerator

    schedule = ScheduleGenerator().generate(date(2025, 1, 31), config, periods=12)
"""
from __future__ import annotations

from .batch import (
    BatchScheduler,
    BatchSummary,
    generate_batch,
    summarize,
)
from .business_day_adjuster import (
    MAX_SCAN_DAYS,
    BusinessDayAdjuster,
    adjust_date,
)
from .cycle_advancer import (
    add_months,
    advance,
    end_of_month,
    last_day_of_month,
    start_of_month,
)
from .date_type_resolver import (
    next_weekday_on_or_after,
    resolve,
    sunday_based_weekday,
)
from .describer import (
    SUPPORTED_DATE_TYPES,
    describe_schedule,
    is_supported_combination,
    ordinal,
    ordinal_suffix,
    supported_date_types,
    week_type_for,
    weekday_name,
)
from .payroll_date_calculator import (
    PayrollDateCalculator,
    calculate_next_eft_date,
    calculate_payroll_dates,
)
from .schedule_generator import (
    DEFAULT_PERIODS,
    MAX_PERIODS,
    ScheduleGenerator,
    choose_periods,
    generate_schedule,
    next_base_date,
    validate_periods,
)

__all__ = [
    # Adjustment
    "MAX_SCAN_DAYS",
    "BusinessDayAdjuster",
    "adjust_date",
    # Cycle arithmetic
    "advance",
    "add_months",
    "end_of_month",
    "last_day_of_month",
    "start_of_month",
    # Date types
    "resolve",
    "next_weekday_on_or_after",
    "sunday_based_weekday",
    # Calculation
    "PayrollDateCalculator",
    "calculate_next_eft_date",
    "calculate_payroll_dates",
    # Schedules
    "DEFAULT_PERIODS",
    "MAX_PERIODS",
    "ScheduleGenerator",
    "choose_periods",
    "generate_schedule",
    "next_base_date",
    "validate_periods",
    # Batch
    "BatchScheduler",
    "BatchSummary",
    "generate_batch",
    "summarize",
    # Descriptions
    "SUPPORTED_DATE_TYPES",
    "describe_schedule",
    "is_supported_combination",
    "ordinal",
    "ordinal_suffix",
    "supported_date_types",
    "week_type_for",
    "weekday_name",
]
