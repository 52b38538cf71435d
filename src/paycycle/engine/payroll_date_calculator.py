"""
PayCycle Payroll Date Calculator

Calculates one pay run's dates from a base date and a schedule config:

1. original EFT = resolve(advance(base, cycle), date_type, date_value)
2. adjusted EFT = adjust(original EFT, rule, holidays)
3. raw processing = adjusted EFT - processing_days_before_eft
4. processing = adjust(raw processing, rule, holidays)

Fully deterministic: the calculation never reads the current date.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..models import CycleType, DateType, PayrollDateResult, ScheduleConfig
from .business_day_adjuster import MAX_SCAN_DAYS, BusinessDayAdjuster
from .cycle_advancer import advance
from .date_type_resolver import resolve

logger = logging.getLogger(__name__)


def calculate_next_eft_date(
    base_date: date,
    cycle_type: CycleType,
    date_type: DateType,
    date_value: Optional[int] = None,
) -> date:
    """
    Calculate the next anchor (unadjusted EFT) date.

    Args:
        base_date: The date to calculate from (usually the previous EFT date)
        cycle_type: The payroll cycle
        date_type: Anchor semantics
        date_value: Day of month or weekday, as the date type requires

    Returns:
        The next EFT date before weekend/holiday adjustment
    """
    return resolve(advance(base_date, cycle_type), date_type, date_value)


@dataclass
class PayrollDateCalculator:
    """
    Produces one period's EFT and processing dates.

    Usage:
        calculator = PayrollDateCalculator()
        result = calculator.calculate(date(2025, 1, 31), config)
        print(result.adjusted_eft_date, result.processing_date)
    """

    max_scan_days: int = MAX_SCAN_DAYS

    def calculate(self, base_date: date, config: ScheduleConfig) -> PayrollDateResult:
        """
        Calculate the next pay run after base_date.

        Raises:
            InvalidConfigurationError: if the config is incomplete or out of range
            UnboundedScanError: if a scan runs past its cap
        """
        config.validate()
        adjuster = BusinessDayAdjuster.for_holidays(config.holidays, self.max_scan_days)
        return self.calculate_with(base_date, config, adjuster)

    def calculate_with(
        self,
        base_date: date,
        config: ScheduleConfig,
        adjuster: BusinessDayAdjuster,
    ) -> PayrollDateResult:
        """Calculate one pay run against a prepared adjuster, skipping config validation."""
        original_eft = calculate_next_eft_date(
            base_date,
            config.cycle_type,
            config.date_type,
            config.date_value,
        )
        adjusted_eft = adjuster.adjust(original_eft, config.adjustment_rule)

        raw_processing = adjusted_eft - timedelta(days=config.processing_days_before_eft)
        processing = adjuster.adjust(raw_processing, config.adjustment_rule)

        logger.debug(
            "Calculated pay run from %s: eft %s -> %s, processing %s",
            base_date.isoformat(),
            original_eft.isoformat(),
            adjusted_eft.isoformat(),
            processing.isoformat(),
        )

        return PayrollDateResult(
            original_eft_date=original_eft,
            adjusted_eft_date=adjusted_eft,
            processing_date=processing,
        )


def calculate_payroll_dates(base_date: date, config: ScheduleConfig) -> PayrollDateResult:
    """
    Calculate one pay run.

    Convenience function that creates a temporary calculator.
    """
    return PayrollDateCalculator().calculate(base_date, config)
