"""
PayCycle Schedule Generator

Iterates the payroll date calculator across N periods.

Chaining rule: period i+1 is calculated from period i's ADJUSTED EFT
date, never its original EFT date. Calculating from the original date
would let per-period adjustment offsets compound and drift the cadence
over many periods. The rule lives in next_base_date().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..calendars import HolidayCalendar
from ..exceptions import InvalidConfigurationError, PayCycleError
from ..models import (
    DEFAULT_PERIODS,
    MAX_PERIODS,
    PayrollDateResult,
    ScheduleConfig,
    ScheduleOutcome,
)
from .business_day_adjuster import BusinessDayAdjuster
from .payroll_date_calculator import PayrollDateCalculator

logger = logging.getLogger(__name__)


def next_base_date(result: PayrollDateResult) -> date:
    """Base date for the period following result: its adjusted EFT date."""
    return result.adjusted_eft_date


def choose_periods(*candidates: Optional[int], default: int = DEFAULT_PERIODS) -> int:
    """
    First period count that was supplied, else default.

    Only None means "not supplied"; 0 is passed through so that
    validate_periods rejects it.
    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


def validate_periods(periods: int, max_periods: int = MAX_PERIODS) -> None:
    """
    Check a period count.

    Raises:
        InvalidConfigurationError: unless 1 <= periods <= max_periods
    """
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise InvalidConfigurationError(
            message="periods must be an integer",
            details={"field": "periods", "value": repr(periods)},
        )
    if not 1 <= periods <= max_periods:
        raise InvalidConfigurationError(
            message=f"periods must be between 1 and {max_periods}, got {periods}",
            details={"field": "periods", "value": periods, "max": max_periods},
        )


@dataclass
class ScheduleGenerator:
    """
    Generates a fully materialised pay run schedule.

    Usage:
        generator = ScheduleGenerator()
        schedule = generator.generate(date(2025, 1, 31), config, periods=12)

        # Typed result instead of raising
        outcome = generator.try_generate("PAY-001", date(2025, 1, 31), config)
        if not outcome.ok:
            print(outcome.error.to_dict())
    """

    calculator: PayrollDateCalculator = field(default_factory=PayrollDateCalculator)
    max_periods: int = MAX_PERIODS

    def generate(
        self,
        start_date: date,
        config: ScheduleConfig,
        periods: int = DEFAULT_PERIODS,
    ) -> list[PayrollDateResult]:
        """
        Generate `periods` consecutive pay runs after start_date.

        Raises:
            InvalidConfigurationError: if periods or the config are invalid
            UnboundedScanError: if a scan runs past its cap
        """
        validate_periods(periods, self.max_periods)
        config.validate()

        # Coerce holidays once so malformed entries are reported once.
        calendar = HolidayCalendar.from_entries(config.holidays)
        config = config.with_holidays(list(calendar.holidays))
        adjuster = BusinessDayAdjuster(calendar=calendar, max_scan_days=self.calculator.max_scan_days)

        results: list[PayrollDateResult] = []
        base_date = start_date
        for _ in range(periods):
            result = self.calculator.calculate_with(base_date, config, adjuster)
            results.append(result)
            base_date = next_base_date(result)

        logger.debug(
            "Generated %d %s pay runs from %s",
            periods,
            config.cycle_type.value,
            start_date.isoformat(),
        )
        return results

    def try_generate(
        self,
        payroll_id: str,
        start_date: date,
        config: ScheduleConfig,
        periods: int = DEFAULT_PERIODS,
    ) -> ScheduleOutcome:
        """
        Generate a schedule, returning errors as part of the outcome.

        Only PayCycleError is captured; anything else is a bug and propagates.
        """
        try:
            results = self.generate(start_date, config, periods)
        except PayCycleError as e:
            e.payroll_id = e.payroll_id or payroll_id
            logger.error(
                "Schedule generation failed for payroll %s: %s",
                payroll_id,
                e,
                extra={"payroll_id": payroll_id, "error_code": e.code},
            )
            return ScheduleOutcome(payroll_id=payroll_id, error=e)

        return ScheduleOutcome(payroll_id=payroll_id, results=results)


def generate_schedule(
    start_date: date,
    config: ScheduleConfig,
    periods: int = DEFAULT_PERIODS,
) -> list[PayrollDateResult]:
    """
    Generate a pay run schedule.

    Convenience function that creates a temporary generator.
    """
    return ScheduleGenerator().generate(start_date, config, periods)
