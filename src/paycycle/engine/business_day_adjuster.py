"""
PayCycle Business Day Adjuster

Moves a date that falls on a weekend or holiday to a business day.

Rules:
- PREVIOUS: step back one day at a time until a business day
- NEXT: step forward one day at a time until a business day
- NEAREST: walk outward in both directions at once; the first business
  day found wins. The earlier side is checked first at every distance,
  so an exact tie resolves to the earlier (PREVIOUS) date.

Business days pass through unchanged, which makes adjustment idempotent.
Every scan is capped; running past the cap raises UnboundedScanError.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Iterable

from ..calendars import HolidayCalendar
from ..exceptions import InvalidConfigurationError, UnboundedScanError
from ..models import AdjustmentRule

# Longest run of consecutive non-business days tolerated before giving up.
MAX_SCAN_DAYS = 31


@dataclass
class BusinessDayAdjuster:
    """
    Adjusts dates against one holiday calendar.

    Usage:
        adjuster = BusinessDayAdjuster.for_holidays(config.holidays)
        eft = adjuster.adjust(date(2025, 5, 31), AdjustmentRule.PREVIOUS)
    """

    calendar: HolidayCalendar = field(default_factory=HolidayCalendar)
    max_scan_days: int = MAX_SCAN_DAYS

    @classmethod
    def for_holidays(
        cls,
        holidays: Iterable[Any],
        max_scan_days: int = MAX_SCAN_DAYS,
    ) -> BusinessDayAdjuster:
        return cls(
            calendar=HolidayCalendar.from_entries(holidays),
            max_scan_days=max_scan_days,
        )

    def is_business_day(self, d: date) -> bool:
        return self.calendar.is_business_day(d)

    def adjust(self, d: date, rule: AdjustmentRule = AdjustmentRule.PREVIOUS) -> date:
        """
        Adjust a date to a business day.

        Args:
            d: Candidate date
            rule: Direction to move when the date is not a business day

        Returns:
            d itself if it is a business day, otherwise the adjusted date

        Raises:
            InvalidConfigurationError: if the rule is not recognised
            UnboundedScanError: if no business day is found within the cap
        """
        try:
            rule = AdjustmentRule(rule)
        except ValueError:
            raise InvalidConfigurationError(
                message=f"Unsupported adjustment_rule '{rule}'",
                details={"field": "adjustment_rule", "value": str(rule)},
            )

        if self.is_business_day(d):
            return d

        if rule == AdjustmentRule.PREVIOUS:
            return self._scan(d, step=-1, rule=rule)
        elif rule == AdjustmentRule.NEXT:
            return self._scan(d, step=1, rule=rule)
        return self._nearest(d)

    def _scan(self, d: date, step: int, rule: AdjustmentRule) -> date:
        current = d
        for _ in range(self.max_scan_days):
            current += timedelta(days=step)
            if self.is_business_day(current):
                return current

        raise UnboundedScanError(
            message=(
                f"No business day within {self.max_scan_days} days of "
                f"{d.isoformat()} (rule: {rule.value})"
            ),
            details={"date": d.isoformat(), "rule": rule.value, "cap": self.max_scan_days},
        )

    def _nearest(self, d: date) -> date:
        for offset in range(1, self.max_scan_days + 1):
            # Earlier side first: ties go to the earlier date.
            earlier = d - timedelta(days=offset)
            if self.is_business_day(earlier):
                return earlier
            later = d + timedelta(days=offset)
            if self.is_business_day(later):
                return later

        raise UnboundedScanError(
            message=(
                f"No business day within {self.max_scan_days} days either side of "
                f"{d.isoformat()} (rule: nearest)"
            ),
            details={
                "date": d.isoformat(),
                "rule": AdjustmentRule.NEAREST.value,
                "cap": self.max_scan_days,
            },
        )


def adjust_date(
    d: date,
    rule: AdjustmentRule = AdjustmentRule.PREVIOUS,
    holidays: Iterable[Any] = (),
) -> date:
    """
    Adjust a date to a business day.

    Convenience function that creates a temporary adjuster.
    """
    return BusinessDayAdjuster.for_holidays(holidays).adjust(d, rule)
