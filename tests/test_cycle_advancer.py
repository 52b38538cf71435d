"""
Tests for cycle advancement and date type resolution.
"""
from datetime import date

import pytest

from paycycle.engine import (
    add_months,
    advance,
    calculate_next_eft_date,
    next_weekday_on_or_after,
    resolve,
    sunday_based_weekday,
)
from paycycle.exceptions import InvalidConfigurationError
from paycycle.models import CycleType, DateType


# =============================================================================
# Cycle Advancer Tests
# =============================================================================

class TestAdvance:
    """Tests for one-period calendar arithmetic."""

    def test_weekly(self):
        assert advance(date(2025, 1, 6), CycleType.WEEKLY) == date(2025, 1, 13)

    def test_fortnightly(self):
        assert advance(date(2025, 1, 6), CycleType.FORTNIGHTLY) == date(2025, 1, 20)

    @pytest.mark.parametrize("base, expected", [
        (date(2025, 3, 10), date(2025, 3, 15)),
        (date(2025, 3, 15), date(2025, 3, 31)),
        (date(2025, 3, 31), date(2025, 4, 15)),
        (date(2025, 2, 15), date(2025, 2, 28)),
        (date(2025, 12, 20), date(2026, 1, 15)),
    ])
    def test_bi_monthly(self, base, expected):
        assert advance(base, CycleType.BI_MONTHLY) == expected

    def test_monthly_clamps_to_month_end(self):
        assert advance(date(2025, 1, 31), CycleType.MONTHLY) == date(2025, 2, 28)
        assert advance(date(2024, 1, 31), CycleType.MONTHLY) == date(2024, 2, 29)

    def test_monthly_crosses_year(self):
        assert advance(date(2025, 12, 15), CycleType.MONTHLY) == date(2026, 1, 15)

    def test_quarterly(self):
        assert advance(date(2025, 1, 31), CycleType.QUARTERLY) == date(2025, 4, 30)
        assert advance(date(2025, 11, 30), CycleType.QUARTERLY) == date(2026, 2, 28)

    def test_unknown_cycle_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            advance(date(2025, 1, 1), "yearly")

    def test_add_months_negative(self):
        assert add_months(date(2025, 3, 31), -1) == date(2025, 2, 28)


# =============================================================================
# Date Type Resolver Tests
# =============================================================================

class TestWeekdays:
    """Weekday values count from Sunday."""

    def test_sunday_based_weekday(self):
        assert sunday_based_weekday(date(2025, 1, 5)) == 0   # Sunday
        assert sunday_based_weekday(date(2025, 1, 6)) == 1   # Monday
        assert sunday_based_weekday(date(2025, 1, 4)) == 6   # Saturday

    def test_next_weekday_inclusive(self):
        assert next_weekday_on_or_after(date(2025, 1, 10), 5) == date(2025, 1, 10)
        assert next_weekday_on_or_after(date(2025, 1, 11), 5) == date(2025, 1, 17)


class TestResolve:
    """Tests for anchor semantics."""

    def test_fixed_date(self):
        assert resolve(date(2025, 3, 2), DateType.FIXED_DATE, 20) == date(2025, 3, 20)

    def test_fixed_date_clamped(self):
        assert resolve(date(2025, 4, 2), DateType.FIXED_DATE, 31) == date(2025, 4, 30)

    def test_end_of_month(self):
        assert resolve(date(2024, 2, 3), DateType.END_OF_MONTH) == date(2024, 2, 29)

    def test_start_of_month(self):
        assert resolve(date(2025, 7, 19), DateType.START_OF_MONTH) == date(2025, 7, 1)

    def test_week_a_and_week_b(self):
        # January 2025 starts on a Wednesday; first Monday is the 6th
        assert resolve(date(2025, 1, 22), DateType.WEEK_A, 1) == date(2025, 1, 6)
        assert resolve(date(2025, 1, 22), DateType.WEEK_B, 1) == date(2025, 1, 20)

    @pytest.mark.parametrize("month", range(1, 13))
    @pytest.mark.parametrize("weekday", range(0, 7))
    def test_week_b_is_two_weeks_after_week_a(self, month, weekday):
        candidate = date(2025, month, 10)
        week_a = resolve(candidate, DateType.WEEK_A, weekday)
        week_b = resolve(candidate, DateType.WEEK_B, weekday)
        assert (week_b - week_a).days == 14

    def test_day_of_week(self):
        assert resolve(date(2025, 1, 13), DateType.DAY_OF_WEEK, 5) == date(2025, 1, 17)

    def test_wire_value_accepted(self):
        assert resolve(date(2025, 1, 13), "eom") == date(2025, 1, 31)

    @pytest.mark.parametrize("date_type, value", [
        (DateType.FIXED_DATE, None),
        (DateType.FIXED_DATE, 0),
        (DateType.FIXED_DATE, 32),
        (DateType.WEEK_A, None),
        (DateType.WEEK_B, 7),
        (DateType.DAY_OF_WEEK, -1),
    ])
    def test_invalid_date_value_rejected(self, date_type, value):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            resolve(date(2025, 1, 1), date_type, value)
        assert exc_info.value.details["field"] == "date_value"

    def test_missing_value_message(self):
        with pytest.raises(InvalidConfigurationError, match="date_value required for fixed_date"):
            resolve(date(2025, 1, 1), DateType.FIXED_DATE)

    def test_unknown_date_type_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            resolve(date(2025, 1, 1), "last_friday")


class TestNextEftDate:
    """Tests for the unadjusted anchor date."""

    def test_weekly_friday_from_monday(self):
        # Mon 2025-01-06 + 7 = Mon 13th, then forward to Friday
        eft = calculate_next_eft_date(date(2025, 1, 6), CycleType.WEEKLY, DateType.DAY_OF_WEEK, 5)
        assert eft == date(2025, 1, 17)

    def test_monthly_fixed_31_from_january(self):
        eft = calculate_next_eft_date(date(2025, 1, 31), CycleType.MONTHLY, DateType.FIXED_DATE, 31)
        assert eft == date(2025, 2, 28)
