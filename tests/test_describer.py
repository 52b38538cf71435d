"""
Tests for schedule descriptions, ordinals and week labels.
"""
from datetime import date

import pytest

from paycycle.engine import (
    describe_schedule,
    is_supported_combination,
    ordinal,
    supported_date_types,
    week_type_for,
    weekday_name,
)
from paycycle.models import CycleType, DateType, WeekType

from tests.conftest import make_config


class TestOrdinals:
    """Tests for English ordinals."""

    @pytest.mark.parametrize("n, expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
    ])
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_weekday_name(self):
        assert weekday_name(0) == "Sunday"
        assert weekday_name(5) == "Friday"
        assert weekday_name(9) == "Day 9"


class TestDescribeSchedule:
    """Tests for one-line schedule summaries."""

    @pytest.mark.parametrize("cycle_type, date_type, date_value, expected", [
        (CycleType.WEEKLY, DateType.DAY_OF_WEEK, 5, "Weekly - Friday"),
        (CycleType.FORTNIGHTLY, DateType.WEEK_A, 1, "Fortnightly - Week A - Monday"),
        (CycleType.FORTNIGHTLY, DateType.WEEK_B, 3, "Fortnightly - Week B - Wednesday"),
        (CycleType.BI_MONTHLY, DateType.END_OF_MONTH, None, "Bi-Monthly - End of the Month"),
        (CycleType.MONTHLY, DateType.FIXED_DATE, 31, "Monthly - 31st of the Month"),
        (CycleType.MONTHLY, DateType.START_OF_MONTH, None, "Monthly - Start of the Month"),
        (CycleType.QUARTERLY, DateType.END_OF_MONTH, None, "Quarterly - End of the Month"),
        (CycleType.WEEKLY, DateType.DAY_OF_WEEK, None, "Weekly - Day not selected"),
        (CycleType.MONTHLY, DateType.FIXED_DATE, None, "Monthly - Day not selected"),
    ])
    def test_describe(self, cycle_type, date_type, date_value, expected):
        config = make_config(cycle_type=cycle_type, date_type=date_type, date_value=date_value)
        assert describe_schedule(config) == expected


class TestSupportedDateTypes:
    """Tests for the cycle/date type catalog."""

    def test_weekly_offers_day_of_week_only(self):
        assert supported_date_types(CycleType.WEEKLY) == (DateType.DAY_OF_WEEK,)

    def test_bi_monthly_offers_end_of_month_only(self):
        assert supported_date_types(CycleType.BI_MONTHLY) == (DateType.END_OF_MONTH,)
        assert not is_supported_combination("bi_monthly", "som")

    def test_every_cycle_has_options(self):
        for cycle in CycleType:
            assert supported_date_types(cycle)

    def test_combination(self):
        assert is_supported_combination("fortnightly", "week_a")
        assert not is_supported_combination(CycleType.WEEKLY, DateType.END_OF_MONTH)


class TestWeekType:
    """Weeks alternate A/B from the year's first Sunday."""

    def test_first_sunday_starts_week_a(self):
        # 2025-01-05 is the first Sunday of 2025
        assert week_type_for(date(2025, 1, 5)) == WeekType.A
        assert week_type_for(date(2025, 1, 11)) == WeekType.A
        assert week_type_for(date(2025, 1, 12)) == WeekType.B
        assert week_type_for(date(2025, 1, 19)) == WeekType.A

    def test_days_before_first_sunday_are_week_b(self):
        assert week_type_for(date(2025, 1, 1)) == WeekType.B

    def test_year_starting_on_sunday(self):
        # 2023-01-01 is a Sunday
        assert week_type_for(date(2023, 1, 1)) == WeekType.A
