"""
Tests for holiday calendars, holiday parsing and region filtering.
"""
import logging
from datetime import date, datetime

import pytest

from paycycle.calendars import (
    HolidayCalendar,
    filter_by_region,
    holidays_in_range,
    is_business_day,
    is_holiday,
    is_weekend,
    parse_holiday,
    parse_holidays,
)
from paycycle.exceptions import MalformedHolidayError
from paycycle.models import Holiday

from tests.conftest import make_holiday


# =============================================================================
# Holiday Matching
# =============================================================================

class TestHolidayMatching:
    """Tests for exact and recurring holiday matches."""

    def test_non_recurring_matches_exact_date_only(self):
        holiday = make_holiday(date(2025, 4, 18), "Good Friday")
        assert holiday.matches(date(2025, 4, 18))
        assert not holiday.matches(date(2026, 4, 18))

    def test_recurring_matches_any_year(self):
        holiday = make_holiday(date(2020, 12, 25), "Christmas Day", recurring=True)
        assert holiday.matches(date(2025, 12, 25))
        assert holiday.matches(date(2031, 12, 25))
        assert not holiday.matches(date(2025, 12, 24))

    def test_recurring_feb_29_skipped_in_non_leap_year(self):
        holiday = make_holiday(date(2024, 2, 29), "Leap Day", recurring=True)
        assert holiday.occurs_in_year(2025) is None
        assert holiday.occurs_in_year(2028) == date(2028, 2, 29)

    def test_is_national(self):
        assert make_holiday(date(2025, 1, 1)).is_national
        assert make_holiday(date(2025, 1, 1), region="National").is_national
        assert not make_holiday(date(2025, 1, 1), region="NSW").is_national


# =============================================================================
# Business Day Checks
# =============================================================================

class TestBusinessDays:
    """Tests for weekend and business day checks."""

    def test_weekend(self):
        assert is_weekend(date(2025, 1, 4))   # Saturday
        assert is_weekend(date(2025, 1, 5))   # Sunday
        assert not is_weekend(date(2025, 1, 6))

    def test_holiday_is_not_business_day(self, christmas_holidays):
        assert not is_business_day(date(2025, 12, 25), christmas_holidays)
        assert is_business_day(date(2025, 12, 24), christmas_holidays)

    def test_weekday_without_holidays_is_business_day(self):
        assert is_business_day(date(2025, 1, 6))

    def test_raw_mapping_holidays_accepted(self):
        holidays = [{"date": "2025-12-25", "recurring": True}]
        assert is_holiday(date(2027, 12, 25), holidays)

    def test_malformed_entry_skipped_with_warning(self, caplog):
        holidays = [{"date": "not-a-date"}, {"date": "2025-12-25"}]
        with caplog.at_level(logging.WARNING):
            assert is_holiday(date(2025, 12, 25), holidays)
        assert "Skipping malformed holiday" in caplog.text

    def test_datetime_holiday_date_normalised(self):
        holiday = Holiday(date=datetime(2025, 12, 25, 9, 30), name="Christmas Day")
        calendar = HolidayCalendar.from_entries([holiday])
        assert calendar.is_holiday(date(2025, 12, 25))


class TestHolidayCalendar:
    """Tests for HolidayCalendar lookups."""

    def test_from_entries_drops_malformed(self):
        calendar = HolidayCalendar.from_entries([
            {"date": "2025-12-25", "name": "Christmas Day"},
            {"name": "No date"},
            42,
        ])
        assert len(calendar.holidays) == 1

    def test_holiday_for(self, christmas_holidays):
        calendar = HolidayCalendar.from_entries(christmas_holidays)
        assert calendar.holiday_for(date(2030, 12, 26)).name == "Boxing Day"
        assert calendar.holiday_for(date(2030, 12, 27)) is None

    def test_holidays_in_range_expands_recurring(self, christmas_holidays):
        occurrences = holidays_in_range(
            christmas_holidays, date(2025, 12, 1), date(2026, 12, 25)
        )
        assert [d for d, _ in occurrences] == [
            date(2025, 12, 25),
            date(2025, 12, 26),
            date(2026, 12, 25),
        ]

    def test_holidays_in_range_empty_when_reversed(self, christmas_holidays):
        assert holidays_in_range(christmas_holidays, date(2026, 1, 1), date(2025, 1, 1)) == []

    def test_get_holidays_in_range_excludes_other_years(self):
        calendar = HolidayCalendar.from_entries([make_holiday(date(2024, 4, 25), "Anzac Day")])
        assert calendar.get_holidays_in_range(date(2025, 1, 1), date(2025, 12, 31)) == []


# =============================================================================
# Parsing
# =============================================================================

class TestParseHoliday:
    """Tests for holiday entry coercion."""

    def test_parse_mapping(self):
        holiday = parse_holiday({
            "id": 7,
            "date": "2025-12-25T00:00:00Z",
            "name": "Christmas Day",
            "recurring": "true",
            "region": "national",
        })
        assert holiday == Holiday(
            date=date(2025, 12, 25),
            name="Christmas Day",
            recurring=True,
            region="national",
            id="7",
        )

    def test_parse_date_object(self):
        holiday = parse_holiday({"date": date(2025, 1, 1)})
        assert holiday.date == date(2025, 1, 1)
        assert holiday.recurring is False

    @pytest.mark.parametrize("entry", [
        "2025-12-25",
        {"name": "Missing date"},
        {"date": "25/12/2025"},
        {"date": "2025-12-25", "recurring": "sometimes"},
    ])
    def test_malformed_raises(self, entry):
        with pytest.raises(MalformedHolidayError) as exc_info:
            parse_holiday(entry)
        assert exc_info.value.code == "PC_MALFORMED_HOLIDAY"

    def test_parse_holidays_is_lenient(self, caplog):
        entries = [
            {"date": "2025-12-25", "name": "Christmas Day"},
            {"date": "garbage"},
            {"date": "2025-12-26", "name": "Boxing Day"},
        ]
        with caplog.at_level(logging.WARNING):
            holidays = parse_holidays(entries)
        assert [h.name for h in holidays] == ["Christmas Day", "Boxing Day"]
        assert "Skipping holiday entry 1" in caplog.text

    def test_parse_holidays_none(self):
        assert parse_holidays(None) == []


class TestFilterByRegion:
    """Tests for region filtering."""

    @pytest.fixture
    def holidays(self):
        return [
            make_holiday(date(2025, 12, 25), "Christmas Day", region="national"),
            make_holiday(date(2025, 1, 1), "New Year's Day"),
            make_holiday(date(2025, 6, 9), "King's Birthday", region="NSW"),
            make_holiday(date(2025, 11, 4), "Melbourne Cup", region="VIC"),
        ]

    def test_region_keeps_national_and_own(self, holidays):
        names = [h.name for h in filter_by_region(holidays, "nsw")]
        assert names == ["Christmas Day", "New Year's Day", "King's Birthday"]

    def test_no_region_keeps_national_only(self, holidays):
        names = [h.name for h in filter_by_region(holidays, None)]
        assert names == ["Christmas Day", "New Year's Day"]
