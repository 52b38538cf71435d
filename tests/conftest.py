"""
Pytest configuration and fixtures for PayCycle tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import date
from typing import Optional

from paycycle.models import (
    AdjustmentRule,
    CycleType,
    DateType,
    Holiday,
    ScheduleConfig,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_holiday(
    d: date,
    name: str = "Holiday",
    recurring: bool = False,
    region: Optional[str] = None,
    id: Optional[str] = None,
) -> Holiday:
    """Create a Holiday."""
    return Holiday(date=d, name=name, recurring=recurring, region=region, id=id)


def make_config(
    cycle_type: CycleType = CycleType.MONTHLY,
    date_type: DateType = DateType.FIXED_DATE,
    date_value: Optional[int] = 31,
    processing_days_before_eft: int = 0,
    adjustment_rule: AdjustmentRule = AdjustmentRule.PREVIOUS,
    holidays: tuple = (),
) -> ScheduleConfig:
    """Create a ScheduleConfig; defaults to monthly on the 31st."""
    return ScheduleConfig(
        cycle_type=cycle_type,
        date_type=date_type,
        date_value=date_value,
        processing_days_before_eft=processing_days_before_eft,
        adjustment_rule=adjustment_rule,
        holidays=tuple(holidays),
    )


PACK_YAML = """
schema_version: "1.0.0"
name: Test Pack
payrolls:
  - id: PAY-001
    name: Monthly NSW
    region: NSW
    cycle_type: monthly
    date_type: fixed_date
    date_value: 31
    processing_days_before_eft: 2
    start_date: 2025-01-31
    periods: 3
  - id: PAY-002
    name: Weekly
    cycle_type: weekly
    date_type: dow
    date_value: 5
holidays:
  - {date: 2025-12-25, name: Christmas Day, recurring: true, region: national}
  - {date: 2025-06-09, name: King's Birthday, region: NSW}
  - {date: 2025-11-04, name: Melbourne Cup, region: VIC}
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def christmas_holidays():
    """Recurring Christmas Day and Boxing Day."""
    return [
        make_holiday(date(2025, 12, 25), "Christmas Day", recurring=True),
        make_holiday(date(2025, 12, 26), "Boxing Day", recurring=True),
    ]


@pytest.fixture
def monthly_config():
    """Monthly on the 31st, two days lead, previous business day."""
    return make_config(processing_days_before_eft=2)


@pytest.fixture
def weekly_friday_config():
    """Weekly on Friday."""
    return make_config(
        cycle_type=CycleType.WEEKLY,
        date_type=DateType.DAY_OF_WEEK,
        date_value=5,
    )


@pytest.fixture
def pack_file(tmp_path):
    """A small payroll pack written to disk."""
    path = tmp_path / "payrolls.yaml"
    path.write_text(PACK_YAML)
    return path
