"""Request schemas for the API."""

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field

from paycycle.calendars import parse_holidays
from paycycle.models import ScheduleConfig


class ScheduleConfigInput(BaseModel):
    """Cycle configuration for one payroll."""
    cycle_type: str = Field(..., description="weekly|fortnightly|bi_monthly|monthly|quarterly")
    date_type: str = Field(..., description="fixed_date|eom|som|week_a|week_b|dow")
    date_value: Optional[int] = Field(
        default=None, description="Day of month (fixed_date) or weekday 0=Sunday..6=Saturday"
    )
    processing_days_before_eft: int = Field(default=0, description="Calendar days of lead time")
    adjustment_rule: str = Field(default="previous", description="previous|next|nearest")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cycle_type": "monthly",
                    "date_type": "fixed_date",
                    "date_value": 31,
                    "processing_days_before_eft": 2,
                    "adjustment_rule": "previous",
                },
                {"cycle_type": "weekly", "date_type": "dow", "date_value": 5},
            ]
        }
    }

    def to_config(self, holidays: list[Any]) -> ScheduleConfig:
        """
        Build the engine config, parsing raw holiday entries leniently.

        Raises:
            InvalidConfigurationError: on unsupported enum values
        """
        return ScheduleConfig(
            cycle_type=self.cycle_type.strip().lower(),
            date_type=self.date_type.strip().lower(),
            date_value=self.date_value,
            processing_days_before_eft=self.processing_days_before_eft,
            adjustment_rule=self.adjustment_rule.strip().lower(),
            holidays=tuple(parse_holidays(holidays)),
        )


class ScheduleRequest(BaseModel):
    """Request to generate one payroll's schedule."""
    start_date: dt.date = Field(..., description="Base date (ISO format: YYYY-MM-DD)")
    periods: Optional[int] = Field(default=None, description="Periods to generate (default 12)")
    config: ScheduleConfigInput
    holidays: list[Any] = Field(
        default=[],
        description="Holiday entries: {date, name, recurring, region}; malformed entries are skipped",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "start_date": "2025-01-31",
                    "periods": 6,
                    "config": {
                        "cycle_type": "monthly",
                        "date_type": "fixed_date",
                        "date_value": 31,
                        "processing_days_before_eft": 2,
                    },
                    "holidays": [
                        {"date": "2025-12-25", "name": "Christmas Day", "recurring": True},
                    ],
                }
            ]
        }
    }


class BatchPayrollInput(ScheduleRequest):
    """One payroll in a batch request."""
    payroll_id: str = Field(..., min_length=1, description="Payroll identifier")


class BatchScheduleRequest(BaseModel):
    """Request to generate schedules for many payrolls."""
    payrolls: list[BatchPayrollInput] = Field(..., description="Payrolls to generate")


class AdjustDateRequest(BaseModel):
    """Request to adjust a single date to a business day."""
    date: dt.date = Field(..., description="Date to adjust (ISO format: YYYY-MM-DD)")
    rule: str = Field(default="previous", description="previous|next|nearest")
    holidays: list[Any] = Field(default=[], description="Holiday entries")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "date": "2025-12-25",
                    "rule": "next",
                    "holidays": [
                        {"date": "2025-12-25", "name": "Christmas Day", "recurring": True},
                        {"date": "2025-12-26", "name": "Boxing Day", "recurring": True},
                    ],
                }
            ]
        }
    }
