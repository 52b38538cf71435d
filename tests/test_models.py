"""
Tests for PayCycle models, exceptions and log formatting.
"""
import json
import logging
from datetime import date

import pytest

from paycycle.exceptions import InvalidConfigurationError, PayCycleError, UnboundedScanError
from paycycle.logging_config import JSONFormatter, configure_logging
from paycycle.models import (
    DEFAULT_PERIODS,
    AdjustmentRule,
    CycleType,
    DateType,
    ScheduleConfig,
    ScheduleOutcome,
    ScheduleRequest,
)

from tests.conftest import make_config, make_holiday


class TestScheduleConfig:
    """Tests for config coercion and serialisation."""

    def test_wire_values_coerced(self):
        config = ScheduleConfig(cycle_type="bi_monthly", date_type="som", adjustment_rule="nearest")
        assert config.cycle_type == CycleType.BI_MONTHLY
        assert config.date_type == DateType.START_OF_MONTH
        assert config.adjustment_rule == AdjustmentRule.NEAREST

    def test_unknown_date_type(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ScheduleConfig(cycle_type="weekly", date_type="fortnightly")
        assert exc_info.value.details == {"field": "date_type", "value": "fortnightly"}

    def test_holidays_stored_as_tuple(self):
        config = make_config(holidays=[make_holiday(date(2025, 12, 25))])
        assert isinstance(config.holidays, tuple)

    def test_to_dict(self):
        config = make_config(holidays=[make_holiday(date(2025, 12, 25), "Christmas Day", recurring=True)])
        data = config.to_dict()
        assert data["cycle_type"] == "monthly"
        assert data["date_type"] == "fixed_date"
        assert data["holidays"][0]["date"] == "2025-12-25"

    def test_with_holidays(self):
        config = make_config()
        updated = config.with_holidays([make_holiday(date(2025, 1, 1))])
        assert config.holidays == ()
        assert len(updated.holidays) == 1
        assert updated.date_value == config.date_value

    def test_request_defaults_to_standard_period_count(self):
        request = ScheduleRequest(payroll_id="PAY-001", start_date=date(2025, 1, 31), config=make_config())
        assert request.periods == DEFAULT_PERIODS == 12

    def test_display_names(self):
        assert CycleType.BI_MONTHLY.display_name == "Bi-Monthly"
        assert DateType.WEEK_A.display_name == "Week A"
        assert DateType.DAY_OF_WEEK.requires_value
        assert not DateType.END_OF_MONTH.requires_value


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_to_dict(self):
        error = UnboundedScanError(
            message="No business day", details={"cap": 31}, payroll_id="PAY-001"
        )
        assert error.to_dict() == {
            "code": "PC_UNBOUNDED_SCAN",
            "message": "No business day",
            "details": {"cap": 31},
            "payroll_id": "PAY-001",
        }

    def test_str(self):
        error = InvalidConfigurationError(message="bad", payroll_id="PAY-001")
        assert str(error) == "[PC_INVALID_CONFIGURATION] bad (payroll: PAY-001)"
        assert isinstance(error, PayCycleError)

    def test_outcome_ok(self):
        assert ScheduleOutcome(payroll_id="PAY-001").ok
        assert not ScheduleOutcome(payroll_id="PAY-001", error=PayCycleError(message="x")).ok


class TestLogging:
    """Tests for structured log lines."""

    def test_json_formatter_includes_extras(self):
        record = logging.LogRecord("paycycle.engine", logging.ERROR, __file__, 1, "failed %s", ("PAY-001",), None)
        record.payroll_id = "PAY-001"
        record.error_code = "PC_UNBOUNDED_SCAN"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "paycycle.engine"
        assert entry["message"] == "failed PAY-001"
        assert entry["payroll_id"] == "PAY-001"
        assert entry["error_code"] == "PC_UNBOUNDED_SCAN"
        assert "request_id" not in entry

    def test_configure_logging_replaces_handler(self):
        logger = configure_logging("debug")
        configure_logging("warning")
        owned = [h for h in logger.handlers if getattr(h, "_paycycle_handler", False)]
        try:
            assert len(owned) == 1
            assert logger.level == logging.WARNING
        finally:
            for handler in owned:
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
