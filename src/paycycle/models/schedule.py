"""
PayCycle Schedule Models

Key components:
- ScheduleConfig: How a payroll's pay dates are derived
- PayrollDateResult: One computed pay run (EFT and processing dates)
- ScheduleRequest: One payroll's generation request in a batch
- ScheduleOutcome: Typed result of generating one payroll's schedule
- PayrollDefinition: A payroll record as loaded from a payroll pack

A ScheduleConfig is built once per payroll record and passed by value.
PayrollDateResult values have no identity until an external store
persists them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..exceptions import InvalidConfigurationError, PayCycleError
from .enums import AdjustmentRule, CycleType, DateType
from .holiday import Holiday


# =============================================================================
# Value Ranges
# =============================================================================

MIN_DAY_OF_MONTH = 1
MAX_DAY_OF_MONTH = 31
MIN_WEEKDAY = 0   # Sunday
MAX_WEEKDAY = 6   # Saturday

DEFAULT_PERIODS = 12
MAX_PERIODS = 60


def _coerce_enum(enum_cls, value: Any, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidConfigurationError(
            message=f"Unsupported {field_name} '{value}' (expected one of: {allowed})",
            details={"field": field_name, "value": value},
        )


# =============================================================================
# Schedule Config
# =============================================================================

@dataclass(frozen=True)
class ScheduleConfig:
    """
    Cycle configuration for one payroll.

    Attributes:
        cycle_type: How often the payroll runs
        date_type: Anchor semantics applied after advancing the cycle
        date_value: Day of month (FIXED_DATE) or weekday 0=Sunday..6=Saturday
            (WEEK_A, WEEK_B, DAY_OF_WEEK); ignored for EOM/SOM
        processing_days_before_eft: Calendar days of lead time before EFT
        adjustment_rule: How weekend/holiday dates are moved
        holidays: Holidays applying to this payroll's region
    """
    cycle_type: CycleType
    date_type: DateType
    date_value: Optional[int] = None
    processing_days_before_eft: int = 0
    adjustment_rule: AdjustmentRule = AdjustmentRule.PREVIOUS
    holidays: tuple[Holiday, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "cycle_type", _coerce_enum(CycleType, self.cycle_type, "cycle_type")
        )
        object.__setattr__(
            self, "date_type", _coerce_enum(DateType, self.date_type, "date_type")
        )
        object.__setattr__(
            self,
            "adjustment_rule",
            _coerce_enum(AdjustmentRule, self.adjustment_rule, "adjustment_rule"),
        )
        object.__setattr__(self, "holidays", tuple(self.holidays))

    def validate(self) -> None:
        """
        Check the config can be calculated.

        Raises:
            InvalidConfigurationError: with a field-specific message
        """
        validate_date_value(self.date_type, self.date_value)

        lead = self.processing_days_before_eft
        if isinstance(lead, bool) or not isinstance(lead, int) or lead < 0:
            raise InvalidConfigurationError(
                message="processing_days_before_eft must be a non-negative integer",
                details={"field": "processing_days_before_eft", "value": lead},
            )

    def with_holidays(self, holidays: list[Holiday]) -> ScheduleConfig:
        """Return a copy of this config using a different holiday list."""
        return ScheduleConfig(
            cycle_type=self.cycle_type,
            date_type=self.date_type,
            date_value=self.date_value,
            processing_days_before_eft=self.processing_days_before_eft,
            adjustment_rule=self.adjustment_rule,
            holidays=tuple(holidays),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cycle_type": self.cycle_type.value,
            "date_type": self.date_type.value,
            "date_value": self.date_value,
            "processing_days_before_eft": self.processing_days_before_eft,
            "adjustment_rule": self.adjustment_rule.value,
            "holidays": [h.to_dict() for h in self.holidays],
        }


def validate_date_value(date_type: DateType, date_value: Optional[int]) -> None:
    """
    Check a date value against what its date type needs.

    Raises:
        InvalidConfigurationError: if the value is required and missing,
            or is outside 1-31 (FIXED_DATE) / 0-6 (weekday types)
    """
    if not date_type.requires_value:
        return

    if date_value is None:
        raise InvalidConfigurationError(
            message=f"date_value required for {date_type.value} date type",
            details={"field": "date_value", "date_type": date_type.value},
        )

    if isinstance(date_value, bool) or not isinstance(date_value, int):
        raise InvalidConfigurationError(
            message=f"date_value must be an integer for {date_type.value} date type",
            details={"field": "date_value", "value": date_value},
        )

    if date_type.uses_weekday:
        low, high, meaning = MIN_WEEKDAY, MAX_WEEKDAY, "weekday (0=Sunday..6=Saturday)"
    else:
        low, high, meaning = MIN_DAY_OF_MONTH, MAX_DAY_OF_MONTH, "day of month"

    if not low <= date_value <= high:
        raise InvalidConfigurationError(
            message=(
                f"date_value {date_value} out of range for {date_type.value} "
                f"date type: expected {meaning} {low}-{high}"
            ),
            details={
                "field": "date_value",
                "value": date_value,
                "date_type": date_type.value,
                "min": low,
                "max": high,
            },
        )


# =============================================================================
# Payroll Date Result
# =============================================================================

@dataclass(frozen=True)
class PayrollDateResult:
    """
    One pay run's dates.

    Attributes:
        original_eft_date: Anchor date before weekend/holiday adjustment
        adjusted_eft_date: Date funds are transferred
        processing_date: Date processing must begin
    """
    original_eft_date: date
    adjusted_eft_date: date
    processing_date: date

    @property
    def was_adjusted(self) -> bool:
        """True when the anchor date fell on a weekend or holiday."""
        return self.original_eft_date != self.adjusted_eft_date

    @property
    def lead_days(self) -> int:
        """Calendar days between processing and EFT."""
        return (self.adjusted_eft_date - self.processing_date).days

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_eft_date": self.original_eft_date.isoformat(),
            "adjusted_eft_date": self.adjusted_eft_date.isoformat(),
            "processing_date": self.processing_date.isoformat(),
        }


# =============================================================================
# Batch Request / Outcome
# =============================================================================

@dataclass(frozen=True)
class ScheduleRequest:
    """A single payroll's entry in a batch generation run."""
    payroll_id: str
    start_date: date
    config: ScheduleConfig
    periods: int = DEFAULT_PERIODS


@dataclass
class ScheduleOutcome:
    """
    Result of generating one payroll's schedule.

    Exactly one of results (non-empty) or error is meaningful; callers
    check `ok` before reading results.
    """
    payroll_id: str
    results: list[PayrollDateResult] = field(default_factory=list)
    error: Optional[PayCycleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "payroll_id": self.payroll_id,
            "ok": self.ok,
            "results": [r.to_dict() for r in self.results],
        }
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data


# =============================================================================
# Payroll Definition
# =============================================================================

@dataclass
class PayrollDefinition:
    """
    A payroll record as read from a payroll pack.

    Attributes:
        id: Payroll identifier
        name: Display name
        config: Cycle configuration (holidays already filtered to region)
        region: Region used to select holidays
        start_date: Base date for schedule generation, if the pack sets one
        periods: Periods to generate, if the pack sets one
    """
    id: str
    name: str
    config: ScheduleConfig
    region: Optional[str] = None
    start_date: Optional[date] = None
    periods: Optional[int] = None
