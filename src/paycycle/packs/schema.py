"""
PayCycle Payroll Pack Schemas

Pydantic models for validating payroll pack YAML/JSON files.

A payroll pack lists payroll records (cycle configuration, region,
optional start date) and the holidays that may apply to them. These
schemas map to the domain models in paycycle.models.

Holidays are kept as raw entries here: they are parsed leniently by the
loader so that one bad holiday does not reject the whole pack.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..engine.schedule_generator import MAX_PERIODS


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

CycleTypeValue = Literal["weekly", "fortnightly", "bi_monthly", "monthly", "quarterly"]

DateTypeValue = Literal["fixed_date", "eom", "som", "week_a", "week_b", "dow"]

AdjustmentRuleValue = Literal["previous", "next", "nearest"]


# =============================================================================
# Payroll Schema
# =============================================================================

class PayrollSchema(BaseModel):
    """Schema for one payroll record."""
    id: str = Field(..., min_length=1, description="Payroll identifier (e.g., 'PAY-001')")
    name: str = Field("", description="Human-readable name")
    region: Optional[str] = Field(None, description="Region used to select holidays")

    cycle_type: CycleTypeValue = Field(..., description="Payroll cycle")
    date_type: DateTypeValue = Field(..., description="Anchor semantics")
    date_value: Optional[int] = Field(
        None, description="Day of month (fixed_date) or weekday 0=Sunday..6=Saturday"
    )
    processing_days_before_eft: int = Field(
        0, ge=0, description="Calendar days of processing lead time"
    )
    adjustment_rule: AdjustmentRuleValue = Field(
        "previous", description="Weekend/holiday adjustment"
    )

    start_date: Optional[date] = Field(None, description="Base date for generation")
    periods: Optional[int] = Field(
        None, ge=1, le=MAX_PERIODS, description="Periods to generate"
    )

    @field_validator("cycle_type", "date_type", "adjustment_rule", mode="before")
    @classmethod
    def normalize_enum_value(cls, v: Any) -> Any:
        """Accept enum values in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Payroll Pack Schema (Top-Level)
# =============================================================================

class PayrollPackSchema(BaseModel):
    """Top-level schema for a payroll pack YAML/JSON file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    name: Optional[str] = None
    description: Optional[str] = None

    payrolls: list[PayrollSchema] = Field(
        default_factory=list,
        description="Payroll records"
    )
    holidays: list[Any] = Field(
        default_factory=list,
        description="Holiday entries: date, name, recurring, region, id"
    )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "PayrollPackSchema":
        seen: set[str] = set()
        duplicates = []
        for payroll in self.payrolls:
            if payroll.id in seen:
                duplicates.append(payroll.id)
            seen.add(payroll.id)
        if duplicates:
            raise ValueError(f"Duplicate payroll IDs: {', '.join(duplicates)}")
        return self

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_payroll_pack(data: dict[str, Any]) -> PayrollPackSchema:
    """
    Validate a payroll pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return PayrollPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check the pack's schema major version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
