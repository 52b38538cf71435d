"""Response schemas for the API."""

from typing import Any, Optional

from pydantic import BaseModel

from paycycle.models import PayrollDateResult


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    service: str
    version: str
    payrolls_loaded: int


class ErrorBody(BaseModel):
    """Structured error body."""
    code: str
    message: str
    details: dict[str, Any] = {}
    payroll_id: Optional[str] = None


class DateTypeInfo(BaseModel):
    """A date type offered for a cycle."""
    value: str
    display_name: str
    requires_value: bool


class CycleInfo(BaseModel):
    """A cycle type with its supported date types."""
    value: str
    display_name: str
    date_types: list[DateTypeInfo]


class PayrollDateResponse(BaseModel):
    """One pay run's dates."""
    original_eft_date: str
    adjusted_eft_date: str
    processing_date: str
    was_adjusted: bool

    @classmethod
    def from_result(cls, result: PayrollDateResult) -> "PayrollDateResponse":
        return cls(was_adjusted=result.was_adjusted, **result.to_dict())


class ScheduleSummary(BaseModel):
    """Summary of a generated schedule."""
    description: str
    periods: int
    first_eft_date: str
    last_eft_date: str
    adjusted_count: int


class ScheduleResponse(BaseModel):
    """Response from schedule generation."""
    results: list[PayrollDateResponse]
    summary: ScheduleSummary


class BatchOutcome(BaseModel):
    """One payroll's outcome in a batch."""
    payroll_id: str
    ok: bool
    results: list[PayrollDateResponse] = []
    error: Optional[ErrorBody] = None


class BatchResponse(BaseModel):
    """Response from batch generation."""
    outcomes: list[BatchOutcome]
    total: int
    succeeded: int
    failed: int


class AdjustDateResponse(BaseModel):
    """Response from date adjustment."""
    original: str
    adjusted: str
    rule: str
    is_business_day: bool


class PayrollSummary(BaseModel):
    """Summary of a payroll loaded from the pack."""
    id: str
    name: str
    region: Optional[str] = None
    cycle_type: str
    date_type: str
    date_value: Optional[int] = None
    description: str
    holiday_count: int
