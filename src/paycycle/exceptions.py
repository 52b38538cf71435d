"""
PayCycle Exception Hierarchy

Domain-specific exceptions for payroll schedule generation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: PC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PayCycleError(Exception):
    """
    Base exception for all PayCycle errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (PC_*)
        details: Additional context about the error
        payroll_id: Associated payroll ID if applicable
    """
    message: str
    code: str = "PC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    payroll_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.payroll_id:
            parts.append(f"(payroll: {self.payroll_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.payroll_id:
            result["payroll_id"] = self.payroll_id
        return result


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class InvalidConfigurationError(PayCycleError):
    """
    Schedule configuration is missing a required value or is out of range.

    Never recovered by substituting a default: a wrong default produces a
    materially wrong pay date.
    """
    code: str = "PC_INVALID_CONFIGURATION"


# =============================================================================
# Calculation Errors
# =============================================================================

@dataclass
class UnboundedScanError(PayCycleError):
    """A day-by-day scan exceeded its safety cap. Not retryable."""
    code: str = "PC_UNBOUNDED_SCAN"


# =============================================================================
# Holiday Errors
# =============================================================================

@dataclass
class MalformedHolidayError(PayCycleError):
    """A holiday entry could not be interpreted. Skipped by lenient parsers."""
    code: str = "PC_MALFORMED_HOLIDAY"


# =============================================================================
# Payroll Pack Errors
# =============================================================================

@dataclass
class PackLoadError(PayCycleError):
    """Failed to load payroll pack from file."""
    code: str = "PC_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(PayCycleError):
    """Payroll pack schema validation failed."""
    code: str = "PC_PACK_VALIDATION_ERROR"


@dataclass
class PackVersionMismatch(PayCycleError):
    """Payroll pack schema version doesn't match expected version."""
    code: str = "PC_PACK_VERSION_MISMATCH"


@dataclass
class PayrollNotFoundError(PayCycleError):
    """Requested payroll not present in the loaded pack."""
    code: str = "PC_PAYROLL_NOT_FOUND"
