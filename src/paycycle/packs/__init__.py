"""
PayCycle Payroll Packs

Schema validation and loading for payroll packs.

Payroll packs are YAML or JSON files listing payroll records (cycle
configuration and region) and the holidays that may apply to them.

Usage:
    from paycycle.packs import load_payroll_pack, PayrollPackLoader

    pack = load_payroll_pack("path/to/payrolls.yaml")
    payroll = pack.get_payroll("PAY-001")

    # Reject unusual cycle/date type combinations
    loader = PayrollPackLoader(strict_combinations=True)
    pack = loader.load("path/to/payrolls.yaml")
"""
from __future__ import annotations

from .loader import (
    PayrollPack,
    PayrollPackLoader,
    load_payroll_pack,
    load_payroll_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    PayrollPackSchema,
    PayrollSchema,
    check_schema_version,
    validate_payroll_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "PayrollPack",
    "PayrollPackLoader",
    "load_payroll_pack",
    "load_payroll_pack_from_string",
    # Validation
    "validate_payroll_pack",
    "check_schema_version",
    # Schemas
    "PayrollPackSchema",
    "PayrollSchema",
]
