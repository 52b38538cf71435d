"""
PayCycle Payroll Pack Loader

Loads and validates payroll packs from YAML or JSON files.

Converts Pydantic schema models to PayCycle domain models, filtering
the pack's holidays down to each payroll's region.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars import filter_by_region, parse_holidays
from ..engine.describer import is_supported_combination
from ..exceptions import (
    InvalidConfigurationError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    PayrollNotFoundError,
)
from ..models import Holiday, PayrollDefinition, ScheduleConfig
from .schema import (
    SCHEMA_VERSION,
    PayrollPackSchema,
    PayrollSchema,
    check_schema_version,
    validate_payroll_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Payroll Pack
# =============================================================================

@dataclass
class PayrollPack:
    """A loaded payroll pack."""
    payrolls: list[PayrollDefinition] = field(default_factory=list)
    holidays: list[Holiday] = field(default_factory=list)
    name: Optional[str] = None
    source: Optional[str] = None
    schema_version: str = SCHEMA_VERSION

    def get_payroll(self, payroll_id: str) -> PayrollDefinition:
        """
        Get a payroll by ID.

        Raises:
            PayrollNotFoundError: if the pack has no such payroll
        """
        for payroll in self.payrolls:
            if payroll.id == payroll_id:
                return payroll
        raise PayrollNotFoundError(
            message=f"Payroll '{payroll_id}' not found",
            details={"available": [p.id for p in self.payrolls]},
            payroll_id=payroll_id,
        )

    @property
    def payroll_ids(self) -> list[str]:
        return [p.id for p in self.payrolls]


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_payroll(schema: PayrollSchema, holidays: list[Holiday]) -> PayrollDefinition:
    """Convert PayrollSchema to PayrollDefinition, selecting regional holidays."""
    config = ScheduleConfig(
        cycle_type=schema.cycle_type,
        date_type=schema.date_type,
        date_value=schema.date_value,
        processing_days_before_eft=schema.processing_days_before_eft,
        adjustment_rule=schema.adjustment_rule,
        holidays=tuple(filter_by_region(holidays, schema.region)),
    )
    return PayrollDefinition(
        id=schema.id,
        name=schema.name or schema.id,
        config=config,
        region=schema.region,
        start_date=schema.start_date,
        periods=schema.periods,
    )


def _check_payroll(payroll: PayrollDefinition, strict_combinations: bool) -> None:
    """
    Validate one converted payroll.

    Raises:
        InvalidConfigurationError: on invalid config, or on an unusual
            cycle/date type combination when strict_combinations is set
    """
    payroll.config.validate()

    cycle = payroll.config.cycle_type
    date_type = payroll.config.date_type
    if not is_supported_combination(cycle, date_type):
        message = (
            f"{date_type.value} date type is not offered for {cycle.value} payrolls"
        )
        if strict_combinations:
            raise InvalidConfigurationError(
                message=message,
                details={"cycle_type": cycle.value, "date_type": date_type.value},
                payroll_id=payroll.id,
            )
        logger.warning("Payroll %s: %s", payroll.id, message, extra={"payroll_id": payroll.id})


def _convert_payroll_pack(
    schema: PayrollPackSchema,
    source: Optional[str] = None,
    strict_combinations: bool = False,
) -> PayrollPack:
    """
    Convert a validated pack schema to a PayrollPack.

    Raises:
        PackValidationError: listing every payroll with an invalid config
    """
    holidays = parse_holidays(schema.holidays)
    dropped = len(schema.holidays) - len(holidays)
    if dropped:
        logger.warning("Dropped %d malformed holiday entries from %s", dropped, source or "pack")

    payrolls: list[PayrollDefinition] = []
    errors: list[dict[str, Any]] = []
    for payroll_schema in schema.payrolls:
        payroll = _convert_payroll(payroll_schema, holidays)
        try:
            _check_payroll(payroll, strict_combinations)
        except InvalidConfigurationError as e:
            errors.append({"payroll_id": payroll.id, **e.to_dict()})
            continue
        payrolls.append(payroll)

    if errors:
        raise PackValidationError(
            message=f"Payroll pack has {len(errors)} invalid payroll(s)",
            details={"errors": errors, "path": source},
        )

    return PayrollPack(
        payrolls=payrolls,
        holidays=holidays,
        name=schema.name,
        source=source,
        schema_version=schema.schema_version,
    )


# =============================================================================
# Payroll Pack Loader
# =============================================================================

class PayrollPackLoader:
    """
    Loads payroll packs from YAML or JSON files.

    Usage:
        loader = PayrollPackLoader()
        pack = loader.load("path/to/payrolls.yaml")
        payroll = pack.get_payroll("PAY-001")
    """

    def __init__(self, strict_version: bool = True, strict_combinations: bool = False):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
            strict_combinations: If True, reject cycle/date type combinations
                that payroll editors do not offer (otherwise warn)
        """
        self.strict_version = strict_version
        self.strict_combinations = strict_combinations

        # Loaded packs by source path
        self._packs: dict[str, PayrollPack] = {}

    def load(self, path: Union[str, Path]) -> PayrollPack:
        """
        Load a payroll pack from a file.

        Raises:
            PackLoadError: If file cannot be read
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise PackLoadError(
                message=f"Failed to load payroll pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        pack = self.load_data(data, source=str(path))
        self._packs[str(path)] = pack
        logger.info(
            "Loaded payroll pack %s: %d payrolls, %d holidays",
            path,
            len(pack.payrolls),
            len(pack.holidays),
        )
        return pack

    def load_data(self, data: Any, source: Optional[str] = None) -> PayrollPack:
        """
        Validate and convert already-parsed pack data.

        Raises:
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        if not isinstance(data, dict):
            raise PackValidationError(
                message="Payroll pack must be a mapping at the top level",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise PackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_payroll_pack(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Payroll pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            )

        return _convert_payroll_pack(schema, source, self.strict_combinations)

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            # YAML is a superset of JSON
            return yaml.safe_load(f)

    def get_pack(self, path: Union[str, Path]) -> Optional[PayrollPack]:
        """Get a previously loaded pack by its path."""
        return self._packs.get(str(Path(path)))


# =============================================================================
# Convenience Functions
# =============================================================================

def load_payroll_pack(path: Union[str, Path]) -> PayrollPack:
    """
    Load a payroll pack from a file.

    Convenience function that creates a temporary loader.
    """
    return PayrollPackLoader().load(path)


def load_payroll_pack_from_string(content: str, format: str = "yaml") -> PayrollPack:
    """
    Load a payroll pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise PackLoadError(
            message=f"Failed to parse payroll pack: {e}",
            details={"format": format, "error": str(e)},
        )
    return PayrollPackLoader().load_data(data)
