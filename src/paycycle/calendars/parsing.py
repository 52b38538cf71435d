"""
Holiday entry parsing and region filtering.

Holiday enrichment is best-effort: an entry that cannot be read is
dropped with a warning rather than failing the whole schedule.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Iterable, Optional

from ..exceptions import MalformedHolidayError
from ..models import Holiday

logger = logging.getLogger(__name__)


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            pass
    raise MalformedHolidayError(
        message=f"Unparsable holiday date: {value!r}",
        details={"value": repr(value)},
    )


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "1"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "0", ""}:
        return False
    if isinstance(value, int):
        return bool(value)
    raise MalformedHolidayError(
        message=f"Unparsable holiday recurring flag: {value!r}",
        details={"value": repr(value)},
    )


def parse_holiday(entry: Any) -> Holiday:
    """
    Coerce a raw holiday entry into a Holiday.

    Accepts a Holiday or a mapping with keys date, name, recurring,
    region and id. The date may be a date, datetime or ISO string.

    Raises:
        MalformedHolidayError: if the entry cannot be interpreted
    """
    if isinstance(entry, Holiday):
        return Holiday(
            date=_parse_date(entry.date),
            name=entry.name,
            recurring=entry.recurring,
            region=entry.region,
            id=entry.id,
        )

    if not isinstance(entry, Mapping):
        raise MalformedHolidayError(
            message=f"Holiday entry must be a mapping, got {type(entry).__name__}",
            details={"entry": repr(entry)},
        )

    if entry.get("date") is None:
        raise MalformedHolidayError(
            message="Holiday entry has no date",
            details={"entry": repr(dict(entry))},
        )

    region = entry.get("region")
    raw_id = entry.get("id")
    return Holiday(
        date=_parse_date(entry["date"]),
        name=str(entry.get("name") or ""),
        recurring=_parse_bool(entry.get("recurring", False)),
        region=str(region) if region is not None else None,
        id=str(raw_id) if raw_id is not None else None,
    )


def parse_holidays(entries: Optional[Iterable[Any]]) -> list[Holiday]:
    """
    Parse holiday entries leniently.

    Malformed entries are logged and skipped; order is preserved.
    """
    holidays: list[Holiday] = []
    for index, entry in enumerate(entries or ()):
        try:
            holidays.append(parse_holiday(entry))
        except MalformedHolidayError as e:
            logger.warning(
                "Skipping holiday entry %d: %s",
                index,
                e.message,
                extra={"error_code": e.code},
            )
    return holidays


def filter_by_region(holidays: Iterable[Holiday], region: Optional[str]) -> list[Holiday]:
    """
    Keep holidays that apply to a region.

    National holidays (no region, "national" or "all") apply everywhere.
    With no region given, only national holidays are kept.
    """
    wanted = region.strip().lower() if region else None
    kept = []
    for holiday in holidays:
        if holiday.is_national:
            kept.append(holiday)
        elif wanted is not None and holiday.region.strip().lower() == wanted:
            kept.append(holiday)
    return kept
