"""
PayCycle Holiday Model

A holiday as supplied by the payroll record store, already filtered to
the payroll's region by the caller (or by the pack loader).

Matching:
- Non-recurring holidays match the exact (year, month, day)
- Recurring holidays match (month, day) in any year
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


# Region values treated as applying to every payroll region.
NATIONAL_REGIONS = frozenset({"", "national", "all"})


@dataclass(frozen=True)
class Holiday:
    """
    A single holiday definition.

    Attributes:
        date: The holiday date (year ignored when recurring)
        name: Display name, e.g. "Christmas Day"
        recurring: True = recurs every year on the same month/day
        region: Region code, e.g. "NSW"; None or "national" applies everywhere
        id: Identifier from the record store, if any
    """
    date: date
    name: str = ""
    recurring: bool = False
    region: Optional[str] = None
    id: Optional[str] = None

    def matches(self, d: date) -> bool:
        """Check whether this holiday falls on the given date."""
        if self.recurring:
            return self.date.month == d.month and self.date.day == d.day
        return self.date == d

    def occurs_in_year(self, year: int) -> Optional[date]:
        """
        Get this holiday's date in a given year.

        Returns None for a non-recurring holiday outside that year, and for
        a recurring Feb 29 holiday in a non-leap year.
        """
        if not self.recurring:
            return self.date if self.date.year == year else None
        try:
            return self.date.replace(year=year)
        except ValueError:
            return None

    @property
    def is_national(self) -> bool:
        return self.region is None or self.region.strip().lower() in NATIONAL_REGIONS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "name": self.name,
            "recurring": self.recurring,
            "region": self.region,
        }
