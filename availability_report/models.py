"""
Core data models for availability reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


DEFAULT_TARGET = "x86_64-unknown-linux-gnu"

# Status inserted for a window date that a package record does not mention.
MISSING_STATUS = None

LAST_AVAILABLE_KEY = "last_available"


@dataclass(frozen=True)
class PackageRecord:
    """Daily statuses of one package on one target."""

    statuses: Mapping[str, Any]
    last_available: Any = MISSING_STATUS

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PackageRecord":
        """Split a raw ``{date: status, ..., "last_available": ...}`` object."""
        statuses = {key: value for key, value in data.items() if key != LAST_AVAILABLE_KEY}
        return cls(
            statuses=statuses,
            last_available=data.get(LAST_AVAILABLE_KEY, MISSING_STATUS),
        )

    def status_on(self, date: str) -> Any:
        return self.statuses.get(date, MISSING_STATUS)


@dataclass(frozen=True)
class PackageAvailabilityEntry:
    """One row of the report."""

    package_name: str
    availability_list: Tuple[Any, ...]
    last_available: Any


@dataclass(frozen=True)
class AvailabilityReport:
    """A report ready to be handed to a renderer."""

    target: str
    dates: Tuple[str, ...]
    entries: Tuple[PackageAvailabilityEntry, ...]
    additional: Optional[Mapping[str, Any]] = field(default=None)

    def to_context(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "dates": list(self.dates),
            "entries": [
                {
                    "package_name": entry.package_name,
                    "availability_list": list(entry.availability_list),
                    "last_available": entry.last_available,
                }
                for entry in self.entries
            ],
            "additional": dict(self.additional) if self.additional is not None else {},
        }

    def package_names(self) -> Tuple[str, ...]:
        return tuple(entry.package_name for entry in self.entries)
