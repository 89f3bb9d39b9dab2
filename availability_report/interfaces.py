"""
Interfaces for availability data sources and report renderers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Protocol

from .models import PackageRecord


class AvailabilitySource(Protocol):
    """Retrieve the package list, the metadata and per-package records."""

    def fetch_packages(self) -> List[str]:
        ...

    def fetch_metadata(self) -> Dict[str, Any]:
        ...

    def fetch_package_record(self, target: str, package: str) -> PackageRecord:
        ...


class ReportRenderer(Protocol):
    """Turn a report context into something viewable."""

    def render(self, context: Mapping[str, Any]) -> Any:
        ...
