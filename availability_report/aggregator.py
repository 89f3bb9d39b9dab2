"""
Aggregation of per-package records into an availability report.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Sequence

from tqdm import tqdm

from .fetcher import PackageAvailabilityFetcher
from .interfaces import AvailabilitySource
from .models import AvailabilityReport, PackageAvailabilityEntry, PackageRecord
from .time_utils import DEFAULT_WINDOW_DAYS, build_date_window, real_dates


logger = logging.getLogger(__name__)

ANCHOR_KEY = "datetime"


def build_entry(
    package: str,
    record: PackageRecord,
    dates: Sequence[str],
) -> PackageAvailabilityEntry:
    """Align a record with the window dates."""
    return PackageAvailabilityEntry(
        package_name=package,
        availability_list=tuple(record.status_on(date) for date in dates),
        last_available=record.last_available,
    )


class AvailabilityAggregator:
    """Combine the date window with each package record, in package order."""

    def __init__(self, fetcher: PackageAvailabilityFetcher, show_progress: bool = False) -> None:
        self.fetcher = fetcher
        self.show_progress = show_progress

    async def aggregate(
        self,
        target: str,
        packages: Iterable[str],
        window: Iterable[str],
    ) -> List[PackageAvailabilityEntry]:
        """Build report entries for the packages that have a record.

        Packages are fetched one after another so the entries keep the
        order of ``packages``. Packages without a record are left out.

        Args:
            target: Target triple to report on
            packages: Package names, in display order
            window: Window dates, optionally with the empty placeholder

        Returns:
            List of entries, one per package with data
        """
        dates = real_dates(window)
        packages = list(dict.fromkeys(packages))
        entries: List[PackageAvailabilityEntry] = []

        for package in tqdm(
            packages,
            desc=f"Packages ({target})",
            unit="pkg",
            disable=not self.show_progress,
        ):
            record = await self.fetcher.fetch(target, package)
            if record is None:
                continue
            entries.append(build_entry(package, record, dates))

        logger.info(
            "Collected %d of %d packages for %s", len(entries), len(packages), target
        )
        return entries


async def build_report(
    source: AvailabilitySource,
    target: str,
    days: int = DEFAULT_WINDOW_DAYS,
    show_progress: bool = False,
) -> AvailabilityReport:
    """Fetch everything a report needs and assemble it.

    Raises:
        TopLevelFetchFailure: If the package list or metadata is unavailable
        InvalidTimestamp: If the metadata anchor is missing or cannot be parsed
    """
    # Sequential: an HTTP source reuses one requests.Session.
    packages = await asyncio.to_thread(source.fetch_packages)
    metadata = await asyncio.to_thread(source.fetch_metadata)

    window = build_date_window(metadata.get(ANCHOR_KEY), days=days)
    logger.info("Report window for %s: %s to %s", target, window[-1], window[0])

    aggregator = AvailabilityAggregator(
        PackageAvailabilityFetcher(source), show_progress=show_progress
    )
    entries = await aggregator.aggregate(target, packages, window)
    return AvailabilityReport(
        target=target,
        dates=window,
        entries=tuple(entries),
        additional=metadata,
    )


def generate_report(
    source: AvailabilitySource,
    target: str,
    days: int = DEFAULT_WINDOW_DAYS,
    show_progress: bool = False,
) -> AvailabilityReport:
    """Synchronous wrapper around :func:`build_report`."""
    return asyncio.run(build_report(source, target, days=days, show_progress=show_progress))


def targets_by_tier(metadata: Dict[str, Any]) -> Dict[str, List[str]]:
    """List the targets with published data, grouped by support tier.

    Reads the ``tiers`` field written next to the rendered pages::

        {"tiers_and_targets": [["Tier 1", [["x86_64-unknown-linux-gnu", true], ...]], ...],
         "unknown_tier": ["some-new-target", ...]}
    """
    tiers = metadata.get("tiers") or {}
    grouped: Dict[str, List[str]] = {}
    for tier_name, targets in tiers.get("tiers_and_targets", []):
        available = [target for target, has_data in targets if has_data]
        if available:
            grouped[tier_name] = available
    unknown = list(tiers.get("unknown_tier", []))
    if unknown:
        grouped["Unknown tier"] = unknown
    return grouped
