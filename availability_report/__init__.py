"""
Package Availability Report

Builds a rolling per-target report of which packages were available on each
of the last few days.
"""

__version__ = "0.1.0"

from .aggregator import AvailabilityAggregator, build_report, generate_report
from .cli import main
from .fetcher import PackageAvailabilityFetcher
from .models import AvailabilityReport, PackageAvailabilityEntry, PackageRecord
from .time_utils import build_date_window

__all__ = [
    "AvailabilityAggregator",
    "AvailabilityReport",
    "PackageAvailabilityEntry",
    "PackageAvailabilityFetcher",
    "PackageRecord",
    "build_date_window",
    "build_report",
    "generate_report",
    "main",
]
