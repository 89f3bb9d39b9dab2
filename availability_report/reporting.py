"""
Report renderers and export utilities.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

import pandas as pd

from .interfaces import ReportRenderer
from .models import AvailabilityReport


def summary_lines(report: AvailabilityReport) -> List[str]:
    lines = ["=" * 60, "PACKAGE AVAILABILITY", "=" * 60, f"Target: {report.target}"]
    if report.dates:
        lines.append(f"Period: {report.dates[-1]} to {report.dates[0]}")
    lines.append("-" * 60)
    for entry in report.entries:
        lines.append(f"{entry.package_name:30} last available: {entry.last_available}")
    lines.append(f"Number of packages: {len(report.entries)}")
    lines.append("=" * 60)
    return lines


def report_frame(context: Mapping[str, Any]) -> pd.DataFrame:
    """One row per package, one column per date, plus ``last_available``."""
    dates = list(context["dates"])
    rows = []
    for entry in context["entries"]:
        row = {"package_name": entry["package_name"]}
        row.update(zip(dates, entry["availability_list"]))
        row["last_available"] = entry["last_available"]
        rows.append(row)
    return pd.DataFrame(rows, columns=["package_name", *dates, "last_available"])


class JsonReportRenderer(ReportRenderer):
    """Write the context to ``<output_dir>/<target>.json``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def render(self, context: Mapping[str, Any]) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        report_file = self.output_dir / f"{context['target']}.json"
        with open(report_file, 'w') as f:
            json.dump(context, f, indent=2, default=str)
        return report_file


class CsvReportRenderer(ReportRenderer):
    """Write the availability table to ``<output_dir>/<target>.csv``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def render(self, context: Mapping[str, Any]) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        csv_file = self.output_dir / f"{context['target']}.csv"
        report_frame(context).to_csv(csv_file, index=False)
        return csv_file


RENDERERS = {
    "json": JsonReportRenderer,
    "csv": CsvReportRenderer,
}
