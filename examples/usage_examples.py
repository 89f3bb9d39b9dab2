#!/usr/bin/env python3
"""
Example script showing how to use the availability report library.
"""

import asyncio
from pathlib import Path

from availability_report.aggregator import build_report, generate_report, targets_by_tier
from availability_report.reporting import CsvReportRenderer, JsonReportRenderer
from availability_report.sources import HttpAvailabilitySource


BASE_URL = "https://rust-lang.github.io/rustup-components-history"


def example_default_target():
    """Example: Report for the default target."""
    print("="*60)
    print("Example 1: Default Target")
    print("="*60)

    source = HttpAvailabilitySource(BASE_URL)
    report = generate_report(source, "x86_64-unknown-linux-gnu")

    print(f"\nTarget: {report.target}")
    print(f"Dates: {report.dates[-1]} to {report.dates[0]}")
    for entry in report.entries:
        marks = "".join("+" if status else "-" for status in entry.availability_list)
        print(f"{entry.package_name:30} {marks}  last: {entry.last_available}")

    output = JsonReportRenderer(Path("./output/example1")).render(report.to_context())
    print(f"\nContext saved to: {output}")


def example_several_targets():
    """Example: One CSV table per tier 1 target."""
    print("\n" + "="*60)
    print("Example 2: Tier 1 Targets")
    print("="*60)

    source = HttpAvailabilitySource(BASE_URL)
    tiers = targets_by_tier(source.fetch_metadata())
    renderer = CsvReportRenderer(Path("./output/example2"))

    async def build_all(targets):
        return [await build_report(source, target) for target in targets]

    for report in asyncio.run(build_all(tiers.get("Tier 1", []))):
        output = renderer.render(report.to_context())
        print(f"{report.target}: {len(report.entries)} packages -> {output}")


if __name__ == "__main__":
    import sys

    print("Availability Report - Example Usage")
    print("="*60)
    print("\nNOTE: These examples require network access.")

    try:
        example_default_target()
        example_several_targets()

        print("\n" + "="*60)
        print("Examples completed successfully!")
        print("Check the ./output directory for the rendered reports.")
        print("="*60)

    except Exception as e:
        print(f"\nError running examples: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
