"""
Command-line interface for the availability report tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from .aggregator import generate_report, targets_by_tier
from .config import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOURCE,
    DEFAULT_VERBOSITY,
    ReportConfig,
    resolve_target,
)
from .errors import AvailabilityReportError
from .models import AvailabilityReport
from .reporting import RENDERERS, summary_lines
from .sources import open_source
from .time_utils import DEFAULT_WINDOW_DAYS


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a rolling package availability report for a target"
    )

    parser.add_argument(
        "--source",
        default=DEFAULT_SOURCE,
        help=f"Base URL or directory holding the availability data. Default: {DEFAULT_SOURCE}"
    )

    parser.add_argument(
        "--target",
        default=None,
        help="Target triple to report on. Default: x86_64-unknown-linux-gnu"
    )

    parser.add_argument(
        "--days",
        type=int,
        default=DEFAULT_WINDOW_DAYS,
        help=f"Number of days in the report window. Default: {DEFAULT_WINDOW_DAYS}"
    )

    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=sorted(RENDERERS),
        help="Output format, may be given more than once. Default: json"
    )

    parser.add_argument(
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help=f"Output directory for rendered reports. Default: {DEFAULT_OUTPUT_DIR}"
    )

    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="Print the targets with published data, grouped by tier, and exit"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while fetching package records"
    )

    parser.add_argument(
        "--verbosity",
        default=DEFAULT_VERBOSITY,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level. Default: {DEFAULT_VERBOSITY}"
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> ReportConfig:
    return ReportConfig(
        source=args.source,
        target=resolve_target(args.target),
        days=args.days,
        output_dir=Path(args.output_dir),
        formats=tuple(dict.fromkeys(args.formats or ["json"])),
        show_progress=args.progress,
        verbosity=args.verbosity,
    )


def list_targets(config: ReportConfig) -> int:
    source = open_source(config.source)
    tiers = targets_by_tier(source.fetch_metadata())
    if not tiers:
        print("No tier information published", file=sys.stderr)
        return 1
    for tier_name, targets in tiers.items():
        print(f"{tier_name}:")
        for target in targets:
            print(f"  {target}")
    return 0


def warn_if_unpublished(report: AvailabilityReport) -> None:
    """Log a warning when the target has no data to show."""
    tiers = targets_by_tier(report.additional or {})
    known = sorted(target for targets in tiers.values() for target in targets)
    if known and report.target not in known:
        logger.warning(
            "No published data for target %s. Known targets: %s",
            report.target,
            ", ".join(known),
        )
    elif not report.entries:
        logger.warning("No package has data for target %s", report.target)


def run(config: ReportConfig) -> int:
    """Build the report described by ``config`` and render it."""
    source = open_source(config.source)
    report = generate_report(
        source, config.target, days=config.days, show_progress=config.show_progress
    )
    warn_if_unpublished(report)
    for line in summary_lines(report):
        print(line)

    context = report.to_context()
    for fmt in config.formats:
        renderer = RENDERERS[fmt](config.output_dir)
        output = renderer.render(context)
        print(f"Report saved to: {output}")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.days < 1:
        parser.error("--days must be at least 1")

    config = _config_from_args(args)
    logging.basicConfig(
        level=getattr(logging, config.verbosity),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.list_targets:
            return list_targets(config)
        return run(config)
    except AvailabilityReportError as e:
        logger.error("Report generation failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
