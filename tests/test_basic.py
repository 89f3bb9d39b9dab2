"""Tests for the availability_report package."""

import pytest


def test_package_import():
    """Test that the package can be imported."""
    import availability_report
    assert availability_report.__version__ == "0.1.0"


def test_cli_import():
    """Test that CLI module can be imported."""
    from availability_report.cli import main
    assert callable(main)


def test_error_hierarchy():
    from availability_report.errors import (
        AvailabilityReportError,
        InvalidTimestamp,
        PackageDataAbsent,
        TopLevelFetchFailure,
    )

    assert issubclass(InvalidTimestamp, AvailabilityReportError)
    assert issubclass(InvalidTimestamp, ValueError)
    assert issubclass(TopLevelFetchFailure, AvailabilityReportError)
    assert issubclass(PackageDataAbsent, AvailabilityReportError)


def test_package_record_splits_last_available():
    from availability_report.models import MISSING_STATUS, PackageRecord

    record = PackageRecord.from_json(
        {"2024-01-10": True, "2024-01-09": False, "last_available": "2024-01-10"}
    )

    assert record.last_available == "2024-01-10"
    assert "last_available" not in record.statuses
    assert record.status_on("2024-01-09") is False
    assert record.status_on("2023-12-31") is MISSING_STATUS


def test_package_record_without_last_available():
    from availability_report.models import MISSING_STATUS, PackageRecord

    record = PackageRecord.from_json({"2024-01-10": True})

    assert record.last_available is MISSING_STATUS


def test_resolve_target_defaults():
    from availability_report.config import resolve_target

    assert resolve_target(None) == "x86_64-unknown-linux-gnu"
    assert resolve_target("") == "x86_64-unknown-linux-gnu"
    assert resolve_target("aarch64-apple-darwin") == "aarch64-apple-darwin"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
