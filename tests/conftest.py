import json
from pathlib import Path

import pytest

from availability_report.errors import PackageDataAbsent, TopLevelFetchFailure
from availability_report.models import PackageRecord


class FakeSource:
    """In-memory source recording the order of record fetches."""

    def __init__(self, packages, metadata, records, fail_top_level=False):
        self.packages = packages
        self.metadata = metadata
        self.records = records
        self.fail_top_level = fail_top_level
        self.calls = []
        self.top_level_calls = []

    def fetch_packages(self):
        self.top_level_calls.append("packages")
        if self.fail_top_level:
            raise TopLevelFetchFailure("packages.json unreachable")
        return list(self.packages)

    def fetch_metadata(self):
        self.top_level_calls.append("metadata")
        return dict(self.metadata)

    def fetch_package_record(self, target, package):
        self.calls.append((target, package))
        data = self.records.get((target, package))
        if data is None:
            raise PackageDataAbsent(target, package)
        return PackageRecord.from_json(data)


@pytest.fixture
def beta_record():
    return {
        "2024-01-10": "available",
        "2024-01-09": "available",
        "2024-01-08": "missing",
        "2024-01-07": "available",
        "2024-01-06": "available",
        "2024-01-05": "available",
        "2024-01-04": "missing",
        "last_available": "2024-01-10",
    }


@pytest.fixture
def fake_source(beta_record):
    return FakeSource(
        packages=["alpha", "beta"],
        metadata={"datetime": "2024-01-10T00:00:00Z"},
        records={("x86_64-unknown-linux-gnu", "beta"): beta_record},
    )


@pytest.fixture
def data_tree(tmp_path: Path, beta_record) -> Path:
    """A published data directory with one good, one missing and one broken record."""
    (tmp_path / "packages.json").write_text(
        json.dumps(["alpha", "beta", "gamma"]), encoding="utf-8"
    )
    (tmp_path / "additional.json").write_text(
        json.dumps({"datetime": "10 Jan 2024, 06:30:00 UTC", "note": "nightly"}),
        encoding="utf-8",
    )
    target_dir = tmp_path / "x86_64-unknown-linux-gnu"
    target_dir.mkdir()
    (target_dir / "beta.json").write_text(json.dumps(beta_record), encoding="utf-8")
    (target_dir / "gamma.json").write_text("{not json", encoding="utf-8")
    return tmp_path
