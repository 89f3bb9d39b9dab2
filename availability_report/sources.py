"""
Availability data sources: a static HTTP site or a local file tree.

Both read the same layout::

    packages.json              ["cargo", "rls", ...]
    additional.json            {"datetime": "...", ...}
    <target>/<package>.json    {"2024-01-10": true, ..., "last_available": "2024-01-10"}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from .errors import PackageDataAbsent, TopLevelFetchFailure
from .interfaces import AvailabilitySource
from .models import PackageRecord


logger = logging.getLogger(__name__)

PACKAGES_FILE = "packages.json"
METADATA_FILE = "additional.json"


def _record_path(target: str, package: str) -> str:
    return f"{target}/{package}.json"


def _check_packages(data: Any) -> List[str]:
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise TopLevelFetchFailure(f"{PACKAGES_FILE} is not a list of package names")
    return data


def _check_metadata(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TopLevelFetchFailure(f"{METADATA_FILE} is not a JSON object")
    return data


class HttpAvailabilitySource(AvailabilitySource):
    """Source backed by a static web site."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _get_json(self, path: str) -> Any:
        url = self._url(path)
        logger.info("Fetching %s", url)
        try:
            with self.session.get(url) as response:
                response.raise_for_status()
                return response.json()
        except (requests.RequestException, ValueError) as e:
            raise TopLevelFetchFailure(f"Failed to fetch {url}: {e}") from e

    def fetch_packages(self) -> List[str]:
        return _check_packages(self._get_json(PACKAGES_FILE))

    def fetch_metadata(self) -> Dict[str, Any]:
        return _check_metadata(self._get_json(METADATA_FILE))

    def fetch_package_record(self, target: str, package: str) -> PackageRecord:
        url = self._url(_record_path(target, package))
        logger.debug("Fetching record %s", url)
        try:
            with self.session.get(url) as response:
                response.raise_for_status()
                data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise PackageDataAbsent(target, package, str(e)) from e
        if not isinstance(data, dict):
            raise PackageDataAbsent(target, package, "record is not a JSON object")
        return PackageRecord.from_json(data)


class FileAvailabilitySource(AvailabilitySource):
    """Source backed by a directory on disk."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def _read_json(self, path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def _load_top_level(self, name: str) -> Any:
        path = self.root / name
        logger.info("Reading %s", path)
        try:
            return self._read_json(path)
        except (OSError, ValueError) as e:
            raise TopLevelFetchFailure(f"Failed to read {path}: {e}") from e

    def fetch_packages(self) -> List[str]:
        return _check_packages(self._load_top_level(PACKAGES_FILE))

    def fetch_metadata(self) -> Dict[str, Any]:
        return _check_metadata(self._load_top_level(METADATA_FILE))

    def fetch_package_record(self, target: str, package: str) -> PackageRecord:
        path = self.root / _record_path(target, package)
        try:
            data = self._read_json(path)
        except (OSError, ValueError) as e:
            raise PackageDataAbsent(target, package, str(e)) from e
        if not isinstance(data, dict):
            raise PackageDataAbsent(target, package, "record is not a JSON object")
        return PackageRecord.from_json(data)


def open_source(location: str) -> AvailabilitySource:
    """Pick an HTTP source for URLs and a file source for everything else."""
    if location.startswith(("http://", "https://")):
        return HttpAvailabilitySource(location)
    return FileAvailabilitySource(location)
