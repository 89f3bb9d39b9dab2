"""
Per-package record retrieval that tolerates missing data.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .errors import PackageDataAbsent
from .interfaces import AvailabilitySource
from .models import PackageRecord


logger = logging.getLogger(__name__)


class PackageAvailabilityFetcher:
    """Fetch one package record, returning ``None`` when it is absent."""

    def __init__(self, source: AvailabilitySource) -> None:
        self.source = source

    async def fetch(self, target: str, package: str) -> Optional[PackageRecord]:
        try:
            return await asyncio.to_thread(self.source.fetch_package_record, target, package)
        except PackageDataAbsent as e:
            logger.debug("Skipping %s: %s", package, e)
            return None
