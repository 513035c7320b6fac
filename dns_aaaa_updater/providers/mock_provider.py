"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import itertools
import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DEFAULT_PAGE_SIZE, DNSProvider
from ..exceptions import APIError
from ..models import ExistingRecord

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes.

    Every call is appended to ``calls`` as ``(operation, args)``. Failures can
    be injected with ``fail_on_create`` (1-based index of the create call that
    fails), ``fail_delete_ids`` and ``fail_listing``.
    """

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.records: List[ExistingRecord] = [
            ExistingRecord.from_api(item) for item in config.get("records", [])
        ]
        self.calls: List[Tuple[str, Tuple]] = []
        self.fail_on_create: Optional[int] = config.get("fail_on_create")
        self.fail_delete_ids = set(config.get("fail_delete_ids", []))
        self.fail_listing = bool(config.get("fail_listing", False))
        self._ids = itertools.count(1)
        self._creates = 0
        logger.info("Mock DNS provider initialized")

    def list_records(self, zone: str, per_page: int = DEFAULT_PAGE_SIZE) -> List[ExistingRecord]:
        """Get all DNS records for a zone."""
        self.calls.append(("list", (zone, per_page)))
        if self.fail_listing:
            raise APIError("Mock: listing failed", status_code=500)
        logger.info(f"Mock: Retrieved {len(self.records)} records")
        return list(self.records)

    def create_record(
        self, zone: str, name: str, record_type: str, content: str
    ) -> ExistingRecord:
        """Create a new DNS record."""
        self.calls.append(("create", (zone, name, record_type, content)))
        self._creates += 1
        if self.fail_on_create is not None and self._creates == self.fail_on_create:
            raise APIError(f"Mock: create failed for {name}", status_code=400)

        record = ExistingRecord(
            id=f"mock-{next(self._ids)}", name=name, type=record_type, content=content
        )
        self.records.append(record)
        logger.info(f"Mock: Created record {name} -> {content}")
        return record

    def delete_record(self, zone: str, identifier: str) -> str:
        """Delete a DNS record."""
        self.calls.append(("delete", (zone, identifier)))
        if identifier in self.fail_delete_ids:
            raise APIError(f"Mock: delete failed for {identifier}", status_code=500)

        for i, existing in enumerate(self.records):
            if existing.id == identifier:
                del self.records[i]
                logger.info(f"Mock: Deleted record {existing.name}")
                return identifier

        raise APIError(f"Record {identifier} not found for deletion", status_code=404)

    def calls_of(self, operation: str) -> List[Tuple]:
        """Arguments of every recorded call of one operation, in order."""
        return [args for op, args in self.calls if op == operation]
