"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import ExistingRecord

DEFAULT_PAGE_SIZE = 1000


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_records(self, zone: str, per_page: int = DEFAULT_PAGE_SIZE) -> List[ExistingRecord]:
        """Get all DNS records for a zone."""
        pass

    @abstractmethod
    def create_record(
        self, zone: str, name: str, record_type: str, content: str
    ) -> ExistingRecord:
        """Create a new DNS record."""
        pass

    @abstractmethod
    def delete_record(self, zone: str, identifier: str) -> str:
        """Delete a DNS record by its provider identifier."""
        pass

    def close(self):
        """Release any held connections."""
