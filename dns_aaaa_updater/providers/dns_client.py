"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for the supported DNS providers,
currently Cloudflare and an in-memory mock.
"""

import logging
from typing import Dict, List, Optional

from .base_provider import DEFAULT_PAGE_SIZE, DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..exceptions import ProviderError
from ..models import ExistingRecord

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, credentials: Optional[Dict] = None):
        """Initialize DNS client with configuration and API credentials."""
        self.config = config
        self.credentials = credentials or {}
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = dict(self.config.get("dns_providers", {}).get(provider_name) or {})

        logger.debug(f"Using DNS provider '{provider_name}'")
        if provider_name == "cloudflare":
            provider_config.update(self.credentials)
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            raise ProviderError(f"Unknown provider '{provider_name}'")

    @property
    def page_size(self) -> int:
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}
        return int(provider_config.get("per_page", DEFAULT_PAGE_SIZE))

    def list_records(self, zone: str, per_page: Optional[int] = None) -> List[ExistingRecord]:
        """Get all DNS records for a zone."""
        return self.provider.list_records(zone, per_page or self.page_size)

    def create_record(
        self, zone: str, name: str, record_type: str, content: str
    ) -> ExistingRecord:
        """Create a new DNS record."""
        return self.provider.create_record(zone, name, record_type, content)

    def delete_record(self, zone: str, identifier: str) -> str:
        """Delete a DNS record."""
        return self.provider.delete_record(zone, identifier)

    def close(self):
        self.provider.close()
