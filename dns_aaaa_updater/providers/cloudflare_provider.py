"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API with httpx, authenticating
with the account email and global API key.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .base_provider import DEFAULT_PAGE_SIZE, DNSProvider
from ..exceptions import APIError, ProviderError, TransportError
from ..models import ExistingRecord

logger = logging.getLogger(__name__)

CLOUDFLARE_API_URL = "https://api.cloudflare.com/client/v4"


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider using the v4 API."""

    def __init__(self, config: Dict, transport: Optional[httpx.BaseTransport] = None):
        """Initialize Cloudflare provider."""
        self.config = config
        self.email = config.get("email", "")
        self.api_key = config.get("api_key", "")
        self.base_url = str(config.get("base_url", CLOUDFLARE_API_URL)).rstrip("/")
        self.timeout = float(config.get("timeout", 10.0))

        try:
            self._http = httpx.Client(
                base_url=self.base_url,
                headers={
                    "X-Auth-Email": self.email,
                    "X-Auth-Key": self.api_key,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
                transport=transport,
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise ProviderError(f"Could not create API client: {e}") from e

        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def list_records(self, zone: str, per_page: int = DEFAULT_PAGE_SIZE) -> List[ExistingRecord]:
        """Get all DNS records for a zone, following every result page."""
        records = []
        page = 1

        while True:
            body = self._request(
                "GET",
                f"/zones/{zone}/dns_records",
                params={"page": page, "per_page": per_page},
            )
            results = body.get("result") or []
            records.extend(self._parse_record(item, "GET", zone) for item in results)

            total_pages = (body.get("result_info") or {}).get("total_pages") or 1
            logger.debug(f"Fetched page {page}/{total_pages} ({len(results)} records)")
            if not results or page >= total_pages:
                break
            page += 1

        logger.info(f"Retrieved {len(records)} records from zone {zone}")
        return records

    def create_record(
        self, zone: str, name: str, record_type: str, content: str
    ) -> ExistingRecord:
        """Create a new DNS record, leaving TTL, priority and proxying to Cloudflare."""
        payload = {"type": record_type, "name": name, "content": content}
        body = self._request("POST", f"/zones/{zone}/dns_records", json=payload)
        record = self._parse_record(body.get("result"), "POST", zone)
        logger.info(f"Created record {record.name} ({record.type}) -> {record.content}")
        return record

    def delete_record(self, zone: str, identifier: str) -> str:
        """Delete a DNS record by id."""
        body = self._request("DELETE", f"/zones/{zone}/dns_records/{identifier}")
        deleted_id = (body.get("result") or {}).get("id", identifier)
        logger.info(f"Deleted record {deleted_id}")
        return deleted_id

    def close(self):
        self._http.close()

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        """Perform one API round-trip and return the decoded envelope."""
        try:
            resp = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"Cloudflare {method} {url} failed: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            raise APIError(
                f"Cloudflare {method} {url} returned non-JSON response "
                f"({resp.status_code}): {resp.text}",
                status_code=resp.status_code,
            )

        if not isinstance(body, dict):
            raise APIError(
                f"Cloudflare {method} {url} returned an unexpected response "
                f"({resp.status_code}): {resp.text}",
                status_code=resp.status_code,
            )

        if resp.status_code not in (200, 201) or not body.get("success", False):
            errors = [
                f"{err.get('code')}: {err.get('message')}"
                for err in body.get("errors") or []
            ]
            raise APIError(
                f"Cloudflare {method} {url} failed ({resp.status_code}): "
                f"{'; '.join(errors) or resp.text}",
                status_code=resp.status_code,
                errors=errors,
            )

        return body

    @staticmethod
    def _parse_record(data: Any, method: str, zone: str) -> ExistingRecord:
        """Build a record from an API result, reporting malformed payloads as APIError."""
        try:
            return ExistingRecord.from_api(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise APIError(
                f"Cloudflare {method} records in zone {zone} returned a malformed record: {data!r}"
            ) from e
