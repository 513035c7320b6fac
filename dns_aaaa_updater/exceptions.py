"""
Exceptions raised by the DNS AAAA Updater.

Configuration problems are reported with ConfigError before any DNS work
starts. Failures of the DNS provider are reported with ProviderError
subclasses so callers can tell network trouble from provider refusals.
"""

from typing import List, Optional


class ConfigError(Exception):
    """A required setting is missing or cannot be parsed."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class ProviderError(Exception):
    """Base class for DNS provider failures."""


class TransportError(ProviderError):
    """The HTTP round-trip to the provider did not complete."""


class APIError(ProviderError):
    """The provider answered but reported a failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
