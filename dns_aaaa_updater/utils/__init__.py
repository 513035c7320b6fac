"""
Utility functions and helpers.

This package contains validation helpers and the environment based
settings loader.
"""

from .settings import Settings, load_settings
from .validators import parse_fqdns, parse_ipv6, validate_fqdn

__all__ = [
    "Settings",
    "load_settings",
    "parse_fqdns",
    "parse_ipv6",
    "validate_fqdn",
]
