"""
DNS AAAA Updater - Dynamic DNS for IPv6 hosts

Creates AAAA records pointing a list of domain names at one IPv6 address
in a Cloudflare zone, and removes them again.
"""

__version__ = "1.0.0"
__author__ = "DNS AAAA Updater Team"
__description__ = "Dynamic DNS updater for Cloudflare AAAA records"

from .core.dns_manager import DNSManager
from .core.reconciler import Reconciler
from .providers.dns_client import DNSClient

__all__ = [
    "DNSManager",
    "Reconciler",
    "DNSClient",
]
