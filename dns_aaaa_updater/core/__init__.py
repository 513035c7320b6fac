"""
Core DNS management functionality.

This package contains the run orchestration and the record reconciliation logic.
"""

from .dns_manager import DNSManager
from .reconciler import Reconciler

__all__ = ["DNSManager", "Reconciler"]
