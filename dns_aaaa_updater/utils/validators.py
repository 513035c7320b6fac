"""
Validators - Input validation for DNS names and IPv6 addresses

This module provides validation and parsing helpers for the FQDN list and
the target IPv6 address read from the environment.
"""

import ipaddress
import logging
import re
from typing import Tuple

logger = logging.getLogger(__name__)


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate Fully Qualified Domain Name (FQDN).

    Args:
        fqdn: The FQDN to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        logger.warning(f"FQDN ends with dot: {fqdn}")
        return False

    if len(fqdn) > 253:
        logger.warning(f"FQDN too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.warning(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    if any(label == "" for label in labels):
        logger.warning(f"FQDN contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """Validate a single domain label. Wildcard and underscore labels are allowed."""
    if len(label) == 0 or len(label) > 63:
        return False

    if label == "*":
        return True

    # Letters, digits, hyphens and underscores; no leading or trailing hyphen
    return bool(re.match(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9_])?$", label))


def parse_ipv6(value: str) -> ipaddress.IPv6Address:
    """
    Parse an IPv6 address literal.

    Scoped literals such as ``fe80::1%eth0`` are rejected: a zone index has
    no meaning in AAAA record content.

    Raises:
        ValueError: if the value is not a valid unscoped IPv6 address
    """
    if not value or not isinstance(value, str):
        raise ValueError("IPv6 address must be a non-empty string")

    try:
        addr = ipaddress.IPv6Address(value.strip())
    except ipaddress.AddressValueError as e:
        raise ValueError(f"Invalid IPv6 address '{value}': {e}") from e

    if addr.scope_id is not None:
        raise ValueError(f"Invalid IPv6 address '{value}': scoped addresses are not allowed")
    return addr


def parse_fqdns(value: str) -> Tuple[str, ...]:
    """
    Split a comma separated list of domain names.

    Surrounding whitespace is stripped and empty entries are dropped, so an
    unset or blank value yields an empty tuple. Names are otherwise kept
    verbatim; suspicious names are only reported.
    """
    if not value:
        return ()

    fqdns = tuple(name.strip() for name in value.split(",") if name.strip())
    for fqdn in fqdns:
        if not validate_fqdn(fqdn):
            logger.warning(f"'{fqdn}' does not look like a valid FQDN, using it as given")
    return fqdns
