"""
Settings - run configuration read from environment variables

The environment is read exactly once into an immutable Settings value.
Required keys are only demanded when there is DNS work to do: a skipped run
or an empty domain list never fails on the remaining keys.
"""

import logging
import os
from dataclasses import dataclass
from ipaddress import IPv6Address
from typing import Mapping, Optional, Tuple

from ..exceptions import ConfigError
from .validators import parse_fqdns, parse_ipv6

logger = logging.getLogger(__name__)

SKIP_DNS = "SKIP_DNS"
FQDNS = "FQDNS"
IPV6_ADDR = "IPV6_ADDR"
DNS_ZONE_ID = "DNS_ZONE_ID"
CF_API_EMAIL = "CF_API_EMAIL"
CF_API_TOKEN = "CF_API_TOKEN"


@dataclass(frozen=True)
class Settings:
    skip_dns: bool = False
    fqdns: Tuple[str, ...] = ()
    ipv6_addr: Optional[IPv6Address] = None
    zone_id: str = ""
    api_email: str = ""
    api_token: str = ""

    @property
    def has_work(self) -> bool:
        return not self.skip_dns and bool(self.fqdns)

    @property
    def credentials(self):
        return {"email": self.api_email, "api_key": self.api_token}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ConfigError: naming the first required key that is missing or invalid
    """
    if environ is None:
        environ = os.environ

    if environ.get(SKIP_DNS, "false").strip().lower() == "true":
        logger.info("SKIP_DNS is set, DNS configuration not loaded")
        return Settings(skip_dns=True)

    fqdns = parse_fqdns(environ.get(FQDNS, ""))
    if not fqdns:
        return Settings()

    raw_addr = _require(environ, IPV6_ADDR, "No IPV6_ADDR var set")
    try:
        ipv6_addr = parse_ipv6(raw_addr)
    except ValueError as e:
        raise ConfigError(IPV6_ADDR, f"Could not parse IP address: {e}") from e

    zone_id = _require(environ, DNS_ZONE_ID, "No DNS_ZONE_ID var set")
    api_email = _require(
        environ,
        CF_API_EMAIL,
        "Attempted to update Cloudflare domains without a CF_API_EMAIL set",
    )
    api_token = _require(
        environ,
        CF_API_TOKEN,
        "Attempted to update Cloudflare domains without a CF_API_TOKEN set",
    )

    return Settings(
        fqdns=fqdns,
        ipv6_addr=ipv6_addr,
        zone_id=zone_id,
        api_email=api_email,
        api_token=api_token,
    )


def _require(environ: Mapping[str, str], key: str, message: str) -> str:
    value = environ.get(key, "").strip()
    if not value:
        raise ConfigError(key, message)
    return value
