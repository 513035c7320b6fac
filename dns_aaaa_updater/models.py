"""
Record types shared by the reconciler and the DNS providers.
"""

from dataclasses import dataclass, field
from ipaddress import IPv6Address
from typing import Dict, List, Tuple

AAAA = "AAAA"


@dataclass(frozen=True)
class DesiredRecord:
    """A name that should resolve to the configured IPv6 address."""

    name: str
    address: IPv6Address

    def __post_init__(self):
        if not self.name:
            raise ValueError("DesiredRecord name must not be empty")
        if not isinstance(self.address, IPv6Address):
            raise ValueError(f"DesiredRecord address must be IPv6, got {self.address!r}")

    @property
    def type(self) -> str:
        return AAAA

    @property
    def content(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class ExistingRecord:
    """Snapshot of a record as reported by the provider."""

    id: str
    name: str
    type: str
    content: str

    @classmethod
    def from_api(cls, data: Dict) -> "ExistingRecord":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            type=data.get("type", ""),
            content=data.get("content", ""),
        )


@dataclass
class ReconcileResult:
    """Outcome of a single create or delete run."""

    mode: str
    names: Tuple[str, ...]
    created: List[ExistingRecord] = field(default_factory=list)
    deleted: List[ExistingRecord] = field(default_factory=list)
    planned: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return not self.failures
