"""
Reconciler - Core logic for AAAA record reconciliation

This module turns the desired list of names into provider calls: one create
per name in create mode, one delete per matching record in delete mode.
"""

import logging
from ipaddress import IPv6Address
from typing import Iterable, List, Optional, Sequence

from rich.console import Console

from ..exceptions import ProviderError
from ..models import DesiredRecord, ExistingRecord, ReconcileResult

default_console = Console()
logger = logging.getLogger(__name__)


class Reconciler:
    """Applies create and delete runs for a fixed zone through a DNS client."""

    def __init__(self, dns_client, console: Optional[Console] = None):
        """Initialize reconciler with DNS client."""
        self.dns_client = dns_client
        self.console = console or default_console

    def create_or_update(
        self,
        zone: str,
        address: IPv6Address,
        names: Sequence[str],
        dry_run: bool = False,
    ) -> ReconcileResult:
        """
        Create one AAAA record per name, in order.

        Existing records are not consulted, so running this twice for the
        same name leaves two records behind. The first provider failure
        propagates and the remaining names are not attempted.

        Args:
            zone: Provider zone identifier
            address: Address every record points to
            names: Domain names, processed in the given order
            dry_run: Only report what would be created

        Raises:
            ProviderError: if any create call fails
        """
        result = ReconcileResult(mode="create", names=tuple(names), dry_run=dry_run)
        desired = [DesiredRecord(name=name, address=address) for name in names]

        for record in desired:
            if dry_run:
                self.console.print(f"  + {record.name} -> {record.content}")
                result.planned.append(record.name)
                continue

            self.console.print(f"Updating {record.name}")
            logger.info(f"Creating {record.type} record {record.name} -> {record.content}")
            try:
                created = self.dns_client.create_record(
                    zone, record.name, record.type, record.content
                )
            except ProviderError as e:
                logger.error(f"Failed to update domain {record.name}: {e}")
                raise
            result.created.append(created)

        return result

    def delete(
        self, zone: str, names: Sequence[str], dry_run: bool = False
    ) -> ReconcileResult:
        """
        Delete every record in the zone whose name is one of ``names``.

        A listing failure propagates. A failed delete is logged and recorded
        in ``result.failures`` and the remaining deletes still run.

        Raises:
            ProviderError: if the zone records cannot be listed
        """
        result = ReconcileResult(mode="delete", names=tuple(names), dry_run=dry_run)

        try:
            records = self.dns_client.list_records(zone)
        except ProviderError as e:
            logger.error(f"Cannot list records to delete: {e}")
            raise

        for record in self.matching_records(records, names):
            if dry_run:
                self.console.print(f"  - {record.name} ({record.type} {record.content})")
                result.planned.append(record.name)
                continue

            self.console.print(f"Deleting {record.name}")
            try:
                self.dns_client.delete_record(zone, record.id)
            except ProviderError as e:
                logger.error(f"Failed to delete record {record.name} ({record.id}): {e}")
                result.failures.append((record.name, str(e)))
                continue
            result.deleted.append(record)

        return result

    @staticmethod
    def matching_records(
        records: Iterable[ExistingRecord], names: Iterable[str]
    ) -> List[ExistingRecord]:
        """Records whose name equals one of ``names`` exactly, in listing order."""
        wanted = set(names)
        return [record for record in records if record.name in wanted]
