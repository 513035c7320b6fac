#!/usr/bin/env python3
"""
DNS AAAA Updater - Point a set of names at one IPv6 address

This module drives a single run: it picks the create or delete mode from the
command token, hands the configured names to the Reconciler and reports
what happened.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import ReconcileResult
from ..providers.dns_client import DNSClient
from ..utils.settings import Settings
from .reconciler import Reconciler

console = Console()
logger = logging.getLogger(__name__)

CREATE = "create"
DELETE = "delete"
DEFAULT_COMMAND = CREATE


class DNSManager:
    """Main DNS management class that orchestrates the entire process."""

    def __init__(
        self,
        settings: Settings,
        config: Optional[Dict] = None,
        dns_client: Optional[DNSClient] = None,
    ):
        """Initialize the DNS manager with settings and ambient configuration."""
        self.settings = settings
        self.config = config or {}
        self._dns_client = dns_client

    @property
    def dns_client(self) -> DNSClient:
        """DNS client, created on first use."""
        if self._dns_client is None:
            self._dns_client = DNSClient(self.config, self.settings.credentials)
        return self._dns_client

    @staticmethod
    def resolve_command(command: Optional[str]) -> Optional[str]:
        """Map a command token to a mode, or None when it names no mode."""
        if command is None:
            return DEFAULT_COMMAND
        command = command.lower()
        if command in (CREATE, DELETE):
            return command
        return None

    def run(self, command: Optional[str] = None, dry_run: bool = False) -> Optional[ReconcileResult]:
        """
        Run one create or delete pass.

        Returns None when there is nothing to do: DNS updates are skipped,
        the domain list is empty, or the command is not recognised.

        Raises:
            ProviderError: if a create call or the record listing fails
        """
        if not self.settings.has_work:
            if self.settings.skip_dns:
                console.print("[yellow]Skipping DNS update![/yellow]")
            else:
                console.print("No domains to update")
            return None

        fqdns = self.settings.fqdns
        mode = self.resolve_command(command)
        if mode is None:
            logger.info(f"Unrecognised command '{command}', nothing to do")
            return None

        reconciler = Reconciler(self.dns_client, console=console)
        zone = self.settings.zone_id
        addr = self.settings.ipv6_addr

        if dry_run:
            console.print("[yellow]DRY RUN MODE - No changes will be applied[/yellow]")

        if mode == CREATE:
            console.print(f"Creating {len(fqdns)} records pointing to {addr}")
            result = reconciler.create_or_update(zone, addr, fqdns, dry_run=dry_run)
        else:
            console.print(f"Deleting {len(fqdns)} records pointing to {addr}")
            result = reconciler.delete(zone, fqdns, dry_run=dry_run)

        self._display_summary(result)
        return result

    def close(self):
        if self._dns_client is not None:
            self._dns_client.close()

    def _display_summary(self, result: ReconcileResult):
        """Display a summary of the run."""
        title = "DNS Changes Summary (dry run)" if result.dry_run else "DNS Changes Summary"
        table = Table(
            title=title,
            caption=f"{len(result.names)} domain(s) requested for {result.mode}",
        )
        table.add_column("Operation", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Details", style="white")

        if result.planned:
            table.add_row(
                f"Planned {result.mode}",
                str(len(result.planned)),
                ", ".join(result.planned),
            )

        if result.created:
            table.add_row(
                "Create",
                str(len(result.created)),
                ", ".join(r.name for r in result.created),
            )

        if result.deleted:
            table.add_row(
                "Delete",
                str(len(result.deleted)),
                ", ".join(r.name for r in result.deleted),
            )

        if result.failures:
            table.add_row(
                "Failed",
                str(len(result.failures)),
                ", ".join(name for name, _ in result.failures),
            )

        console.print(table)

        if result.failures:
            console.print(
                f"[red]{len(result.failures)} record(s) failed during {result.mode}[/red]"
            )
            for name, error in result.failures:
                console.print(f"[red]  {escape(name)}: {escape(error)}[/red]")
