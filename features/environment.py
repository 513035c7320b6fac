"""
Behave environment configuration for DNS AAAA Updater scenarios.

Scenarios run against the in-memory mock provider, so no Cloudflare account
or network access is needed.
"""

import io
import logging
from unittest.mock import patch

from rich.console import Console

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zone = "023e105f4ecef8ad9ca31a8372d0c353"
    context.base_env = {
        "DNS_ZONE_ID": context.test_zone,
        "CF_API_EMAIL": "admin@example.com",
        "CF_API_TOKEN": "secret",
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.env = dict(context.base_env)
    context.provider_config = {"records": []}
    context.result = None
    context.error = None

    context.output = io.StringIO()
    context.console_patches = [
        patch("dns_aaaa_updater.core.dns_manager.console", Console(file=context.output)),
        patch("dns_aaaa_updater.core.reconciler.default_console", Console(file=context.output)),
    ]
    for console_patch in context.console_patches:
        console_patch.start()

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    for console_patch in context.console_patches:
        console_patch.stop()

    if getattr(context, "dns_manager", None) is not None:
        context.dns_manager.close()
        context.dns_manager = None

    logger.info(f"Completed scenario: {scenario.name}")
