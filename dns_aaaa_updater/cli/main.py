#!/usr/bin/env python3
"""
DNS AAAA Updater - Command Line Interface

Main entry point for the DNS AAAA Updater CLI. Run configuration comes from
the environment (see utils/settings.py); an optional YAML file tunes logging
and the provider.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

import yaml

from ..core.dns_manager import DEFAULT_COMMAND, DNSManager
from ..exceptions import ConfigError, ProviderError
from ..utils.settings import load_settings

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS AAAA Updater - point domain names at an IPv6 address"
    )

    parser.add_argument(
        "command",
        nargs="?",
        default=DEFAULT_COMMAND,
        help="'create' (default) or 'delete'; any other value does nothing",
    )

    parser.add_argument(
        "--config",
        "-c",
        help="Optional YAML file with logging and provider settings",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else get_default_config()
    config_logger(config, verbose=args.verbose)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    dns_manager = DNSManager(settings, config)
    try:
        result = dns_manager.run(args.command, dry_run=args.dry_run)
    except ProviderError as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    finally:
        dns_manager.close()

    if result is not None and not result.success:
        print("DNS update finished with errors")
        sys.exit(1)

    sys.exit(0)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"cloudflare": {}},
        "default_provider": "cloudflare",
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None) or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
    handlers = [logging.StreamHandler(sys.stdout)]

    log_file = logging_config.get("file")
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
