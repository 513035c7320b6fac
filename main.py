#!/usr/bin/env python3
"""
DNS AAAA Updater - Main Entry Point

This is the main entry point for the DNS AAAA Updater.
It can be run directly or imported as a module.
"""

from dns_aaaa_updater.cli.main import main

if __name__ == "__main__":
    main()
