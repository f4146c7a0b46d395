#!/usr/bin/env python3
"""
Paginated list demo - GTK4 infinite scroll example
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("PaginatedList.UI")


def main():
    """Entry point"""
    from paginated_list.application.demo_app import main as app_main

    logger.info("Paginated list demo starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down demo...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return app_main(sys.argv)


if __name__ == "__main__":
    main()
