#!/usr/bin/env python3
"""
KV Playground Entry Point

Connects to Redis, then runs the interactive demo menu until the user
exits or input ends.

Usage:
    python -m kv_playground.playground
    kv-playground

Environment Variables:
    ADDR          - Redis address as host:port (default localhost:6379)
    AUTH_SECRET   - Redis password (default empty)
    DB_INDEX      - Logical database index (default 0)

See kv_playground.config.settings for the remaining options. Any of
these may also come from a .env file in the working directory.
"""

import logging
import sys

from .config.connection import connect
from .config.settings import Settings, load_settings
from .errors import StartupError
from .menu.commands import build_registry
from .menu.dispatcher import run_menu


def setup_logging(settings: Settings) -> None:
    """Configure logging from settings."""
    if settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main() -> int:
    """Main entry point for the playground."""
    settings = load_settings()
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    try:
        client = connect(settings)
    except StartupError as e:
        print(f"Failed to connect to Redis: {e}", file=sys.stderr)
        return 1

    print("Welcome to Redis Playground!")
    print("============================")

    registry = build_registry(
        extended=settings.extended_menu,
        pubsub_timeout=settings.pubsub_timeout,
    )

    try:
        return run_menu(client, registry)
    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")
        return 0
    finally:
        client.close()
        logger.debug("Connection closed")


if __name__ == "__main__":
    sys.exit(main())
