"""
Main entry point for the Hotel Desk console.
"""
from __future__ import annotations

import logging
import sys

from hotel_desk.channels import run_console
from hotel_desk.config import get_config
from hotel_desk.tools import get_registry

logger = logging.getLogger(__name__)


def main() -> int:
    """Seed the registry and run the operator menu. Returns the exit code."""
    config = get_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.get_log_level(),
    )

    try:
        logger.info("Initializing registry and seed rooms...")
        get_registry()

        logger.info("Starting console session...")
        run_console()
    except Exception as e:
        logger.error(f"Error running hotel desk: {e}", exc_info=True)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
