# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (store + manager), then runs the
console front end in the main thread until /exit, Ctrl+C or EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    try:
        state = create_initial_state(settings=settings)
    except ValueError as e:
        logger.error("Cannot load stored tasks: %s", e)
        print(
            f"Stored tasks could not be read ({e}).\n"
            "Fix or remove the storage file, or set TODO_ON_CORRUPT=reset to start empty.",
            file=sys.stderr,
        )
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
