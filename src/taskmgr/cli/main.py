# src/taskmgr/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console REPL in the main thread until "exit" or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_api import persist

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_file=settings.log_file, console_level=console_level)

    logger.info("Starting %s (data file %s)...", settings.app_name, settings.data_file)

    state, load_error = create_initial_state(settings=settings)
    if load_error:
        print(load_error)

    try:
        run_console_loop(state)
    except Exception:
        # The loop already guards handlers; this is a last-resort save.
        logger.exception("Console loop crashed; saving tasks before exit.")
        error = persist(state)
        if error:
            print(error)
        raise

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
