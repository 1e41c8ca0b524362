# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main
thread. Pending task-list writes are flushed on exit.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info(
        "Starting %s (log file: %s, storage: %s)...",
        settings.app_name,
        log_file,
        settings.storage_path,
    )

    state = create_initial_state(settings=settings)

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        # Unwinds into the finally block below, which flushes the store.
        raise SystemExit(0)

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError):
        # Not in the main thread, or the platform lacks SIGTERM.
        pass

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run. Set TODO_CONSOLE_ENABLED=true.")
    finally:
        shutdown_state(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
