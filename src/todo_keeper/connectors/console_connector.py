# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import EXIT_ALIASES, EXIT_COMMAND, format_task, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {f"/{name}" for name in (EXIT_COMMAND, *EXIT_ALIASES)}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, emit: Callable[[str], None] | None = None) -> str | None:
    """
    Process one console line.

    Slash lines go to the command registry; anything else is added as a task.
    Returns the reply to print, or None for an empty line.
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line, emit=emit)
    if reply is not None:
        return reply

    task = state.store.add(line)
    if task is None:
        return None
    return f"Added {format_task(task)}"


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (key=%s).", state.store.key)
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Console input closed.")
            break

        if user_input.lower() in EXIT_COMMANDS:
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Console command failed: %r", user_input)
            _print_ts("[ERROR] Command failed; see log for details.")
            continue

        if reply:
            print(reply)
