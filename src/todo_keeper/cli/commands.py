# src/todo_keeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task, TaskStats

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

PROGRESS_BAR_WIDTH = 20
EXIT_COMMAND = "exit"
EXIT_ALIASES = ("quit", "q")


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that receive the untouched remainder of the line as args[0].
        self._raw_args: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw_args:
            self._raw_args.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw_args:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} {task.text}"


def format_progress_bar(stats: TaskStats, width: int = PROGRESS_BAR_WIDTH) -> str:
    filled = int(round(stats.progress_percentage / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + f"] {stats.progress_percentage:.0f}%"


def format_stats(stats: TaskStats) -> str:
    lines = [
        f"{stats.total} Total | {stats.completed} Completed | {stats.pending} Pending",
        f"{stats.completed} of {stats.total} completed {format_progress_bar(stats)}",
    ]
    if stats.is_all_completed:
        lines.append("All tasks completed!")
    return "\n".join(lines)


def format_task_list(state: AppState) -> str:
    tasks = state.store.tasks
    if not tasks:
        return "No tasks yet. Add one with /add <text>."
    return "\n".join(format_task(t) for t in tasks)


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].lstrip("#")
    try:
        return int(raw)
    except ValueError:
        return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state) + "\n" + format_stats(state.store.stats)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(state.store.stats)


def cmd_add(state: AppState, args: list[str]) -> str:
    # args[0] is the raw remainder of the line; store.add() only trims it.
    task = state.store.add(args[0] if args else "")
    if task is None:
        return "Usage: /add <text> (text cannot be empty)."
    return f"Added {format_task(task)}"


def cmd_done(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /done <id>  -> toggle completion of a task
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    task = state.store.toggle(task_id)
    if task is None:
        return f"No task #{task_id}."

    if emit is not None and state.celebration.is_celebrating(task.id):
        emit(f"Nice work! #{task.id} is done.")

    reply = format_task(task)
    if task.completed and state.store.stats.is_all_completed:
        reply += "\nAll tasks completed!"
    return reply


def cmd_exit(state: AppState, args: list[str]) -> str:
    # The console loop intercepts these lines before the registry; other callers get a hint.
    return "Use /exit at the console prompt to quit."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /del <id>"
    if not state.store.delete(task_id):
        return f"No task #{task_id}."
    return f"Deleted #{task_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks (newest first) and progress.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"], raw_args=True)
registry.register(
    "done", cmd_done, help_text="Toggle a task done/undone: /done <id>.", aliases=["toggle", "t"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["rm", "delete"])
registry.register("stats", cmd_stats, help_text="Show total/completed/pending and progress.")
registry.register(
    EXIT_COMMAND, cmd_exit, help_text="Save pending changes and quit.", aliases=list(EXIT_ALIASES)
)
