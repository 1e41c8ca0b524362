# src/todo_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER_PREFIX = "todo_keeper."
LOG_FILE_NAME = "todo_keeper.log"

# Loggers that fire on every persisted change; on the console only their problems matter.
WRITE_PATH_LOGGERS = (
    "todo_keeper.storage.",
    "todo_keeper.tasks.debounce",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console filter for the REPL, where log lines interleave with prompts.

    - todo_keeper loggers pass at the handler level
    - the write path (kv store, debounced writer) passes only at WARNING+
    - everything else (third-party, py.warnings) passes only at ERROR+
    """

    def __init__(self, quiet_prefixes: Iterable[str] = WRITE_PATH_LOGGERS) -> None:
        super().__init__()
        self._quiet_prefixes = tuple(quiet_prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not name.startswith(APP_LOGGER_PREFIX):
            return record.levelno >= logging.ERROR
        if name.startswith(self._quiet_prefixes):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo_keeper",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send logs to stderr (filtered, at console_level) and to <log_dir>/todo_keeper.log.

    The file gets every task mutation and storage write at DEBUG, which is
    what you want when a list comes back different after a restart.
    Replaces any handlers already on the root logger; call once at startup.
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
