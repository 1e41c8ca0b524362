# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a local default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    # ---- Task list ----
    storage_key: str
    save_debounce_ms: int
    celebration_ms: int

    @property
    def save_debounce_seconds(self) -> float:
        return max(0, self.save_debounce_ms) / 1000.0

    @property
    def celebration_seconds(self) -> float:
        return max(0, self.celebration_ms) / 1000.0

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-keeper").strip() or "todo-keeper"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo_keeper"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.sqlite3")

        storage_key = _env(_k("STORAGE_KEY"), "todos").strip() or "todos"
        save_debounce_ms = _env_int(_k("SAVE_DEBOUNCE_MS"), 100)
        celebration_ms = _env_int(_k("CELEBRATION_MS"), 600)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
            save_debounce_ms=save_debounce_ms,
            celebration_ms=celebration_ms,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
