# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-keeper).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for storage and logs (default: .local/todo_keeper).",
    "TODO_STORAGE_PATH": "Key-value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Task list
    "TODO_STORAGE_KEY": "Key the task list is stored under (default: todos).",
    "TODO_SAVE_DEBOUNCE_MS": "Coalesce writes within this window; 0 writes on every change (default: 100).",
    "TODO_CELEBRATION_MS": "How long a just-completed task stays highlighted (default: 600).",
}
