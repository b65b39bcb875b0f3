# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Real environment variables always take precedence over .env.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Program name shown in usage and --version (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_LOG_FILE": "Optional log file; when set it receives full DEBUG logs.",
    # Storage
    "TODO_STORAGE_PATH": "Task list JSON file (default: storage/todo-file.json).",
}
