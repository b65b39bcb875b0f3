# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every value has a default that matches the
  behaviour of a plain `todo` run in the current directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_STORAGE_PATH = Path("storage") / "todo-file.json"

# Real environment always wins over .env.
load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    storage_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env_level(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_path(_k("LOG_FILE"), None)
        storage_path = _env_path(_k("STORAGE_PATH"), DEFAULT_STORAGE_PATH) or DEFAULT_STORAGE_PATH

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            storage_path=storage_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
