# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.tasks.task_models import Task
from todo_keeper.tasks.task_store import TaskStore


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "storage" / "todo-file.json"


@pytest.fixture()
def settings(storage_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and of any local .env file.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_file=None,
        storage_path=storage_path,
    )


@pytest.fixture()
def store(storage_path: Path) -> TaskStore:
    return TaskStore(storage_path)


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        Task("Buy groceries"),
        Task("Walk the dog", completed=True),
        Task("Write report"),
    ]
