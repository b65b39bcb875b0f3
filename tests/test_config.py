# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_keeper.config import DEFAULT_STORAGE_PATH, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_APP_NAME", "TODO_LOG_LEVEL", "TODO_LOG_FILE", "TODO_STORAGE_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.storage_path == DEFAULT_STORAGE_PATH == Path("storage/todo-file.json")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORAGE_PATH", str(tmp_path / "t.json"))
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))

    s = Settings.from_env()

    assert s.storage_path == tmp_path / "t.json"
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "todo.log"


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TODO_STORAGE_PATH", "   ")
    monkeypatch.setenv("TODO_APP_NAME", "")

    s = Settings.from_env()

    assert s.log_level == "WARNING"
    assert s.storage_path == DEFAULT_STORAGE_PATH
    assert s.app_name == "todo"
