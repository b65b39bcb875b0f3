# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import StorageFormatError, StorageIOError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole task list is the unit of persistence:
    - load() reads and decodes the full file (creating it as `[]` if absent)
    - save() encodes the full list first, then overwrites the file in one write

    No locking: two concurrent runs on the same file can lose an update.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    @staticmethod
    def _encode(tasks: list[Task]) -> str:
        return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2) + "\n"

    def _decode(self, text: str) -> list[Task]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageFormatError(
                f"{self.path}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
                self.path,
            ) from exc

        if not isinstance(data, list):
            raise StorageFormatError(
                f"{self.path}: expected a JSON array of tasks, got {type(data).__name__}",
                self.path,
            )

        tasks: list[Task] = []
        for i, raw in enumerate(data):
            try:
                tasks.append(Task.from_dict(raw))
            except ValueError as exc:
                raise StorageFormatError(f"{self.path}: task {i}: {exc}", self.path) from exc
        return tasks

    def _write(self, text: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"cannot write {self.path}: {exc.strerror or exc}", self.path) from exc

    # ---- public API ----

    def load(self) -> list[Task]:
        try:
            self.path.stat()
        except FileNotFoundError:
            logger.info("Storage file %s not found, creating an empty one.", self.path)
            self._write(self._encode([]))
            return []
        except OSError as exc:
            raise StorageIOError(f"cannot read {self.path}: {exc.strerror or exc}", self.path) from exc

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StorageIOError(f"cannot read {self.path}: not valid UTF-8", self.path) from exc
        except OSError as exc:
            raise StorageIOError(f"cannot read {self.path}: {exc.strerror or exc}", self.path) from exc

        tasks = self._decode(text)
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        # Encode before touching the file so a failure leaves the old content intact.
        text = self._encode(tasks)
        self._write(text)
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)
