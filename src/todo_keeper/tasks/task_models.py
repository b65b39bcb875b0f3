# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False

    @property
    def marker(self) -> str:
        return "x" if self.completed else " "

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the file format: description, completed.
        return {"description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON element.

        Unknown keys are ignored; a missing or mistyped field raises ValueError.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise ValueError("field 'description' must be a string")

        completed = raw.get("completed")
        if not isinstance(completed, bool):
            raise ValueError("field 'completed' must be a boolean")

        return cls(description=description, completed=completed)
