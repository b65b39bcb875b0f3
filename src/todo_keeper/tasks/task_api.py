# src/todo_keeper/tasks/task_api.py

"""
Operations on an in-memory task list.

The list is passed in explicitly and mutated in place; persisting it is the
caller's job (see TaskStore). Indices are 0-based positions in the list.
"""

from __future__ import annotations

import logging

from ..errors import IndexOutOfRange
from .task_models import Task

logger = logging.getLogger(__name__)


def _check_index(tasks: list[Task], index: int) -> None:
    # Negative indices are rejected too: list[-1] would silently hit the last task.
    if not 0 <= index < len(tasks):
        raise IndexOutOfRange(index, len(tasks))


def format_task(index: int, task: Task) -> str:
    return f"{index}: {task.description} [{task.marker}]"


def format_task_lines(tasks: list[Task]) -> list[str]:
    return [format_task(i, t) for i, t in enumerate(tasks)]


def add_task(tasks: list[Task], description: str) -> Task:
    task = Task(description=description)
    tasks.append(task)
    logger.debug("Task added index=%s description=%r", len(tasks) - 1, description)
    return task


def remove_task(tasks: list[Task], index: int) -> Task:
    _check_index(tasks, index)
    task = tasks.pop(index)
    logger.debug("Task removed index=%s description=%r", index, task.description)
    return task


def complete_task(tasks: list[Task], index: int) -> Task:
    _check_index(tasks, index)
    task = tasks[index]
    task.completed = True
    logger.debug("Task completed index=%s description=%r", index, task.description)
    return task
