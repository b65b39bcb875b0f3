# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import cast

from ..tasks.task_api import add_task, complete_task, format_task, format_task_lines, remove_task
from ..tasks.task_models import Task


@dataclass(frozen=True, slots=True)
class AddCommand:
    description: str
    name = "add"


@dataclass(frozen=True, slots=True)
class RemoveCommand:
    index: int
    name = "remove"


@dataclass(frozen=True, slots=True)
class ListCommand:
    name = "list"


@dataclass(frozen=True, slots=True)
class CompleteCommand:
    index: int
    name = "complete"


Command = AddCommand | RemoveCommand | ListCommand | CompleteCommand


@dataclass(slots=True)
class CommandResult:
    lines: list[str] = field(default_factory=list)
    mutated: bool = False


CommandHandler = Callable[[list[Task], Command], CommandResult]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps command names (add, remove, ...) to handlers and their help text."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text

    def names(self) -> list[str]:
        return list(self._handlers)

    def help_text(self, name: str) -> str:
        return self._help.get(name.lower(), "")

    def execute(self, tasks: list[Task], command: Command) -> CommandResult:
        """
        Apply one command to the task list.

        Raises whatever the handler raises (IndexOutOfRange for a bad index);
        on error the list is left as it was.
        """
        handler = self._handlers.get(command.name)
        if handler is None:
            raise KeyError(f"Unknown command: {command.name}")

        logger.debug("Executing %s", command)
        return handler(tasks, command)


registry = CommandRegistry()


def cmd_add(tasks: list[Task], command: Command) -> CommandResult:
    add = cast(AddCommand, command)
    add_task(tasks, add.description)
    return CommandResult([f"Added task {len(tasks) - 1}: {add.description}"], mutated=True)


def cmd_remove(tasks: list[Task], command: Command) -> CommandResult:
    index = cast(RemoveCommand, command).index
    removed = remove_task(tasks, index)
    return CommandResult([f"Removed: {format_task(index, removed)}"], mutated=True)


def cmd_list(tasks: list[Task], command: Command) -> CommandResult:
    return CommandResult(format_task_lines(tasks), mutated=False)


def cmd_complete(tasks: list[Task], command: Command) -> CommandResult:
    task = complete_task(tasks, cast(CompleteCommand, command).index)
    return CommandResult([f"Task '{task.description}' marked as complete!"], mutated=True)


registry.register("add", cmd_add, help_text="Add a new task with the given description.")
registry.register("remove", cmd_remove, help_text="Remove a task by its index (0-based).")
registry.register("list", cmd_list, help_text="List all tasks with their completion status.")
registry.register(
    "complete", cmd_complete, help_text="Mark a task as completed by its index (0-based)."
)
