# src/todo_keeper/errors.py

"""
Error taxonomy.

Everything raised on purpose derives from TodoError so the CLI entrypoint can
turn it into a message and an exit code. Each class also inherits the matching
builtin (OSError, ValueError, IndexError) so callers that only know the
builtins still catch them.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo_keeper errors."""

    exit_code = 1


class StorageError(TodoError):
    """The storage file could not be loaded or saved."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class StorageIOError(StorageError, OSError):
    """Reading, creating or writing the storage file failed."""


class StorageFormatError(StorageError, ValueError):
    """The storage file is not a JSON array of tasks."""


class UserInputError(TodoError, ValueError):
    """The command refers to something that does not exist."""

    exit_code = 2


class IndexOutOfRange(UserInputError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Task {index} doesn't exist (have {length} tasks)")
        self.index = index
        self.length = length
