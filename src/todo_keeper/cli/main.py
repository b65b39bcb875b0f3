# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

One invocation is one pass: parse argv, load the task list, apply a single
command, save if it mutated anything, print the result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .. import __version__
from ..config import get_settings
from ..errors import TodoError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import (
    AddCommand,
    Command,
    CompleteCommand,
    ListCommand,
    RemoveCommand,
    registry,
)

logger = logging.getLogger(__name__)


def _index(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"index must be non-negative, got {value}")
    return value


def build_parser(prog: str = "todo") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Manage a todo list stored as JSON.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--storage",
        type=Path,
        default=None,
        metavar="PATH",
        help="storage file to use for this run (default: $TODO_STORAGE_PATH or storage/todo-file.json)",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add_p = sub.add_parser("add", help=registry.help_text("add"))
    add_p.add_argument("description", nargs="+", help="task description (words are joined by spaces)")

    remove_p = sub.add_parser("remove", help=registry.help_text("remove"))
    remove_p.add_argument("index", type=_index)

    sub.add_parser("list", help=registry.help_text("list"))

    complete_p = sub.add_parser("complete", help=registry.help_text("complete"))
    complete_p.add_argument("index", type=_index)

    return parser


def parse_command(args: argparse.Namespace) -> Command:
    if args.command == "add":
        return AddCommand(" ".join(args.description))
    if args.command == "remove":
        return RemoveCommand(args.index)
    if args.command == "list":
        return ListCommand()
    if args.command == "complete":
        return CompleteCommand(args.index)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    """Run one command; returns the process exit code."""
    if settings is None:
        settings = get_settings()

    parser = build_parser(prog=str(getattr(settings, "app_name", "todo")))
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse already printed usage / help / version.
        return exc.code if isinstance(exc.code, int) else 2

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = getattr(settings, "log_file", None)
    try:
        setup_logging(console_level=console_level, log_file=log_file)
    except OSError as exc:
        # An unusable log file must not stop the command itself.
        setup_logging(console_level=console_level)
        logger.warning("Cannot open log file %s (%s); logging to console only.", log_file, exc)

    command = parse_command(args)
    store = TaskStore(args.storage or settings.storage_path)
    logger.debug("Using storage file %s", store.path)

    try:
        tasks = store.load()
        result = registry.execute(tasks, command)
        if result.mutated:
            store.save(tasks)
    except TodoError as exc:
        logger.debug("Command %s failed.", command.name, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code

    for line in result.lines:
        print(line)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
