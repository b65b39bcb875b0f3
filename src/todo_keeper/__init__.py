"""Command-line todo list manager with JSON file persistence."""

__version__ = "0.1.0"
