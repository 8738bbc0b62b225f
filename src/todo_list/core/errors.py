# src/todo_list/core/errors.py

"""
Error types raised by the task list core.

Front ends catch TodoListError, show the message as a notice and return to the
prompt. None of these are fatal to the running process.
"""

from __future__ import annotations

from pathlib import Path


class TodoListError(Exception):
    """Base class for all task list errors."""


class ValidationError(TodoListError, ValueError):
    """User input rejected before any state change (empty text, bad date/time)."""


class FormatError(TodoListError, ValueError):
    """A line of the task file could not be decoded."""

    def __init__(self, message: str, *, line_no: int | None = None, line: str | None = None) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class StorageError(TodoListError, OSError):
    """The task file could not be read or written."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)
