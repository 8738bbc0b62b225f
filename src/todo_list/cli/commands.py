# src/todo_list/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
import re
from collections.abc import Callable, Sequence
from typing import cast

from ..core.errors import StorageError, TodoListError, ValidationError
from ..core.state import AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler4 = Callable[[AppState, list[str], str, CommandEmitter | None], str]
CommandHandler = CommandHandler3 | CommandHandler4

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "(no tasks)"

# Leading "--date X", "-d X", "--time=X", ... options of /add.
_ADD_OPTION_RE = re.compile(r"^(--date|-d|--time|-t)(?:=|\s+)(\S+)\s*")


class CommandRegistry:
    """Slash-command registry used by the console front end (/add, /save, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the split args and the raw text after the command name
        (task text keeps its spacing).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        raw = parts[1] if len(parts) > 1 else ""
        args = raw.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, raw, emit)

        h3 = cast(CommandHandler3, handler)
        return h3(state, args, raw)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Leave (also /quit).")
        lines.append("Any other line is added as a task without a date.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_list(tasks: Sequence[Task]) -> str:
    """Numbered listing, 1-based (the numbers /remove takes)."""
    if not tasks:
        return EMPTY_LIST_TEXT
    width = len(str(len(tasks)))
    return "\n".join(f"{i:>{width}}. {t.display()}" for i, t in enumerate(tasks, start=1))


def parse_add_args(raw: str) -> tuple[str, str | None, str | None]:
    """
    Split "/add" arguments into (text, date, time).

    Options come first; "--" ends them so text may itself start with "-d".
    """
    date_text: str | None = None
    time_text: str | None = None
    rest = raw.lstrip()

    while True:
        if rest.startswith("--") and (len(rest) == 2 or rest[2].isspace()):
            rest = rest[2:].lstrip()
            break
        m = _ADD_OPTION_RE.match(rest)
        if not m:
            break
        if m.group(1) in ("--date", "-d"):
            date_text = m.group(2)
        else:
            time_text = m.group(2)
        rest = rest[m.end() :]

    return rest, date_text, time_text


def cmd_help(state: AppState, args: list[str], raw: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], raw: str) -> str:
    return format_task_list(state.task_list.snapshot())


def cmd_add(
    state: AppState,
    args: list[str],
    raw: str,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /add Buy milk
    /add --date 2024-03-01 --time 09:00 Meeting
    /add -d 2024-03-01 Pay rent
    """
    text, date_text, time_text = parse_add_args(raw)
    if not text.strip():
        return "Usage: /add [--date YYYY-MM-DD] [--time HH:MM] <task text>"
    try:
        task = state.task_list.add_from_input(text, date_text, time_text)
    except ValidationError as exc:
        return f"Invalid input: {exc}"
    return f"Added: {task.display()}"


def cmd_remove(state: AppState, args: list[str], raw: str) -> str:
    if len(args) != 1:
        return "Usage: /remove <n>"
    raw_n = args[0].rstrip(".")
    if not raw_n.isdecimal():
        return "Invalid task number."
    n = int(raw_n)
    removed = state.task_list.remove(n - 1)
    if removed is None:
        return f"No task #{n}."
    return f"Removed: {removed.display()}"


def cmd_save(state: AppState, args: list[str], raw: str) -> str:
    try:
        written = state.task_list.save()
    except StorageError as exc:
        return f"Error saving tasks: {exc}"
    return f"Tasks saved successfully ({written})."


def cmd_load(
    state: AppState,
    args: list[str],
    raw: str,
    emit: CommandEmitter | None = None,
) -> str:
    """Reload from the task file, replacing the current list."""
    if state.task_list.dirty and emit:
        with contextlib.suppress(Exception):
            emit("Discarding unsaved changes...")
    try:
        count = state.task_list.load()
    except TodoListError as exc:
        return f"Error loading tasks: {exc}"
    return f"Loaded {count} tasks."


def cmd_status(state: AppState, args: list[str], raw: str) -> str:
    tl = state.task_list
    path = getattr(tl.repo, "path", None)
    return (
        "Status:\n"
        f"  File: {path if path is not None else '(in memory)'}\n"
        f"  Tasks: {len(tl)}\n"
        f"  Unsaved changes: {'yes' if tl.dirty else 'no'}\n"
        f"  Save on exit: {'ON' if state.save_on_exit else 'OFF'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add [--date YYYY-MM-DD] [--time HH:MM] <text>.",
    aliases=["a"],
)
registry.register("remove", cmd_remove, help_text="Remove task number n: /remove <n>.", aliases=["rm"])
registry.register("save", cmd_save, help_text="Save tasks to the task file.")
registry.register("load", cmd_load, help_text="Reload tasks from the task file.", aliases=["reload"])
registry.register("status", cmd_status, help_text="Show file, task count and unsaved state.")
