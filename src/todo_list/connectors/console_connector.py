# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import format_task_list, registry as command_registry
from ..core.errors import TodoListError, ValidationError
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _print_list(state: AppState, out: OutputFn) -> None:
    out("")
    out(format_task_list(state.task_list.snapshot()))


def _finish(state: AppState, out: OutputFn) -> None:
    tl = state.task_list
    if not tl.dirty:
        return
    if state.save_on_exit:
        try:
            written = tl.save()
        except TodoListError as exc:
            out(f"Error saving tasks: {exc}")
            return
        out(f"Saved {written} tasks.")
    else:
        out("Unsaved changes were not written (use /save, or set TODO_SAVE_ON_EXIT=1).")


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    out: OutputFn = print,
) -> None:
    """
    Interactive loop: one command per line, list re-rendered after changes.

    `read`/`out` default to input()/print(); tests pass their own.
    """
    logger.info("Console started (tasks=%d).", len(state.task_list))
    out("Type a task to add it. Use /help for commands. Use /exit to quit.")
    _print_list(state, out)

    def emit(text: str) -> None:
        out(text)

    while True:
        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        before = state.task_list.snapshot()

        if user_input.startswith("/"):
            try:
                reply = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."
            if reply is not None:
                out(reply)
        else:
            # Plain line: undated task.
            try:
                state.task_list.add(user_input)
            except ValidationError as exc:
                out(f"Invalid input: {exc}")

        if state.task_list.snapshot() != before:
            _print_list(state, out)

    _finish(state, out)
    logger.info("Console finished.")
