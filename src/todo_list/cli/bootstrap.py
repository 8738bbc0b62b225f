# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local directories exist,
- wires the file store and the controller into AppState,
- performs the startup load.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskListController
from ..core.errors import TodoListError
from ..core.state import AppState
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_file, encoding=settings.file_encoding)
    return AppState(
        settings=settings,
        task_list=TaskListController(store),
        save_on_exit=settings.save_on_exit,
    )


def load_initial_tasks(state: AppState) -> str | None:
    """
    Startup load. A failure is logged and returned as a notice; the app then
    starts with an empty list.
    """
    try:
        count = state.task_list.load()
    except TodoListError as exc:
        logger.warning("Starting with an empty list: %s", exc)
        return f"Error loading tasks: {exc}"
    logger.info("Startup load: %d tasks", count)
    return None
