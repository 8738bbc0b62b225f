# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.controller import TaskListController
from todo_list.core.state import AppState
from todo_list.tasks.task_store import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    A SimpleNamespace rather than the real config keeps tests isolated from
    the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "data" / "logs",
        tasks_file=tmp_path / "tasks.txt",
        file_encoding="utf-8",
        load_on_start=True,
        save_on_exit=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.tasks_file, encoding=settings.file_encoding)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFileStore) -> AppState:
    """AppState backed by a real file store under tmp_path."""
    return AppState(
        settings=settings,
        task_list=TaskListController(store),
        save_on_exit=settings.save_on_exit,
    )
