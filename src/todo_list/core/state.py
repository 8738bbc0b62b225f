# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .controller import TaskListController


@dataclass
class AppState:
    # Settings are kept on the state so command handlers can read them.
    settings: object

    task_list: TaskListController

    save_on_exit: bool = False
