# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on a Protocol instead of the concrete file store,
so tests can swap in an in-memory store.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> int: ...
