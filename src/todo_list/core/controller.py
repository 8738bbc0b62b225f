# src/todo_list/core/controller.py

"""
In-memory task list owned by the front end's thread.

Every mutation leaves the list in canonical order (task_ordering). Failing
operations never leave a half-applied change behind: add() validates before
touching the list, load() swaps the list only after the whole file decoded.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..tasks.task_models import Task, parse_timestamp
from ..tasks.task_ordering import sort_tasks
from .errors import FormatError, StorageError
from .ports import TaskRepo

logger = logging.getLogger(__name__)


class TaskListController:
    def __init__(self, repo: TaskRepo, tasks: list[Task] | None = None) -> None:
        self._repo = repo
        self._tasks: list[Task] = sort_tasks(tasks or [])
        self._dirty = False

    # ---- queries ----

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    @property
    def dirty(self) -> bool:
        """True when there are adds/removes not yet saved (or replaced by a load)."""
        return self._dirty

    @property
    def repo(self) -> TaskRepo:
        return self._repo

    # ---- mutations ----

    def add(self, text: str, timestamp: datetime | None = None) -> Task:
        """Validate, insert and re-sort. Raises ValidationError with no state change."""
        task = Task.create(text, timestamp)
        self._tasks = sort_tasks([*self._tasks, task])
        self._dirty = True
        logger.debug("Task added: %s (total=%d)", task.display(), len(self._tasks))
        return task

    def add_from_input(
        self,
        text: str,
        date_text: str | None = None,
        time_text: str | None = None,
    ) -> Task:
        """Same as add(), taking the date (YYYY-MM-DD) and time (HH:MM) as typed."""
        timestamp = parse_timestamp(date_text, time_text)
        return self.add(text, timestamp)

    def remove(self, index: int) -> Task | None:
        """
        Remove the task at `index` in the current snapshot.
        Out of range (negative included) is a no-op returning None.
        """
        if index < 0 or index >= len(self._tasks):
            logger.debug("Remove ignored: index %s out of range (size=%d)", index, len(self._tasks))
            return None
        task = self._tasks.pop(index)
        self._dirty = True
        logger.debug("Task removed: %s (total=%d)", task.display(), len(self._tasks))
        return task

    def clear(self) -> None:
        if self._tasks:
            self._tasks = []
            self._dirty = True

    # ---- persistence ----

    def load(self) -> int:
        """
        Replace the whole list with the repo's content.

        On FormatError/StorageError the list keeps its pre-load content and the
        error is re-raised for the caller to report.
        """
        try:
            loaded = self._repo.load()
        except FormatError as exc:
            logger.error("Load aborted, task file is malformed: %s", exc)
            raise
        except StorageError as exc:
            logger.error("Load failed: %s", exc)
            raise

        self._tasks = sort_tasks(loaded)
        self._dirty = False
        return len(self._tasks)

    def save(self) -> int:
        try:
            written = self._repo.save(self.snapshot())
        except StorageError as exc:
            logger.error("Save failed: %s", exc)
            raise
        self._dirty = False
        return written
