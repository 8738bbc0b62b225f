# src/todo_list/tasks/task_ordering.py

"""
Display order for tasks.

Ascending by timestamp; tasks without a timestamp go after every dated task.
Ties (equal timestamps, or both undated) keep their input order, which relies
on sorted() being stable.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .task_models import Task


def sort_key(task: Task) -> tuple[bool, datetime]:
    return (task.timestamp is None, task.timestamp or datetime.min)


def compare(a: Task, b: Task) -> int:
    ka, kb = sort_key(a), sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=sort_key)
