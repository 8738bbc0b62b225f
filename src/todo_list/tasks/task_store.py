# src/todo_list/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageError
from .task_codec import decode_lines, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Flat-file task store (see task_codec for the line format).

    - load(): a missing file is an empty list, not an error
    - save(): writes a sibling temp file, then os.replace() over the target,
      so a failed write leaves the previous file intact

    Tasks come back in file order; sorting is the controller's job.
    """

    def __init__(self, path: str | Path = "tasks.txt", *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("Task file %s not found, starting empty.", self._path)
            return []

        try:
            with self._path.open("r", encoding=self._encoding) as fh:
                tasks = decode_lines(fh)
        except UnicodeDecodeError as exc:
            raise StorageError(
                f"Cannot decode {self._path} as {self._encoding}: {exc.reason}", path=self._path
            ) from exc
        except LookupError as exc:
            raise StorageError(f"Unknown file encoding {self._encoding!r}: {exc}", path=self._path) from exc
        except OSError as exc:
            raise StorageError(f"Cannot read {self._path}: {exc.strerror or exc}", path=self._path) from exc

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> int:
        items = list(tasks)
        payload = encode_tasks(items)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding=self._encoding, newline="\n") as fh:
                fh.write(payload)
            os.replace(tmp, self._path)
        except UnicodeEncodeError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(
                f"Cannot encode tasks as {self._encoding}: {exc.reason}", path=self._path
            ) from exc
        except LookupError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Unknown file encoding {self._encoding!r}: {exc}", path=self._path) from exc
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Cannot write {self._path}: {exc.strerror or exc}", path=self._path) from exc

        logger.info("Saved %d tasks to %s", len(items), self._path)
        return len(items)
