# src/todo_list/tasks/task_codec.py

"""
Line codec for the task file.

One task per line:

    <YYYY-MM-DD HH:MM or empty>;<task text>

Only the first ";" separates the fields, so the text may contain more of them.
Text cannot contain a newline (Task.create rejects that).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..core.errors import FormatError, ValidationError
from .task_models import Task, format_timestamp, parse_fixed_timestamp

logger = logging.getLogger(__name__)

FIELD_SEP = ";"


def encode_task(task: Task) -> str:
    stamp = format_timestamp(task.timestamp) if task.timestamp is not None else ""
    return f"{stamp}{FIELD_SEP}{task.text}"


def encode_tasks(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(t) + "\n" for t in tasks)


def decode_line(line: str, line_no: int | None = None) -> Task:
    raw = line.rstrip("\r\n")
    stamp, sep, text = raw.partition(FIELD_SEP)
    if not sep:
        raise FormatError("missing ';' separator", line_no=line_no, line=raw)

    timestamp: datetime | None = None
    if stamp:
        try:
            timestamp = parse_fixed_timestamp(stamp)
        except ValueError as exc:
            raise FormatError(
                f"invalid timestamp {stamp!r}, expected YYYY-MM-DD HH:MM",
                line_no=line_no,
                line=raw,
            ) from exc

    try:
        return Task.create(text, timestamp)
    except ValidationError as exc:
        raise FormatError(str(exc), line_no=line_no, line=raw) from exc


def decode_lines(lines: Iterable[str]) -> list[Task]:
    """
    Decode a whole file. Blank lines are skipped; the first bad line aborts
    the decode with FormatError.
    """
    out: list[Task] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        out.append(decode_line(line, line_no))
    logger.debug("Decoded %d task lines", len(out))
    return out
