# src/todo_list/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time

from ..core.errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIMESTAMP_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"

NO_TIMESTAMP_LABEL = "No Date/Time"

# strptime alone accepts "9:00" or "2024-3-1"; the formats are fixed width.
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", re.ASCII)


def format_timestamp(value: datetime) -> str:
    """YYYY-MM-DD HH:MM, zero padded (years below 1000 included)."""
    return value.replace(tzinfo=None).isoformat(sep=" ", timespec="minutes")


def parse_fixed_timestamp(text: str) -> datetime:
    """Inverse of format_timestamp. Raises ValueError on anything else."""
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ValueError(f"{text!r} does not match YYYY-MM-DD HH:MM")
    return datetime.strptime(text, TIMESTAMP_FORMAT)


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single task: raw text plus an optional timestamp.

    Notes:
    - text is kept as typed (not stripped) so it survives a save/load unchanged.
    - timestamp is naive with minute precision; a date without a time means 00:00.
    - every constructor path validates, so a Task can always be written to the file.
    """

    text: str
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValidationError("Task text is required.")
        if "\n" in self.text or "\r" in self.text:
            raise ValidationError("Task text must be a single line.")
        if self.timestamp is not None:
            if not isinstance(self.timestamp, datetime):
                raise ValidationError("Task timestamp must be a datetime.")
            if self.timestamp.tzinfo is not None:
                raise ValidationError("Task timestamp must not carry a timezone.")
            object.__setattr__(self, "timestamp", self.timestamp.replace(second=0, microsecond=0))

    @classmethod
    def create(cls, text: str | None, timestamp: datetime | None = None) -> Task:
        return cls(text=text, timestamp=timestamp)  # type: ignore[arg-type]

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None

    def format_timestamp(self) -> str:
        if self.timestamp is None:
            return NO_TIMESTAMP_LABEL
        return format_timestamp(self.timestamp)

    def display(self) -> str:
        return f"{self.format_timestamp()} - {self.text}"

    def __str__(self) -> str:
        return self.display()


def parse_timestamp(date_text: str | None, time_text: str | None = None) -> datetime | None:
    """
    Build a timestamp from boundary input.

    - no date, no time -> None
    - date only        -> date at 00:00
    - date + time      -> both combined
    - time only        -> ValidationError (a timestamp needs a date)
    """
    date_text = (date_text or "").strip()
    time_text = (time_text or "").strip()

    if not date_text:
        if time_text:
            raise ValidationError("A time needs a date (YYYY-MM-DD).")
        return None

    try:
        if not _DATE_RE.fullmatch(date_text):
            raise ValueError(date_text)
        day = datetime.strptime(date_text, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date {date_text!r}, expected YYYY-MM-DD.") from exc

    at = time.min
    if time_text:
        try:
            if not _TIME_RE.fullmatch(time_text):
                raise ValueError(time_text)
            at = datetime.strptime(time_text, TIME_FORMAT).time()
        except ValueError as exc:
            raise ValidationError(f"Invalid time {time_text!r}, expected HH:MM.") from exc

    return datetime.combine(day, at)
