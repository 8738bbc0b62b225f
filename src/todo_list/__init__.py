"""Single-user task list: dated tasks, chronological order, flat-file storage."""

__version__ = "0.1.0"
