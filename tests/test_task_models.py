# tests/test_task_models.py

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from todo_list.core.errors import ValidationError
from todo_list.tasks.task_models import Task, parse_timestamp


def test_create_keeps_raw_text_and_timestamp() -> None:
    ts = datetime(2024, 3, 1, 9, 0)
    task = Task.create("  Meeting ", ts)
    assert task.text == "  Meeting "
    assert task.timestamp == ts
    assert task.has_timestamp


@pytest.mark.parametrize("text", ["", "   ", "\t", None])
def test_create_rejects_empty_text(text) -> None:
    with pytest.raises(ValidationError):
        Task.create(text)


@pytest.mark.parametrize("text", ["two\nlines", "carriage\rreturn"])
def test_create_rejects_multiline_text(text: str) -> None:
    with pytest.raises(ValidationError):
        Task.create(text)


def test_create_truncates_to_minutes() -> None:
    task = Task.create("x", datetime(2024, 3, 1, 9, 30, 45, 123))
    assert task.timestamp == datetime(2024, 3, 1, 9, 30)


def test_task_is_immutable() -> None:
    task = Task.create("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.text = "y"  # type: ignore[misc]


def test_display_forms() -> None:
    assert Task.create("Meeting", datetime(2024, 3, 1, 9, 0)).display() == "2024-03-01 09:00 - Meeting"
    assert str(Task.create("Buy milk")) == "No Date/Time - Buy milk"


def test_equal_tasks_compare_equal() -> None:
    ts = datetime(2024, 3, 1, 9, 0)
    assert Task.create("a", ts) == Task("a", ts)
    assert Task.create("a") != Task.create("a", ts)


def test_parse_timestamp_variants() -> None:
    assert parse_timestamp(None, None) is None
    assert parse_timestamp("", "  ") is None
    assert parse_timestamp("2024-03-01") == datetime(2024, 3, 1, 0, 0)
    assert parse_timestamp("2024-03-01", "") == datetime(2024, 3, 1, 0, 0)
    assert parse_timestamp(" 2024-03-01 ", "23:59") == datetime(2024, 3, 1, 23, 59)


@pytest.mark.parametrize(
    ("date_text", "time_text"),
    [
        ("2024-13-01", None),
        ("01/03/2024", None),
        ("2024-02-30", None),
        ("2024-03-01", "24:00"),
        ("2024-03-01", "9h"),
        ("", "09:00"),
    ],
)
def test_parse_timestamp_rejects_bad_input(date_text: str, time_text: str | None) -> None:
    with pytest.raises(ValidationError):
        parse_timestamp(date_text, time_text)


@pytest.mark.parametrize("text", ["", "  ", "a\nb"])
def test_plain_constructor_validates_text(text: str) -> None:
    with pytest.raises(ValidationError):
        Task(text)


def test_plain_constructor_truncates_to_minutes() -> None:
    task = Task("x", datetime(2024, 3, 1, 9, 30, 45))
    assert task.timestamp == datetime(2024, 3, 1, 9, 30)
    assert task == Task.create("x", datetime(2024, 3, 1, 9, 30))


@pytest.mark.parametrize("tz", [timezone.utc, timezone(timedelta(hours=3))])
def test_aware_timestamp_is_rejected(tz: timezone) -> None:
    with pytest.raises(ValidationError):
        Task.create("x", datetime(2024, 3, 1, 9, 0, tzinfo=tz))
    with pytest.raises(ValidationError):
        Task("x", datetime(2024, 3, 1, 9, 0, tzinfo=tz))


def test_non_datetime_timestamp_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Task("x", "2024-03-01 09:00")  # type: ignore[arg-type]
