# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_list.core.errors import FormatError
from todo_list.tasks.task_codec import decode_line, decode_lines, encode_task, encode_tasks
from todo_list.tasks.task_models import Task


def test_encode_dated_and_undated() -> None:
    assert encode_task(Task.create("Meeting", datetime(2024, 3, 1, 9, 0))) == "2024-03-01 09:00;Meeting"
    assert encode_task(Task.create("Buy milk")) == ";Buy milk"


def test_encode_zero_pads() -> None:
    assert encode_task(Task.create("x", datetime(987, 1, 2, 3, 4))) == "0987-01-02 03:04;x"


def test_encode_tasks_one_line_each() -> None:
    payload = encode_tasks([Task.create("a"), Task.create("b", datetime(2024, 1, 1))])
    assert payload == ";a\n2024-01-01 00:00;b\n"
    assert encode_tasks([]) == ""


def test_decode_keeps_extra_separators_in_text() -> None:
    task = decode_line("2024-03-01 09:00;Pay rent;urgent")
    assert task.text == "Pay rent;urgent"
    assert task.timestamp == datetime(2024, 3, 1, 9, 0)


def test_decode_empty_timestamp_and_line_ending() -> None:
    task = decode_line(";Buy milk\r\n")
    assert task == Task("Buy milk", None)


def test_decode_keeps_text_spacing() -> None:
    assert decode_line(";  indented  \n").text == "  indented  "


@pytest.mark.parametrize(
    "line",
    [
        "no separator here",
        "2024-03-01;date without time",
        "2024-03-01 9:00;not zero padded",
        "yesterday;text",
        "2024-03-01 09:00;",
        ";   ",
    ],
)
def test_decode_rejects_malformed(line: str) -> None:
    with pytest.raises(FormatError):
        decode_line(line)


def test_format_error_carries_line_number() -> None:
    with pytest.raises(FormatError) as info:
        decode_lines([";ok\n", "\n", "bad line\n"])
    assert info.value.line_no == 3
    assert info.value.line == "bad line"
    assert "line 3" in str(info.value)


def test_decode_lines_skips_blank_lines() -> None:
    tasks = decode_lines([";a\n", "\n", "   \n", "2024-01-01 00:00;b\n"])
    assert [t.text for t in tasks] == ["a", "b"]


def test_round_trip_preserves_order_and_values() -> None:
    tasks = [
        Task.create("z last written first"),
        Task.create("semi;colons;inside", datetime(2024, 3, 1, 9, 0)),
        Task.create("ünïcödé ✓", datetime(2030, 12, 31, 23, 59)),
        Task.create(" padded "),
    ]
    decoded = decode_lines(encode_tasks(tasks).splitlines(keepends=True))
    assert decoded == tasks
