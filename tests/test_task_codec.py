# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tasktrack.tasks.task_codec import RowError, decode_row, decode_rows, encode_row
from tasktrack.tasks.task_models import Task


def test_encode_row_field_order_and_literals() -> None:
    task = Task(id="42", title="Buy milk", completed=False, created_at=datetime(2025, 1, 1, 10, 0))
    assert encode_row(task) == ["42", "Buy milk", "false", "2025-01-01T10:00:00"]
    assert encode_row(task.toggled())[2] == "true"


def test_encode_row_rejects_aware_datetime() -> None:
    task = Task(id="1", title="t", completed=False, created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    with pytest.raises(ValueError):
        encode_row(task)


def test_decode_row_ignores_extra_fields() -> None:
    result = decode_row(["1", "t", "false", "2025-01-01T10:00:00", "extra"], 2)
    assert result == Task(id="1", title="t", completed=False, created_at=datetime(2025, 1, 1, 10, 0))


@pytest.mark.parametrize(
    ("row", "reason"),
    [
        (["1", "t"], "missing fields"),
        (["1", "t", "false", "not-a-date"], "invalid date"),
        (["1", "t", "yes", "2025-01-01T10:00:00"], "invalid boolean"),
        (["1", "t", "", "2025-01-01T10:00:00"], "invalid boolean"),
    ],
)
def test_decode_row_errors_are_tagged(row: list[str], reason: str) -> None:
    result = decode_row(row, 7)
    assert isinstance(result, RowError)
    assert result.reason == reason
    assert result.record_no == 7
    assert result.row == tuple(row)


def test_decode_rows_keeps_only_successes() -> None:
    rows = [
        ["1", "a", "false", "2025-01-01T10:00:00"],
        [],
        ["bad"],
        ["2", "b", "true", "2025-01-02T10:00:00"],
    ]
    assert [t.id for t in decode_rows(rows)] == ["1", "2"]


@pytest.mark.parametrize(
    "raw",
    [
        "2025-01-01",
        "2025-01-01 10:00:00",
        "20250101T100000",
        " 2025-01-01T10:00:00",
        "2025-01-01T10:00:00 ",
        "2025-01-01T10:00:00Z",
        "2025-13-01T10:00:00",
    ],
)
def test_decode_row_requires_iso_local_date_time(raw: str) -> None:
    result = decode_row(["1", "t", "false", raw], 2)
    assert isinstance(result, RowError)
    assert result.reason == "invalid date"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2025-01-01T10:00", datetime(2025, 1, 1, 10, 0)),
        ("2025-01-01T10:00:05", datetime(2025, 1, 1, 10, 0, 5)),
        ("2025-01-01T10:00:05.250", datetime(2025, 1, 1, 10, 0, 5, 250000)),
    ],
)
def test_decode_row_accepts_local_date_time_forms(raw: str, expected: datetime) -> None:
    result = decode_row(["1", "t", "false", raw], 2)
    assert isinstance(result, Task)
    assert result.created_at == expected


@pytest.mark.parametrize("raw", [" true", "false ", "True", "FALSE"])
def test_decode_row_boolean_is_case_insensitive_but_not_trimmed(raw: str) -> None:
    result = decode_row(["1", "t", raw, "2025-01-01T10:00:00"], 2)
    if raw.strip() == raw:
        assert isinstance(result, Task)
        assert result.completed is (raw.lower() == "true")
    else:
        assert isinstance(result, RowError)
        assert result.reason == "invalid boolean"
