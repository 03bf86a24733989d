# src/tasktrack/tasks/task_codec.py

"""
CSV row codec for tasks.

Row layout (header is mandatory):
    id,title,completed,created_at
    7a9f2c3d,Buy groceries,false,2025-10-15T14:32:10

Decoding returns a tagged result (Task or RowError) instead of raising,
so a single bad row never aborts a full read.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime

from .task_models import Task

logger = logging.getLogger(__name__)

HEADER: tuple[str, ...] = ("id", "title", "completed", "created_at")

_BOOL_TRUE = "true"
_BOOL_FALSE = "false"

# YYYY-MM-DDTHH:MM[:SS[.fraction]], no offset, no surrounding whitespace.
_LOCAL_DATE_TIME = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{1,6})?)?")

# Long titles are allowed; the default 128 KiB field limit would make the file unreadable.
csv.field_size_limit(2**31 - 1)


class TaskDialect(csv.Dialect):
    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\r\n"
    quoting = csv.QUOTE_MINIMAL


@dataclass(frozen=True, slots=True)
class RowError:
    record_no: int
    reason: str
    row: tuple[str, ...]


def format_created_at(value: datetime) -> str:
    if value.tzinfo is not None:
        raise ValueError(f"created_at must be a naive local date-time, got {value.isoformat()}")
    return value.isoformat()


def parse_created_at(raw: str) -> datetime:
    if not _LOCAL_DATE_TIME.fullmatch(raw):
        raise ValueError(f"not an ISO local date-time: {raw!r}")
    return datetime.fromisoformat(raw)


def format_completed(value: bool) -> str:
    return _BOOL_TRUE if value else _BOOL_FALSE


def parse_completed(raw: str) -> bool:
    norm = raw.lower()
    if norm == _BOOL_TRUE:
        return True
    if norm == _BOOL_FALSE:
        return False
    raise ValueError(f"not a boolean literal: {raw!r}")


def encode_row(task: Task) -> list[str]:
    return [
        task.id,
        task.title,
        format_completed(task.completed),
        format_created_at(task.created_at),
    ]


def decode_row(row: Sequence[str], record_no: int) -> Task | RowError:
    if len(row) < len(HEADER):
        return RowError(record_no, "missing fields", tuple(row))

    task_id, title, completed_raw, created_raw = row[:4]

    try:
        created_at = parse_created_at(created_raw)
    except ValueError:
        return RowError(record_no, "invalid date", tuple(row))

    try:
        completed = parse_completed(completed_raw)
    except ValueError:
        return RowError(record_no, "invalid boolean", tuple(row))

    return Task(id=task_id, title=title, completed=completed, created_at=created_at)


def decode_rows(rows: Iterable[Sequence[str]], *, first_record_no: int = 2) -> Iterator[Task]:
    """
    Decode data rows (header already consumed), keeping successes only.

    Each failure is logged as a warning with the row content and reason.
    Blank lines are skipped silently.
    """
    for record_no, row in enumerate(rows, start=first_record_no):
        if not row:
            continue
        result = decode_row(row, record_no)
        if isinstance(result, RowError):
            logger.warning(
                "Skipping CSV row record=%s reason=%s: %s",
                result.record_no,
                result.reason,
                list(result.row),
            )
            continue
        yield result
