# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from .task_codec import HEADER, TaskDialect, decode_rows, encode_row
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_CSV_PATH = Path("data/tasks.csv")


class TaskStore:
    """
    CSV task store.

    Every call re-reads the file; nothing is cached between calls.
    - inserts append a single row
    - update/delete read everything, modify the list, rewrite the whole file

    Thread-safety:
    - none; overlapping read-modify-write calls can lose updates
    - each method opens (and closes) its own file handle
    """

    def __init__(self, csv_path: str | Path = DEFAULT_TASKS_CSV_PATH) -> None:
        self._path = Path(csv_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)
        if self._is_empty():
            self._write_header()
        logger.info("TaskStore ready path=%s total=%s", self._path, self.count_tasks())

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _is_empty(self) -> bool:
        return not self._path.exists() or self._path.stat().st_size == 0

    def _write_header(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8", newline="") as fh:
            csv.writer(fh, dialect=TaskDialect).writerow(HEADER)

    def _write_all(self, tasks: Iterable[Task]) -> None:
        """Truncate the file and write header + one row per task, in order."""
        with self._path.open("w", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh, dialect=TaskDialect)
            writer.writerow(HEADER)
            writer.writerows(encode_row(t) for t in tasks)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self.get_all())

    def get_all(self) -> list[Task]:
        """All well-formed tasks, most recently created first."""
        if self._is_empty():
            return []

        with self._path.open("r", encoding="utf-8", errors="replace", newline="") as fh:
            reader = csv.reader(fh, dialect=TaskDialect)
            next(reader, None)  # header
            tasks = list(decode_rows(reader))

        # sorted() is stable, so equal timestamps keep file order.
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    def get_by_id(self, task_id: str) -> Task | None:
        return next((t for t in self.get_all() if t.id == task_id), None)

    def add(self, task: Task) -> None:
        """
        Append one task row.

        Does not check for duplicate ids; the caller owns uniqueness.
        """
        row = encode_row(task)
        if self._is_empty():
            self._write_header()

        with self._path.open("a", encoding="utf-8", newline="") as fh:
            csv.writer(fh, dialect=TaskDialect).writerow(row)
        logger.debug("Task added id=%s completed=%s", task.id, task.completed)

    def update(self, task: Task) -> bool:
        """
        Replace the first task with the same id, keeping its list position.

        Returns False (and leaves the file untouched) if no task matches.
        """
        tasks = self.get_all()
        for i, existing in enumerate(tasks):
            if existing.id == task.id:
                tasks[i] = task
                self._write_all(tasks)
                logger.debug("Task updated id=%s", task.id)
                return True
        return False

    def delete(self, task_id: str) -> bool:
        """Remove every task with this id. Returns False if nothing matched."""
        tasks = self.get_all()
        kept = [t for t in tasks if t.id != task_id]
        if len(kept) == len(tasks):
            return False

        self._write_all(kept)
        logger.debug("Task deleted id=%s removed=%s", task_id, len(tasks) - len(kept))
        return True

    def toggle_complete(self, task_id: str) -> Task | None:
        task = self.get_by_id(task_id)
        if task is None:
            return None

        updated = task.toggled()
        self.update(updated)
        return updated

    def search(self, query: str) -> list[Task]:
        """
        Case-insensitive substring match on title.

        A blank query returns everything (same as get_all()).
        """
        if not query.strip():
            return self.get_all()

        needle = query.strip().lower()
        return [t for t in self.get_all() if needle in t.title.lower()]

    def clear(self) -> None:
        """Drop all tasks: delete the file and recreate it with the header only."""
        self._path.unlink(missing_ok=True)
        self._write_header()
        logger.info("TaskStore cleared path=%s", self._path)
