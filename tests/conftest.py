# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.tasks.task_models import Task
from tasktrack.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real env,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="tasktrack-test",
        log_level="DEBUG",
        log_to_file=True,
        data_dir=data_dir,
        tasks_csv_path=data_dir / "tasks.csv",
    )


@pytest.fixture()
def csv_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "tasks.csv"


@pytest.fixture()
def store(csv_path: Path) -> TaskStore:
    return TaskStore(csv_path)


@pytest.fixture()
def make_task():
    def _make(
        task_id: str,
        title: str = "task",
        *,
        completed: bool = False,
        created_at: datetime = datetime(2025, 1, 1, 10, 0, 0),
    ) -> Task:
        return Task(id=task_id, title=title, completed=completed, created_at=created_at)

    return _make


@pytest.fixture()
def restore_root_logging():
    """setup_logging() installs root handlers; drop (and close) them afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
