# src/tasktrack/tasks/task_ports.py

from __future__ import annotations

"""
Storage port for tasks.

Callers depend on this Protocol instead of the CSV implementation,
which keeps the backend swappable and makes fakes trivial in tests.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from .task_models import Task


@runtime_checkable
class TaskRepo(Protocol):
    # Reads
    def get_all(self) -> list[Task]: ...
    def get_by_id(self, task_id: str) -> Task | None: ...
    def search(self, query: str) -> list[Task]: ...
    def count_tasks(self) -> int: ...

    # Writes
    def add(self, task: Task) -> None: ...
    def update(self, task: Task) -> bool: ...
    def delete(self, task_id: str) -> bool: ...
    def toggle_complete(self, task_id: str) -> Task | None: ...
    def clear(self) -> None: ...

    @property
    def path(self) -> Path: ...
