# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single tracked task.

    Notes:
    - id is assigned by the caller; the store never checks uniqueness
    - created_at is a naive local date-time (no tz offset)
    """

    id: str
    title: str
    completed: bool
    created_at: datetime

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)
