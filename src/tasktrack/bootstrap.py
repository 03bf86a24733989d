# src/tasktrack/bootstrap.py

"""
Composition root:
- loads settings once (or takes injected ones),
- configures logging,
- builds the TaskStore on the configured CSV path.
"""

from __future__ import annotations

import logging

from .config import Settings, get_settings
from .logging_setup import setup_logging
from .tasks.task_ports import TaskRepo
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings: Settings | None = None) -> TaskRepo:
    """
    Create a TaskStore from the provided settings.

    Settings are injectable so tests never touch the real data dir.
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return TaskStore(settings.tasks_csv_path)


def init_app(*, settings: Settings | None = None) -> TaskRepo:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )
    logger.info("Starting %s...", settings.app_name)
    return create_task_store(settings=settings)
