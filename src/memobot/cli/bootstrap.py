# src/memobot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- builds the single TaskStore and injects it into the ReviewScheduler.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.clock import LocalClock
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_scheduler import ReviewScheduler
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and clock injectable makes the app easier to test and avoids
    hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if clock is None:
        clock = LocalClock()

    _ensure_local_dirs(settings)

    task_store = TaskStore(
        settings.tasks_db_path,
        clock=clock,
        seed=settings.seed_enabled,
        seed_name=settings.seed_task_name,
        seed_url=settings.seed_task_url,
    )

    return AppState(
        settings=settings,
        clock=clock,
        task_store=task_store,
        scheduler=ReviewScheduler(task_store, clock),
    )
