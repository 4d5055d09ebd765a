# src/memobot/tasks/task_api.py

from __future__ import annotations

"""
Commands exposed to the UI layer.

These five calls are the only way outer layers touch tasks. They are
synchronous; store/scheduler errors (NotFound, StorageError, InvalidRating)
propagate unchanged so the caller can report them.
"""

import logging
from typing import Any

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def list_all(state: AppState) -> list[Task]:
    return state.task_store.list_all()


def list_due(state: AppState) -> list[Task]:
    """Tasks due today or earlier, by the state's clock."""
    return state.task_store.list_due(state.clock.today())


def create_task(state: AppState, name: str, url: str = "") -> Task:
    task = state.task_store.create(name, url)
    logger.info("Task created id=%s name=%r", task.id, task.name)
    return task


def delete_task(state: AppState, task_id: int) -> bool:
    removed = state.task_store.delete(task_id)
    if removed:
        logger.info("Task deleted id=%s", task_id)
    return removed


def rate_task(state: AppState, task_id: int, rating: Any) -> Task:
    return state.scheduler.review(task_id, rating)
