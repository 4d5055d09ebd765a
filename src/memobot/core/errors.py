# src/memobot/core/errors.py

from __future__ import annotations

from typing import Any


class MemobotError(Exception):
    """Base class for every error the core reports to its callers."""


class NotFound(MemobotError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StorageError(MemobotError):
    """I/O or constraint failure from the underlying store (original error is chained)."""


class InvalidRating(MemobotError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid rating: {value!r} (expected hard, good or reset)")
        self.value = value
