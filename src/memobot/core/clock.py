# src/memobot/core/clock.py

from __future__ import annotations

from datetime import date, datetime


class LocalClock:
    """Clock backed by the local timezone of the running process."""

    def today(self) -> date:
        return datetime.now().astimezone().date()
