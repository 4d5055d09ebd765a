# src/memobot/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Iterator
from datetime import date
from pathlib import Path

from ..core.clock import LocalClock
from ..core.errors import NotFound, StorageError
from ..core.ports import Clock, TaskMutation
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_SEED_NAME = "Add a task"
DEFAULT_SEED_URL = "http://example.com"

_COLUMNS = "id, name, url, level, due_date"


class TaskStore:
    """
    SQLite task store.

    Layout: one `tasks` table, due_date stored as ISO `YYYY-MM-DD` text so that
    string ordering and calendar ordering coincide.

    Thread-safety:
    - a single connection is owned by the store and never handed out
    - every public method holds `self._lock` for its whole duration, so
      operations are serialized process-wide (including read-modify-write in `modify`)
    - each write commits before the method returns
    """

    def __init__(
        self,
        db_path: str | Path = "db.sqlite",
        *,
        clock: Clock | None = None,
        seed: bool = True,
        seed_name: str = DEFAULT_SEED_NAME,
        seed_url: str = DEFAULT_SEED_URL,
    ) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._clock: Clock = clock or LocalClock()
        self._lock = threading.Lock()

        try:
            self._conn = sqlite3.connect(str(self._db_path), timeout=30.0, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open task database {self._db_path}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row
        self._configure_conn(self._conn)

        try:
            self._ensure_schema()
            if seed:
                self.seed_if_empty(name=seed_name, url=seed_url)
        except StorageError:
            self._conn.close()
            raise

        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _locked(self, op: str) -> Iterator[sqlite3.Connection]:
        """Hold the store lock and translate sqlite3 errors into StorageError."""
        with self._lock:
            try:
                yield self._conn
            except sqlite3.Error as exc:
                logger.error("TaskStore %s failed: %s", op, exc)
                raise StorageError(f"{op} failed: {exc}") from exc

    def _ensure_schema(self) -> None:
        with self._locked("ensure_schema") as conn, conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    url TEXT NOT NULL,
                    level INTEGER NOT NULL,
                    due_date TEXT NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date)")

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        try:
            due = date.fromisoformat(str(row["due_date"]))
        except ValueError as exc:
            raise StorageError(f"Task {row['id']} has a malformed due_date {row['due_date']!r}") from exc
        return Task(
            id=int(row["id"]),
            name=str(row["name"]),
            url=str(row["url"]),
            level=int(row["level"]),
            due_date=due,
        )

    @staticmethod
    def _insert(conn: sqlite3.Connection, name: str, url: str, due: date) -> int:
        cur = conn.execute(
            "INSERT INTO tasks(name, url, level, due_date) VALUES (?, ?, 0, ?)",
            (name, url, due.isoformat()),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise StorageError("SQLite did not return lastrowid for tasks insert")
        return int(rowid)

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._locked("count_tasks") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def seed_if_empty(self, *, name: str = DEFAULT_SEED_NAME, url: str = DEFAULT_SEED_URL) -> bool:
        """
        Insert one placeholder task when the table has zero rows.

        Returns True if the placeholder was inserted. Running it against a
        populated table never inserts anything.
        """
        today = self._clock.today()
        with self._locked("seed_if_empty") as conn, conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            if int(n) > 0:
                return False
            task_id = self._insert(conn, name, url, today)
        logger.info("TaskStore seeded placeholder task id=%s", task_id)
        return True

    def create(self, name: str, url: str) -> Task:
        if not name or not name.strip():
            raise ValueError("name is required")
        name = name.strip()
        url = (url or "").strip()
        today = self._clock.today()

        with self._locked("create") as conn, conn:
            task_id = self._insert(conn, name, url, today)

        logger.debug("Task added id=%s name=%r due=%s", task_id, name, today)
        return Task(id=task_id, name=name, url=url, level=0, due_date=today)

    def delete(self, task_id: int) -> bool:
        """Remove the task if present. Unknown ids are a no-op; returns whether a row was removed."""
        with self._locked("delete") as conn, conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            removed = cur.rowcount == 1
        logger.debug("Task delete id=%s removed=%s", task_id, removed)
        return removed

    def get(self, task_id: int) -> Task:
        with self._locked("get") as conn:
            row = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            if row is None:
                raise NotFound(task_id)
            return self._row_to_task(row)

    def list_all(self) -> list[Task]:
        """All tasks, most-recently-due (or furthest future) first."""
        with self._locked("list_all") as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM tasks ORDER BY due_date DESC, id DESC"
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def list_due(self, as_of: date | None = None) -> list[Task]:
        """Tasks with due_date <= as_of (default: today), same ordering as list_all()."""
        if as_of is None:
            as_of = self._clock.today()
        with self._locked("list_due") as conn:
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS}
                FROM tasks
                WHERE due_date <= ?
                ORDER BY due_date DESC, id DESC
                """,
                (as_of.isoformat(),),
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def update(self, task_id: int, level: int, due_date: date) -> None:
        if int(level) < 0:
            raise ValueError("level must be >= 0")
        with self._locked("update") as conn, conn:
            cur = conn.execute(
                "UPDATE tasks SET level = ?, due_date = ? WHERE id = ?",
                (int(level), due_date.isoformat(), int(task_id)),
            )
            if cur.rowcount != 1:
                raise NotFound(task_id)

    def modify(self, task_id: int, fn: TaskMutation) -> Task:
        """
        Read-modify-write one task as a single transaction.

        `fn` receives the current Task and returns (new_level, new_due_date).
        The lock is held across read, compute and write; if `fn` or the write
        raises, the transaction is rolled back and the row stays as it was.
        """
        with self._locked("modify") as conn, conn:
            row = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            if row is None:
                raise NotFound(task_id)
            task = self._row_to_task(row)

            level, due = fn(task)
            level = int(level)
            if level < 0:
                raise ValueError("level must be >= 0")

            conn.execute(
                "UPDATE tasks SET level = ?, due_date = ? WHERE id = ?",
                (level, due.isoformat(), task.id),
            )

        task.level = level
        task.due_date = due
        return task
