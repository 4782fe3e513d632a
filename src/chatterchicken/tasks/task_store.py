# src/chatterchicken/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from datetime import datetime
from pathlib import Path

from .task_errors import TaskError
from .task_list import TaskList
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite snapshot store for a TaskList.

    The list is the source of truth while the app runs; the store only keeps
    a copy between sessions. save_tasks() replaces the whole table in one
    transaction, load_tasks() rebuilds the list ordered by position.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    position INTEGER NOT NULL,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    done INTEGER NOT NULL DEFAULT 0,
                    due_at TEXT,
                    start_at TEXT,
                    end_at TEXT,
                    updated_at REAL NOT NULL
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("position", "INTEGER NOT NULL DEFAULT 0")
            add_col("kind", "TEXT NOT NULL DEFAULT 'todo'")
            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("done", "INTEGER NOT NULL DEFAULT 0")
            add_col("due_at", "TEXT")
            add_col("start_at", "TEXT")
            add_col("end_at", "TEXT")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _dt_to_str(dt: datetime | None) -> str | None:
        return dt.isoformat() if dt is not None else None

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            TaskKind.parse(row["kind"]),
            str(row["description"] or ""),
            done=bool(row["done"]),
            due_at=row["due_at"],
            start_at=row["start_at"],
            end_at=row["end_at"],
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def load_tasks(self) -> TaskList:
        """
        Rebuild a TaskList from the stored snapshot.

        Rows that no longer pass Task validation are skipped with a warning
        instead of failing the whole load.
        """
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY position ASC, id ASC")
            rows = cur.fetchall()
        finally:
            conn.close()

        task_list = TaskList()
        for row in rows:
            try:
                task_list.add_task(self._row_to_task(row))
            except TaskError as e:
                logger.warning("Skipping stored task id=%s: %s", row["id"], e)
        logger.debug("Loaded %d/%d tasks from %s", len(task_list), len(rows), self._db_path)
        return task_list

    def save_tasks(self, task_list: TaskList) -> int:
        """Replace the stored snapshot with the current list. Returns the number of rows written."""
        now = time.time()
        params = [
            (
                position,
                task.kind.value,
                task.description,
                int(task.done),
                self._dt_to_str(task.due_at),
                self._dt_to_str(task.start_at),
                self._dt_to_str(task.end_at),
                now,
            )
            for position, task in enumerate(task_list, start=1)
        ]

        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks(
                        position, kind, description, done,
                        due_at, start_at, end_at, updated_at
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    params,
                )
        finally:
            conn.close()

        logger.info("Saved %d tasks to %s", len(params), self._db_path)
        return len(params)
