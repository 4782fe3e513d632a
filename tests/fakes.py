# tests/fakes.py

from __future__ import annotations

import sqlite3

from chatterchicken.tasks.task_list import TaskList


class FakeTaskRepo:
    """
    In-memory TaskRepo used for bootstrap/console tests.

    - Keeps the last saved snapshot as a plain list (so later list mutations don't leak in)
    - Counts saves for assertions
    - Can be told to fail the next saves like a broken disk would
    """

    def __init__(self, initial: TaskList | None = None, fail_saves: bool = False) -> None:
        self.saved = list(initial or ())
        self.save_calls = 0
        self.closed = False
        self.fail_saves = fail_saves

    def load_tasks(self) -> TaskList:
        return TaskList(self.saved)

    def save_tasks(self, task_list: TaskList) -> int:
        self.save_calls += 1
        if self.fail_saves:
            raise sqlite3.OperationalError("disk I/O error")
        self.saved = list(task_list)
        return len(self.saved)

    def count_tasks(self) -> int:
        return len(self.saved)

    def close(self) -> None:
        self.closed = True
