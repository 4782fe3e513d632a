# src/chatterchicken/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the app.

Bootstrap and the console depend on these Protocols instead of concrete
implementations, so the SQLite store can be swapped for an in-memory fake in tests.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Snapshot persistence for a session's TaskList."""

    def load_tasks(self) -> TaskList: ...
    def save_tasks(self, task_list: TaskList) -> int: ...
    def count_tasks(self) -> int: ...
    def close(self) -> None: ...
