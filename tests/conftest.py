# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from chatterchicken.core.state import AppState
from chatterchicken.tasks.task_list import TaskList
from chatterchicken.tasks.task_models import Task
from chatterchicken.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="TestChicken",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_backup_days=0,
        console_enabled=True,
        save_tasks=True,
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with an empty list.

    NOTE: We keep the real SQLite TaskStore here because saving after
    commands is part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_list=TaskList(),
        task_repo=TaskStore(settings.tasks_db_path),
        save_tasks=True,
    )


@pytest.fixture()
def mixed_list() -> TaskList:
    """Five tasks, two of them done, covering every kind."""
    tasks = [
        Task.todo("buy milk"),
        Task.deadline("submit report", "2019-12-01"),
        Task.event("project meeting", "2019-12-02 14:00", "2019-12-02 16:00"),
        Task.todo("read book"),
        Task.deadline("return book", "2019-12-05 1800"),
    ]
    tasks[1].set_done(True)
    tasks[3].set_done(True)
    return TaskList(tasks)
