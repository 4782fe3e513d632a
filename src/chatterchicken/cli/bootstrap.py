# src/chatterchicken/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store into AppState and loads the saved list,
- saves the list back when asked (after mutations and on shutdown).
"""

from __future__ import annotations

import logging
import sqlite3

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, task_repo: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the repo) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings(). With save_tasks off, no store is opened and the session
    starts with an empty list.
    """
    if settings is None:
        settings = get_settings()

    save_tasks = bool(getattr(settings, "save_tasks", True))

    if save_tasks and task_repo is None:
        _ensure_local_dirs(settings)
        task_repo = TaskStore(settings.tasks_db_path)

    state = AppState(
        settings=settings,
        task_repo=task_repo if save_tasks else None,
        save_tasks=save_tasks,
    )
    load_task_list(state)
    return state


def load_task_list(state: AppState) -> TaskList:
    """Replace the session list with the stored snapshot (empty list without a repo)."""
    if state.task_repo is None:
        state.task_list = TaskList()
        return state.task_list
    state.task_list = state.task_repo.load_tasks()
    state.dirty = False
    logger.info("Loaded %d tasks.", len(state.task_list))
    return state.task_list


def save_task_list(state: AppState) -> bool:
    """
    Persist the session list if it changed since the last save.

    Returns True when a snapshot was written. Storage failures are logged and
    reported as False so the session can go on; the list stays dirty and the
    next save retries.
    """
    if not state.save_tasks or state.task_repo is None or not state.dirty:
        return False
    try:
        state.task_repo.save_tasks(state.task_list)
    except (sqlite3.Error, OSError):
        logger.exception("Failed to save %d tasks.", len(state.task_list))
        return False
    state.dirty = False
    return True
