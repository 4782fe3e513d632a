# src/chatterchicken/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """
    Per-session state shared by the console and command handlers.

    The TaskList is owned by this session only; task_repo is None when
    persistence is switched off.
    """

    settings: Any
    task_list: TaskList = field(default_factory=TaskList)
    task_repo: TaskRepo | None = None
    save_tasks: bool = True

    # Set by mutating commands, cleared after a successful save.
    dirty: bool = False
