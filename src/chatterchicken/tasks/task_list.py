# src/chatterchicken/tasks/task_list.py

from __future__ import annotations

"""
Task list manager.

An ordered, in-memory collection of Task objects:
- insertion order is display order,
- callers address tasks by 1-based position (as shown to the user),
- positions stay dense: deleting shifts later tasks down by one.

Filters and search return new TaskList snapshots; adding to or deleting from
a snapshot never touches the source list. No I/O happens here: callers get
plain values back and decide how to present them.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .task_errors import InvalidArgumentError, TaskIndexError, ValidationError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class AddedTask:
    """Outcome of add_task: the task and its new 1-based position (= list size)."""

    task: Task
    position: int


def parse_index(raw: Any) -> int:
    """
    Convert the task-number token supplied by the dispatcher to an int.

    The whole token is parsed, so "12" means position 12. Bounds are not
    checked here; the list does that and raises TaskIndexError.
    """
    if isinstance(raw, bool):
        raise ValidationError(f"Task number must be a whole number, got {raw!r}.")
    if isinstance(raw, int):
        return raw
    text = str(raw or "").strip()
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"Task number must be a whole number, got {text!r}.") from None


class TaskList:
    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for task in tasks or ():
            self._tasks.append(self._require_task(task))

    @staticmethod
    def _require_task(task: Any) -> Task:
        if task is None:
            raise InvalidArgumentError("A task is required.")
        if not isinstance(task, Task):
            raise InvalidArgumentError(f"Expected a Task, got {type(task).__name__}.")
        return task

    def _offset(self, index: int) -> int:
        """Map a 1-based position to a storage offset, rejecting anything outside [1, size]."""
        size = len(self._tasks)
        if isinstance(index, bool) or not isinstance(index, int) or index < 1 or index > size:
            raise TaskIndexError(index, size)
        return index - 1

    # ---- mutations ----

    def add_task(self, task: Task) -> AddedTask:
        self._tasks.append(self._require_task(task))
        position = len(self._tasks)
        logger.debug("Task added position=%s kind=%s", position, task.kind.value)
        return AddedTask(task=task, position=position)

    def delete_task(self, index: int) -> Task:
        offset = self._offset(index)
        task = self._tasks.pop(offset)
        logger.debug("Task deleted position=%s remaining=%s", index, len(self._tasks))
        return task

    def mark_task(self, index: int) -> Task:
        task = self._tasks[self._offset(index)]
        task.set_done(True)
        logger.debug("Task marked position=%s", index)
        return task

    def unmark_task(self, index: int) -> Task:
        task = self._tasks[self._offset(index)]
        task.set_done(False)
        logger.debug("Task unmarked position=%s", index)
        return task

    # ---- queries ----

    def get_task(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def _select(self, predicate: Callable[[Task], bool]) -> TaskList:
        return TaskList(t for t in self._tasks if predicate(t))

    def find(self, keyword: str) -> TaskList:
        """Case-sensitive substring search over descriptions ("" matches everything)."""
        keyword = keyword or ""
        return self._select(lambda t: keyword in t.description)

    def get_completed_tasks(self) -> TaskList:
        return self._select(lambda t: t.done)

    def get_uncompleted_tasks(self) -> TaskList:
        return self._select(lambda t: not t.done)

    def get_by_kind(self, kind: TaskKind | str) -> TaskList:
        kind = TaskKind.parse(kind)
        return self._select(lambda t: t.kind is kind)

    def get_todos(self) -> TaskList:
        return self.get_by_kind(TaskKind.TODO)

    def get_deadlines(self) -> TaskList:
        return self.get_by_kind(TaskKind.DEADLINE)

    def get_events(self) -> TaskList:
        return self.get_by_kind(TaskKind.EVENT)

    def percent_done(self) -> int:
        """Completed share as a truncated integer percentage; 0 for an empty list."""
        total = len(self._tasks)
        if total == 0:
            return 0
        completed = sum(1 for t in self._tasks if t.done)
        return 100 * completed // total

    def get_formatted_list(self) -> str:
        return "".join(
            f"\n{i}.{task.format_for_display()}" for i, task in enumerate(self._tasks, start=1)
        )

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(size={len(self._tasks)})"
