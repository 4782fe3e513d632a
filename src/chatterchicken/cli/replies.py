# src/chatterchicken/cli/replies.py

"""
User-facing reply texts.

The task core hands back plain values (tasks, AddedTask, percentages); this
module turns them into the strings the console prints.
"""

from __future__ import annotations

from ..tasks.task_errors import TaskError, TaskIndexError
from ..tasks.task_list import AddedTask, TaskList
from ..tasks.task_models import Task


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def _indent(task: Task) -> str:
    return f"  {task.format_for_display()}"


def added(outcome: AddedTask) -> str:
    return (
        "Got it. I've added this task:\n"
        f"{_indent(outcome.task)}\n"
        f"Now you have {_count(outcome.position)} in the list."
    )


def marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n{_indent(task)}"


def unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n{_indent(task)}"


def deleted(task: Task, remaining: int) -> str:
    return (
        "Noted. I've removed this task:\n"
        f"{_indent(task)}\n"
        f"Now you have {_count(remaining)} in the list."
    )


def listing(task_list: TaskList, title: str, empty: str) -> str:
    if not task_list:
        return empty
    return title + task_list.get_formatted_list()


def all_tasks(task_list: TaskList) -> str:
    return listing(task_list, "Here are the tasks in your list:", "Your list is empty.")


def matches(results: TaskList, keyword: str) -> str:
    return listing(
        results,
        "Here are the matching tasks in your list:",
        f"No tasks match {keyword!r}.",
    )


def progress(task_list: TaskList) -> str:
    if not task_list:
        return "You have no tasks yet, so there is nothing to complete (0%)."
    done = len(task_list.get_completed_tasks())
    return (
        f"You have completed {task_list.percent_done()}% of your tasks "
        f"({done} of {len(task_list)})."
    )


def error(exc: TaskError) -> str:
    if isinstance(exc, TaskIndexError):
        if exc.size == 0:
            return f"OOPS!!! There is no task {exc.index}: your list is empty."
        return (
            f"OOPS!!! There is no task {exc.index}. "
            f"Invalid input for list of length {exc.size}; pick a number from 1 to {exc.size}."
        )
    return f"OOPS!!! {exc}"
