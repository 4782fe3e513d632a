# src/chatterchicken/tasks/task_errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for every error raised by the task core."""


class ValidationError(TaskError, ValueError):
    """Malformed task fields at creation time (or a non-numeric task number)."""


class TaskIndexError(TaskError, IndexError):
    """
    A 1-based task number outside [1, size].

    Carries the offending index and the current list size so the front end
    can build a useful message. The list is left untouched.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Invalid task number {index} for list of length {size}")


class InvalidArgumentError(TaskError, TypeError):
    """Absent or non-Task value passed where a Task is required."""
