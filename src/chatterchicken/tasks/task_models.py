# src/chatterchicken/tasks/task_models.py

from __future__ import annotations

import re
from datetime import date, datetime, time
from enum import StrEnum
from typing import Any

from .task_errors import ValidationError

# "2019-12-01 1800" (legacy four-digit time) -> "2019-12-01 18:00"
_COMPACT_TIME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})[ T](\d{2})(\d{2})$")


class TaskKind(StrEnum):
    """
    Closed set of task kinds.

    The value doubles as the storage key and the command name.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def letter(self) -> str:
        return _KIND_LETTERS[self]

    @classmethod
    def parse(cls, raw: Any) -> TaskKind:
        if isinstance(raw, TaskKind):
            return raw
        try:
            return cls(str(raw or "").strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown task kind: {raw!r}") from None


_KIND_LETTERS: dict[TaskKind, str] = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}


def parse_when(value: Any, field: str) -> datetime:
    """
    Accept datetime, date or an ISO-8601 string ("YYYY-MM-DD", "YYYY-MM-DD HH:MM").

    Dates become midnight datetimes. Raises ValidationError on anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if value is None or not str(value).strip():
        raise ValidationError(f"The {field} date is required.")

    raw = str(value).strip()
    m = _COMPACT_TIME_RE.match(raw)
    if m:
        raw = f"{m.group(1)} {m.group(2)}:{m.group(3)}"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise ValidationError(
            f"Could not understand the {field} date {str(value)!r}. Use YYYY-MM-DD [HH:MM]."
        ) from None


def format_when(dt: datetime) -> str:
    """Render as "Dec 1 2019", adding " 18:00" when the time is not midnight."""
    text = f"{dt:%b} {dt.day} {dt.year}"
    if dt.time() != time.min:
        text += f" {dt:%H:%M}"
    return text


class Task:
    """
    One unit of work.

    kind, description and the dates are fixed at creation; only the done
    flag changes afterwards (via set_done). Equality is identity: two tasks
    with the same text are still two tasks.
    """

    __slots__ = ("_kind", "_description", "_done", "_due_at", "_start_at", "_end_at")

    def __init__(
        self,
        kind: TaskKind | str,
        description: str,
        *,
        done: bool = False,
        due_at: Any = None,
        start_at: Any = None,
        end_at: Any = None,
    ) -> None:
        kind = TaskKind.parse(kind)
        text = (description or "").strip() if isinstance(description, str) else ""
        if not text:
            raise ValidationError(f"The description of a {kind.value} cannot be empty.")

        due: datetime | None = None
        start: datetime | None = None
        end: datetime | None = None

        if kind is TaskKind.TODO:
            if due_at is not None or start_at is not None or end_at is not None:
                raise ValidationError("A todo does not take any dates.")
        elif kind is TaskKind.DEADLINE:
            if start_at is not None or end_at is not None:
                raise ValidationError("A deadline takes a /by date only.")
            due = parse_when(due_at, "by")
        elif kind is TaskKind.EVENT:
            if due_at is not None:
                raise ValidationError("An event takes /from and /to dates, not /by.")
            start = parse_when(start_at, "from")
            end = parse_when(end_at, "to")
            if (start.tzinfo is None) != (end.tzinfo is None):
                raise ValidationError("Event dates must both have a timezone or both have none.")
            if end < start:
                raise ValidationError("An event cannot end before it starts.")

        self._kind = kind
        self._description = text
        self._done = bool(done)
        self._due_at = due
        self._start_at = start
        self._end_at = end

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: Any) -> Task:
        return cls(TaskKind.DEADLINE, description, due_at=by)

    @classmethod
    def event(cls, description: str, start: Any, end: Any) -> Task:
        return cls(TaskKind.EVENT, description, start_at=start, end_at=end)

    # ---- accessors ----

    @property
    def kind(self) -> TaskKind:
        return self._kind

    @property
    def description(self) -> str:
        return self._description

    @property
    def done(self) -> bool:
        return self._done

    @property
    def due_at(self) -> datetime | None:
        return self._due_at

    @property
    def start_at(self) -> datetime | None:
        return self._start_at

    @property
    def end_at(self) -> datetime | None:
        return self._end_at

    def get_kind(self) -> TaskKind:
        return self._kind

    def get_description(self) -> str:
        return self._description

    def is_done(self) -> bool:
        return self._done

    def set_done(self, done: bool) -> None:
        self._done = bool(done)

    # ---- display ----

    def format_for_display(self) -> str:
        mark = "X" if self._done else " "
        return f"[{self._kind.letter}][{mark}] {self._description}{self._suffix()}"

    def _suffix(self) -> str:
        if self._kind is TaskKind.DEADLINE and self._due_at is not None:
            return f" (by: {format_when(self._due_at)})"
        if self._kind is TaskKind.EVENT and self._start_at is not None and self._end_at is not None:
            return f" (from: {format_when(self._start_at)} to: {format_when(self._end_at)})"
        return ""

    def __str__(self) -> str:
        return self.format_for_display()

    def __repr__(self) -> str:
        return f"Task(kind={self._kind.value}, description={self._description!r}, done={self._done})"


def create_task(
    kind: TaskKind | str,
    description: str,
    *,
    by: Any = None,
    start: Any = None,
    end: Any = None,
) -> Task:
    """
    Build a task from a parsed creation request.

    Raises ValidationError when the description is empty, the kind is unknown,
    or the kind-specific dates are missing, unparseable or inconsistent.
    """
    return Task(kind, description, due_at=by, start_at=start, end_at=end)
