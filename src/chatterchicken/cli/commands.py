# src/chatterchicken/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_errors import TaskError, ValidationError
from ..tasks.task_list import parse_index
from ..tasks.task_models import Task
from . import replies

CommandHandler = Callable[[AppState, list[str]], str]

EXIT_COMMANDS = frozenset({"bye", "exit", "quit"})

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Command:
    """A parsed input line: the action word (lower-cased) and the remaining tokens."""

    action: str
    args: list[str]


def parse_command(line: str) -> Command | None:
    """
    Split "deadline report /by 2019-12-01" into Command("deadline", [...]).

    A leading "/" is optional ("/list" == "list"). Returns None for blank input.
    """
    text = (line or "").strip()
    if text.startswith("/"):
        text = text[1:]
    parts = text.split()
    if not parts:
        return None
    return Command(action=parts[0].lower(), args=parts[1:])


def split_options(args: list[str], keys: tuple[str, ...]) -> tuple[str, dict[str, str]]:
    """
    Pull "/key value..." sections out of an argument list.

    Returns the leading text and a {key: value} dict. Tokens that are not one
    of `keys` stay part of whichever section they appear in.
    """
    head: list[str] = []
    sections: dict[str, list[str]] = {}
    current = head
    for token in args:
        key = token[1:].lower() if token.startswith("/") else None
        if key in keys:
            if key in sections:
                raise ValidationError(f"/{key} was given more than once.")
            current = sections[key] = []
            continue
        current.append(token)
    return " ".join(head), {k: " ".join(v) for k, v in sections.items()}


class CommandRegistry:
    """Command registry used by the console (todo, list, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "mark 2".
        Returns a reply string or None for blank input.

        Task errors (bad numbers, empty descriptions, unparseable dates) become
        a reply; anything else propagates to the connector.
        """
        cmd = parse_command(line)
        if cmd is None:
            return None

        handler = self._handlers.get(cmd.action)
        if not handler:
            return f"Unknown command: {cmd.action}. Use help to list available commands."

        try:
            return handler(state, cmd.args)
        except TaskError as e:
            logger.info("Command %s rejected: %s", cmd.action, e)
            return replies.error(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _single_index(args: list[str], usage: str) -> int:
    if len(args) != 1:
        raise ValidationError(f"Usage: {usage}")
    return parse_index(args[0])


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_todo(state: AppState, args: list[str]) -> str:
    task = Task.todo(" ".join(args))
    outcome = state.task_list.add_task(task)
    state.dirty = True
    return replies.added(outcome)


def cmd_deadline(state: AppState, args: list[str]) -> str:
    """deadline <description> /by <YYYY-MM-DD [HH:MM]>"""
    description, opts = split_options(args, ("by",))
    task = Task.deadline(description, opts.get("by"))
    outcome = state.task_list.add_task(task)
    state.dirty = True
    return replies.added(outcome)


def cmd_event(state: AppState, args: list[str]) -> str:
    """event <description> /from <date> /to <date>"""
    description, opts = split_options(args, ("from", "to"))
    task = Task.event(description, opts.get("from"), opts.get("to"))
    outcome = state.task_list.add_task(task)
    state.dirty = True
    return replies.added(outcome)


def cmd_list(state: AppState, args: list[str]) -> str:
    return replies.all_tasks(state.task_list)


def cmd_mark(state: AppState, args: list[str]) -> str:
    task = state.task_list.mark_task(_single_index(args, "mark <task number>"))
    state.dirty = True
    return replies.marked(task)


def cmd_unmark(state: AppState, args: list[str]) -> str:
    task = state.task_list.unmark_task(_single_index(args, "unmark <task number>"))
    state.dirty = True
    return replies.unmarked(task)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task = state.task_list.delete_task(_single_index(args, "delete <task number>"))
    state.dirty = True
    return replies.deleted(task, len(state.task_list))


def cmd_find(state: AppState, args: list[str]) -> str:
    keyword = " ".join(args)
    return replies.matches(state.task_list.find(keyword), keyword)


def cmd_done(state: AppState, args: list[str]) -> str:
    return replies.listing(
        state.task_list.get_completed_tasks(),
        "Here are your completed tasks:",
        "You have not completed any tasks yet.",
    )


def cmd_pending(state: AppState, args: list[str]) -> str:
    return replies.listing(
        state.task_list.get_uncompleted_tasks(),
        "Here are the tasks still to do:",
        "Everything is done!",
    )


def cmd_todos(state: AppState, args: list[str]) -> str:
    return replies.listing(state.task_list.get_todos(), "Here are your todos:", "You have no todos.")


def cmd_deadlines(state: AppState, args: list[str]) -> str:
    return replies.listing(
        state.task_list.get_deadlines(), "Here are your deadlines:", "You have no deadlines."
    )


def cmd_events(state: AppState, args: list[str]) -> str:
    return replies.listing(state.task_list.get_events(), "Here are your events:", "You have no events.")


def cmd_progress(state: AppState, args: list[str]) -> str:
    return replies.progress(state.task_list)


def cmd_bye(state: AppState, args: list[str]) -> str:
    return "Bye. Hope to see you again soon!"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <YYYY-MM-DD [HH:MM]>."
)
registry.register(
    "event", cmd_event, help_text="Add an event: event <description> /from <date> /to <date>."
)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <task number>.")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark <task number>.")
registry.register(
    "delete", cmd_delete, help_text="Remove a task: delete <task number>.", aliases=["rm"]
)
registry.register("find", cmd_find, help_text="Search descriptions (case-sensitive): find <keyword>.")
registry.register("done", cmd_done, help_text="Show completed tasks.")
registry.register("pending", cmd_pending, help_text="Show tasks not done yet.")
registry.register("todos", cmd_todos, help_text="Show todos only.")
registry.register("deadlines", cmd_deadlines, help_text="Show deadlines only.")
registry.register("events", cmd_events, help_text="Show events only.")
registry.register("progress", cmd_progress, help_text="Show how much of the list is done.")
registry.register("bye", cmd_bye, help_text="Save and leave.", aliases=["exit", "quit"])
