# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable
from types import SimpleNamespace

from chatterchicken.cli.bootstrap import create_initial_state
from chatterchicken.connectors.console_connector import run_console_loop

from .fakes import FakeTaskRepo


def _scripted(lines: Iterable[str]):
    it = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_runs_commands_saves_and_says_bye(settings: SimpleNamespace) -> None:
    repo = FakeTaskRepo()
    state = create_initial_state(settings=settings, task_repo=repo)
    out: list[str] = []

    run_console_loop(
        state,
        read_line=_scripted(["todo buy milk", "", "list", "mark 1", "bye", "todo never read"]),
        write=out.append,
    )

    assert out[0].startswith("Hello! I'm TestChicken.")
    assert out[-1] == "Bye. Hope to see you again soon!"
    assert "1.[T][ ] buy milk" in out[2]
    assert [t.format_for_display() for t in repo.saved] == ["[T][X] buy milk"]
    # add + mark; list/bye change nothing
    assert repo.save_calls == 2
    assert state.task_list.size() == 1


def test_console_stops_on_eof_and_reports_errors(settings: SimpleNamespace) -> None:
    repo = FakeTaskRepo()
    state = create_initial_state(settings=settings, task_repo=repo)
    out: list[str] = []

    run_console_loop(state, read_line=_scripted(["delete 3", "frobnicate"]), write=out.append)

    assert out[1].startswith("OOPS!!!")
    assert out[2].startswith("Unknown command: frobnicate")
    assert repo.save_calls == 0


def test_console_survives_a_crashing_handler(settings: SimpleNamespace, monkeypatch) -> None:
    from chatterchicken.cli import commands

    def boom(state, args):
        raise RuntimeError("bug")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)

    state = create_initial_state(settings=settings, task_repo=FakeTaskRepo())
    out: list[str] = []
    run_console_loop(state, read_line=_scripted(["list", "todo still works"]), write=out.append)

    assert out[1] == "Internal error while handling a command."
    assert state.task_list.size() == 1
