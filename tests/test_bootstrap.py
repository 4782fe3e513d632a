# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from chatterchicken.cli.bootstrap import create_initial_state, load_task_list, save_task_list
from chatterchicken.tasks.task_list import TaskList
from chatterchicken.tasks.task_models import Task
from chatterchicken.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def test_state_loads_saved_tasks(settings: SimpleNamespace) -> None:
    TaskStore(settings.tasks_db_path).save_tasks(TaskList([Task.todo("from last time")]))

    state = create_initial_state(settings=settings)
    assert isinstance(state.task_repo, TaskStore)
    assert [t.description for t in state.task_list] == ["from last time"]
    assert not state.dirty


def test_save_only_when_dirty(settings: SimpleNamespace) -> None:
    repo = FakeTaskRepo()
    state = create_initial_state(settings=settings, task_repo=repo)

    assert save_task_list(state) is False
    assert repo.save_calls == 0

    state.task_list.add_task(Task.todo("new"))
    state.dirty = True
    assert save_task_list(state) is True
    assert [t.description for t in repo.saved] == ["new"]
    assert not state.dirty


def test_failed_save_keeps_list_dirty(settings: SimpleNamespace) -> None:
    repo = FakeTaskRepo(fail_saves=True)
    state = create_initial_state(settings=settings, task_repo=repo)
    state.task_list.add_task(Task.todo("unsaved"))
    state.dirty = True

    assert save_task_list(state) is False
    assert state.dirty

    repo.fail_saves = False
    assert save_task_list(state) is True
    assert repo.save_calls == 2


def test_persistence_switched_off(settings: SimpleNamespace) -> None:
    settings.save_tasks = False
    state = create_initial_state(settings=settings)

    assert state.task_repo is None
    assert state.task_list.size() == 0
    assert not settings.tasks_db_path.exists()

    state.task_list.add_task(Task.todo("ephemeral"))
    state.dirty = True
    assert save_task_list(state) is False
    assert load_task_list(state).size() == 0
