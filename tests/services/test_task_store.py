"""Unit tests for TaskStore."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from studyplan_cli.models import TaskCreate, TaskUpdate
from studyplan_cli.models.exceptions import (
    MalformedRecordError,
    PersistenceUnavailableError,
)
from studyplan_cli.services.task_store import TaskStore


@pytest.fixture()
def repo():
    repository = MagicMock()
    repository.load.return_value = []
    repository.skipped_records.return_value = []
    return repository


@pytest.fixture()
def store(repo):
    store = TaskStore(repo)
    store.load()
    return store


def _create(title="Read", duration=30, priority=1) -> TaskCreate:
    return TaskCreate(title=title, duration_minutes=duration, priority=priority)


def test_empty_store_starts_at_id_one(store):
    assert store.next_id == 1
    assert store.all() == []


def test_load_sets_next_id_after_max(repo, make_task):
    repo.load.return_value = [make_task(2), make_task(7), make_task(4)]
    store = TaskStore(repo)
    store.load()
    assert store.next_id == 8


def test_add_assigns_increasing_ids_and_saves(store, repo):
    assert store.add(_create("A")) == 1
    assert store.add(_create("B")) == 2
    assert repo.save.call_count == 2
    saved = repo.save.call_args.args[0]
    assert [t.title for t in saved] == ["A", "B"]


def test_new_task_starts_incomplete(store):
    task_id = store.add(_create())
    assert store.find(task_id).completed is False


def test_ids_never_reused_after_delete(store):
    store.add(_create("A"))
    second = store.add(_create("B"))
    store.remove(second)
    assert store.add(_create("C")) == 3


def test_find_returns_copy(store):
    task_id = store.add(_create("Original"))
    copy = store.find(task_id)
    copy.title = "Changed"
    assert store.find(task_id).title == "Original"


def test_find_missing_returns_none(store):
    assert store.find(99) is None


def test_update_changes_only_given_fields(store):
    task_id = store.add(TaskCreate(title="A", subject="OS", duration_minutes=30, priority=2))
    task = store.update(task_id, TaskUpdate(priority=1))
    assert task.priority == 1
    assert task.subject == "OS"
    assert task.duration_minutes == 30


def test_update_missing_returns_none(store, repo):
    assert store.update(5, TaskUpdate(title="x")) is None
    repo.save.assert_not_called()


def test_toggle_twice_restores_task(store):
    task_id = store.add(
        TaskCreate(title="Read", subject="OS", duration_minutes=45, priority=2, due_date="2025-11-19")
    )
    original = store.find(task_id)

    toggled = store.toggle(task_id)
    assert toggled.completed is True
    assert toggled.model_dump(exclude={"completed"}) == original.model_dump(exclude={"completed"})

    assert store.toggle(task_id) == original


def test_remove_missing_does_not_write(store, repo):
    store.add(_create())
    repo.save.reset_mock()

    assert store.remove(42) is False
    repo.save.assert_not_called()
    assert len(store.all()) == 1


def test_replace_all_keeps_counter_and_saves_once(store, repo):
    store.add(_create("A"))
    store.add(_create("B"))
    repo.save.reset_mock()

    ids = store.replace_all([_create("X"), _create("Y")])

    assert ids == [3, 4]
    assert [t.title for t in store.all()] == ["X", "Y"]
    repo.save.assert_called_once()


def test_failed_save_keeps_change_and_reports_task_id(store, repo):
    repo.save.side_effect = PersistenceUnavailableError("/tmp/tasks.db", "read-only")

    with pytest.raises(PersistenceUnavailableError) as exc_info:
        store.add(_create("Kept"))

    assert exc_info.value.task_id == 1
    assert store.find(1).title == "Kept"


def test_store_round_trips_through_file(tmp_path):
    from studyplan_cli.adapters.flatfile import FlatFileTaskRepository

    path = tmp_path / "tasks.db"
    store = TaskStore(FlatFileTaskRepository(path))
    store.load()
    store.add(_create("A"))
    store.add(_create("B"))
    store.remove(1)

    reloaded = TaskStore(FlatFileTaskRepository(path))
    reloaded.load()
    assert [t.id for t in reloaded.all()] == [2]
    assert reloaded.next_id == 3


def test_load_reserves_ids_of_skipped_records(repo, make_task):
    repo.load.return_value = [make_task(1)]
    repo.skipped_records.return_value = [
        MalformedRecordError(2, "5|b|s|6O|1||0", "bad duration", task_id=5),
        MalformedRecordError(3, "zz", "bad id"),
    ]
    store = TaskStore(repo)
    store.load()

    assert store.next_id == 6
    assert len(store.skipped) == 2
    assert store.add(_create()) == 6
