"""In-memory task store backed by a TaskRepository.

The store owns task identity: it hands out ids from a counter that only
moves forward, so a deleted task's id is never given to a later task in the
same process. Every mutation rewrites the repository before returning.
Lookups return copies, never references into the store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from studyplan_cli.models import Task, TaskCreate, TaskUpdate
from studyplan_cli.models.exceptions import (
    MalformedRecordError,
    PersistenceUnavailableError,
)
from studyplan_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskStore:
    """Process-local task collection with write-through persistence."""

    def __init__(self, repository: TaskRepository):
        """Initialize an empty store.

        Args:
            repository: Persistence used by ``load`` and after every mutation
        """
        self.repository = repository
        self._tasks: list[Task] = []
        self.skipped: list[MalformedRecordError] = []
        self.next_id = 1

    def load(self) -> None:
        """Replace the contents with the repository's tasks.

        Ids found on records the repository skipped are reserved too, so a
        new task never takes the id of a line still sitting in the file.
        """
        self._tasks = self.repository.load()
        self.skipped = list(self.repository.skipped_records())
        used_ids = [t.id for t in self._tasks]
        used_ids += [e.task_id for e in self.skipped if e.task_id is not None]
        self.next_id = max(used_ids, default=0) + 1
        logger.info("store loaded: %d task(s), next id %d", len(self._tasks), self.next_id)

    def save(self) -> None:
        """Rewrite the repository with the full store.

        Raises:
            PersistenceUnavailableError: If the repository cannot be written.
                The in-memory contents are kept either way.
        """
        self.repository.save(list(self._tasks))

    def _save_after_change(self, task_id: int) -> None:
        try:
            self.save()
        except PersistenceUnavailableError as e:
            e.task_id = task_id
            raise

    def all(self) -> list[Task]:
        """Snapshot of every task in insertion order."""
        return [t.model_copy() for t in self._tasks]

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def find(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index].model_copy()

    def _append(self, data: TaskCreate) -> int:
        task_id = self.next_id
        self.next_id += 1
        self._tasks.append(Task(id=task_id, **data.model_dump()))
        return task_id

    def add(self, data: TaskCreate) -> int:
        """Append a new incomplete task and return its id."""
        task_id = self._append(data)
        logger.info("added task %d", task_id)
        self._save_after_change(task_id)
        return task_id

    def update(self, task_id: int, changes: TaskUpdate) -> Task | None:
        """Apply the fields set in ``changes``.

        Returns:
            Copy of the updated task, or None if no task has ``task_id``
        """
        index = self._index_of(task_id)
        if index is None:
            return None

        updates = changes.model_dump(exclude_none=True)
        task = self._tasks[index]
        self._tasks[index] = Task.model_validate({**task.model_dump(), **updates})
        logger.info("updated task %d: %s", task_id, ", ".join(sorted(updates)) or "no changes")
        self._save_after_change(task_id)
        return self._tasks[index].model_copy()

    def toggle(self, task_id: int) -> Task | None:
        """Flip the completion flag of a task."""
        task = self.find(task_id)
        if task is None:
            return None
        return self.update(task_id, TaskUpdate(completed=not task.completed))

    def remove(self, task_id: int) -> bool:
        """Delete a task.

        Returns:
            False when no task has ``task_id``; nothing is written in that case
        """
        index = self._index_of(task_id)
        if index is None:
            return False

        del self._tasks[index]
        logger.info("removed task %d", task_id)
        self._save_after_change(task_id)
        return True

    def replace_all(self, tasks: Iterable[TaskCreate]) -> list[int]:
        """Drop every task and add ``tasks`` with fresh ids, saving once."""
        self._tasks = []
        ids = [self._append(data) for data in tasks]
        logger.info("replaced store contents with %d task(s)", len(ids))
        self.save()
        return ids
