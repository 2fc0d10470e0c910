"""Repository abstraction layer for StudyPlan CLI.

The task store talks to persistence only through this port, so the file
format can change without touching the store or the planner.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from studyplan_cli.models import Task
from studyplan_cli.models.exceptions import MalformedRecordError


class TaskRepository(ABC):
    """Abstract base class for task persistence.

    Persistence is all-or-nothing: ``load`` returns every stored task and
    ``save`` rewrites the whole collection.
    """

    @abstractmethod
    def load(self) -> list[Task]:
        """Load every persisted task.

        Returns:
            Tasks in stored order; an empty list when nothing was saved yet

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            MalformedRecordError: If a record cannot be parsed (strict mode)
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the persisted collection with ``tasks``.

        Args:
            tasks: Full task collection, in store order

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            PersistenceUnavailableError: If the backing store cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")

    def skipped_records(self) -> list[MalformedRecordError]:
        """Records the last ``load`` could not parse and left out.

        Adapters that skip bad records must keep them on disk across
        ``save`` and report them here.
        """
        return []
