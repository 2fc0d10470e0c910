"""Task service - Business logic for task operations.

This service layer sits between commands and the task store. Each operation
takes the current store plus user-supplied arguments, applies the change,
and returns a value describing the outcome. Missing tasks and failed saves
come back as ``OperationResult`` statuses rather than exceptions.
"""

from __future__ import annotations

import logging

from studyplan_cli.adapters.flatfile import FlatFileTaskRepository
from studyplan_cli.models import (
    DailyPlan,
    OperationResult,
    OperationStatus,
    Task,
    TaskCreate,
    TaskUpdate,
)
from studyplan_cli.models.exceptions import (
    MalformedRecordError,
    PersistenceUnavailableError,
)
from studyplan_cli.services.ordering import sort_for_display
from studyplan_cli.services.planner import generate_daily_plan
from studyplan_cli.services.sample_data import SAMPLE_TASKS
from studyplan_cli.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def _not_found(task_id: int) -> OperationResult:
    return OperationResult(
        status=OperationStatus.NOT_FOUND,
        task_id=task_id,
        message=f"Task {task_id} not found.",
    )


def _unsaved(
    error: PersistenceUnavailableError, task: Task | None = None
) -> OperationResult:
    return OperationResult(
        status=OperationStatus.PERSISTENCE_UNAVAILABLE,
        task_id=error.task_id,
        task=task,
        message=f"{error}. Changes are kept for this session only.",
    )


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task
    operations using the task store.
    """

    def __init__(self, store: TaskStore):
        """Initialize the task service.

        Args:
            store: Loaded TaskStore that owns the tasks
        """
        self.store = store

    def skipped_records(self) -> list[MalformedRecordError]:
        """Bad lines left out of the store on load; they stay in the file."""
        return list(self.store.skipped)

    def list_tasks(self, *, include_completed: bool = True) -> list[Task]:
        """List tasks in display order.

        Args:
            include_completed: Keep completed tasks in the result

        Returns:
            Incomplete tasks first, then by priority and due date
        """
        tasks = sort_for_display(self.store.all())
        if not include_completed:
            tasks = [t for t in tasks if not t.completed]
        return tasks

    def get_task(self, task_id: int) -> OperationResult:
        task = self.store.find(task_id)
        if task is None:
            return _not_found(task_id)
        return OperationResult(status=OperationStatus.OK, task_id=task_id, task=task)

    def add_task(
        self,
        title: str,
        *,
        subject: str = "",
        duration_minutes: int,
        priority: int,
        due_date: str = "",
    ) -> OperationResult:
        """Create a new task.

        Args:
            title: Task description
            subject: Course or subject
            duration_minutes: Estimated effort in minutes
            priority: Priority level (1=highest)
            due_date: YYYY-MM-DD or empty

        Returns:
            Result carrying the new id and task

        Raises:
            pydantic.ValidationError: If a field is out of range or a text
                field contains the record delimiter
        """
        data = TaskCreate(
            title=title,
            subject=subject,
            duration_minutes=duration_minutes,
            priority=priority,
            due_date=due_date,
        )
        try:
            task_id = self.store.add(data)
        except PersistenceUnavailableError as e:
            return _unsaved(e, self.store.find(e.task_id))

        return OperationResult(
            status=OperationStatus.OK,
            task_id=task_id,
            task=self.store.find(task_id),
            message=f"Added task with ID {task_id}.",
        )

    def edit_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        subject: str | None = None,
        duration_minutes: int | None = None,
        priority: int | None = None,
        due_date: str | None = None,
    ) -> OperationResult:
        """Update an existing task; ``None`` leaves a field unchanged."""
        changes = TaskUpdate(
            title=title,
            subject=subject,
            duration_minutes=duration_minutes,
            priority=priority,
            due_date=due_date,
        )
        try:
            task = self.store.update(task_id, changes)
        except PersistenceUnavailableError as e:
            return _unsaved(e, self.store.find(task_id))

        if task is None:
            return _not_found(task_id)
        return OperationResult(
            status=OperationStatus.OK, task_id=task_id, task=task, message="Task updated."
        )

    def delete_task(self, task_id: int) -> OperationResult:
        """Delete a task. A missing id leaves the store and file untouched."""
        try:
            removed = self.store.remove(task_id)
        except PersistenceUnavailableError as e:
            return _unsaved(e)

        if not removed:
            return _not_found(task_id)
        return OperationResult(
            status=OperationStatus.OK, task_id=task_id, message="Task deleted."
        )

    def toggle_task(self, task_id: int) -> OperationResult:
        """Flip a task between complete and incomplete."""
        try:
            task = self.store.toggle(task_id)
        except PersistenceUnavailableError as e:
            return _unsaved(e, self.store.find(task_id))

        if task is None:
            return _not_found(task_id)
        state = "complete" if task.completed else "incomplete"
        return OperationResult(
            status=OperationStatus.OK,
            task_id=task_id,
            task=task,
            message=f"Task marked {state}.",
        )

    def generate_plan(self, available_minutes: int) -> DailyPlan:
        """Suggest tasks for ``available_minutes`` of study time."""
        return generate_daily_plan(self.store.all(), available_minutes)

    def import_sample_data(self) -> OperationResult:
        """Replace every task with the built-in sample set."""
        try:
            self.store.replace_all(SAMPLE_TASKS)
        except PersistenceUnavailableError as e:
            return _unsaved(e)
        return OperationResult(
            status=OperationStatus.OK, message="Sample data imported."
        )

    def save(self) -> OperationResult:
        """Force a full rewrite of the task file."""
        try:
            self.store.save()
        except PersistenceUnavailableError as e:
            return _unsaved(e)
        return OperationResult(status=OperationStatus.OK, message="Saved.")


def get_task_service() -> TaskService:
    """Build a TaskService over the configured task file and load it.

    Raises:
        MalformedRecordError: If ``storage.strict_load`` is set and the task
            file contains a bad record
    """
    from studyplan_cli.services.config_service import get_config_service

    config_service = get_config_service()
    repository = FlatFileTaskRepository(
        config_service.task_file_path,
        strict=config_service.config.storage.strict_load,
    )
    store = TaskStore(repository)
    store.load()
    return TaskService(store)
