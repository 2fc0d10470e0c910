"""Custom exceptions for StudyPlan CLI."""

from studyplan_cli.utils.exit_codes import (
    ERROR_DATA,
    ERROR_GENERAL,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)


class StudyPlanError(Exception):
    """Base exception for all StudyPlan errors."""

    exit_code = ERROR_GENERAL


class TaskNotFoundError(StudyPlanError):
    """Raised when a command references a task id absent from the store."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class MalformedRecordError(StudyPlanError):
    """Raised when a line of the task file cannot be parsed into a task.

    ``task_id`` is the leading id field when it still parses as an integer.
    """

    exit_code = ERROR_DATA

    def __init__(
        self, line_number: int, line: str, reason: str, task_id: int | None = None
    ):
        super().__init__(f"Malformed record on line {line_number}: {reason}")
        self.line_number = line_number
        self.line = line
        self.reason = reason
        self.task_id = task_id


class PersistenceUnavailableError(StudyPlanError):
    """Raised when the task file cannot be opened for writing.

    ``task_id`` is set by the store when the failed save followed a change
    to a single task, so callers can still report which task was changed.
    """

    exit_code = ERROR_STORAGE

    def __init__(self, path: str, reason: str, task_id: int | None = None):
        super().__init__(f"Could not save tasks to {path}: {reason}")
        self.path = path
        self.reason = reason
        self.task_id = task_id
