"""Outcome of a task service operation."""

from enum import Enum

from pydantic import BaseModel

from .task import Task


class OperationStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    PERSISTENCE_UNAVAILABLE = "persistence_unavailable"


class OperationResult(BaseModel):
    """Discriminated result returned across the service boundary.

    ``persistence_unavailable`` means the change was applied in memory but
    the task file could not be rewritten.
    """

    status: OperationStatus
    task_id: int | None = None
    task: Task | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK
