"""StudyPlan CLI domain models.

Pydantic models for the task entity, plan and operation results, and the
application configuration.
"""

from .config_models import AppConfig
from .plan import DailyPlan, PlanOutcome
from .results import OperationResult, OperationStatus
from .task import Task, TaskCreate, TaskUpdate

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    # Results
    "DailyPlan",
    "PlanOutcome",
    "OperationResult",
    "OperationStatus",
    # Config models
    "AppConfig",
]
