"""Services module for StudyPlan CLI - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .planner import generate_daily_plan
from .task_service import TaskService, get_task_service
from .task_store import TaskStore

__all__ = [
    "TaskService",
    "TaskStore",
    "ConfigService",
    "generate_daily_plan",
    "get_config_service",
    "get_task_service",
]
