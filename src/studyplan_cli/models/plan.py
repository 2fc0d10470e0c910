"""Daily plan result model."""

from enum import Enum

from pydantic import BaseModel, Field

from .task import Task


class PlanOutcome(str, Enum):
    """How a plan request turned out."""

    PLANNED = "planned"
    NO_TASKS = "no_tasks"
    NOTHING_FITS = "nothing_fits"


class DailyPlan(BaseModel):
    """Suggested plan for a time budget.

    Attributes:
        outcome: Whether tasks were planned, none were pending, or none fit
        tasks: Selected tasks in the order they were considered
        total_minutes: Sum of the selected durations
        time_left: Minutes of the budget left unused
        available_minutes: Budget the plan was requested for
    """

    outcome: PlanOutcome
    tasks: list[Task] = Field(default_factory=list)
    total_minutes: int = 0
    time_left: int = 0
    available_minutes: int = 0
