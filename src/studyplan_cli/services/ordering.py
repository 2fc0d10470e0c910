"""Task ordering used for listing and for plan candidate selection.

Due dates compare as plain strings, so an empty due date sorts before any
``YYYY-MM-DD`` value. Sorting is stable: tasks equal on every key keep their
store order.
"""

from __future__ import annotations

from collections.abc import Iterable

from studyplan_cli.models import Task


def display_key(task: Task) -> tuple[bool, int, str]:
    """Incomplete first, then ascending priority, then ascending due date."""
    return (task.completed, task.priority, task.due_date)


def plan_candidate_key(task: Task) -> tuple[int, str, int]:
    """Ascending priority, then due date, then duration."""
    return (task.priority, task.due_date, task.duration_minutes)


def sort_for_display(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=display_key)


def sort_plan_candidates(tasks: Iterable[Task]) -> list[Task]:
    """Order incomplete tasks for the planner; completed ones are dropped."""
    return sorted((t for t in tasks if not t.completed), key=plan_candidate_key)
