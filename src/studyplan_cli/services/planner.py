"""Daily plan generator.

Picks tasks for a time budget with a single greedy pass over the plan
candidate order. A task that does not fit the remaining time is skipped for
good, even if dropping an earlier pick would have made room. The result is
deterministic but not optimal in total minutes or task count.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from studyplan_cli.models import DailyPlan, PlanOutcome, Task
from studyplan_cli.services.ordering import sort_plan_candidates

logger = logging.getLogger(__name__)


def generate_daily_plan(tasks: Iterable[Task], available_minutes: int) -> DailyPlan:
    """Suggest which incomplete tasks to work on within ``available_minutes``.

    Args:
        tasks: All tasks; completed ones are ignored
        available_minutes: Time budget. A negative budget counts as zero.

    Returns:
        DailyPlan with the selected tasks in candidate order. ``outcome`` is
        ``NO_TASKS`` when nothing is pending and ``NOTHING_FITS`` when
        pending tasks exist but none was selected.
    """
    candidates = sort_plan_candidates(tasks)
    if not candidates:
        logger.info("plan requested for %d minute(s): no incomplete tasks", available_minutes)
        return DailyPlan(
            outcome=PlanOutcome.NO_TASKS,
            time_left=max(available_minutes, 0),
            available_minutes=available_minutes,
        )

    time_left = max(available_minutes, 0)
    selected: list[Task] = []
    for task in candidates:
        if task.duration_minutes <= time_left:
            selected.append(task)
            time_left -= task.duration_minutes

    total = sum(t.duration_minutes for t in selected)
    outcome = PlanOutcome.PLANNED if selected else PlanOutcome.NOTHING_FITS
    logger.info(
        "plan for %d minute(s): %s, %d of %d task(s), %d minute(s) left",
        available_minutes,
        outcome.value,
        len(selected),
        len(candidates),
        time_left,
    )
    return DailyPlan(
        outcome=outcome,
        tasks=selected,
        total_minutes=total,
        time_left=time_left,
        available_minutes=available_minutes,
    )
