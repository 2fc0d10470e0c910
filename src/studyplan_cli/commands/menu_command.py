"""Command 'menu' of studyplan-cli - the numbered interactive menu."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from studyplan_cli.models import OperationResult
from studyplan_cli.services.task_service import TaskService, get_task_service
from studyplan_cli.utils.ui.console import get_console
from studyplan_cli.utils.ui.formatters import plan_summary, task_line

from .decorators import _validation_message, command_wrapper
from .edit_command import _prompt_changes
from .utils import warn_skipped_records

app = typer.Typer()

MENU = """
Study Planner Menu
1. List tasks (all)
2. List incomplete tasks only
3. Add task
4. Edit task
5. Delete task
6. Toggle complete/incomplete
7. Generate daily plan
8. Import sample data
9. Save tasks
0. Exit"""


def _say(message: str) -> None:
    get_console(highlight=False).print(message, markup=False, soft_wrap=True)


def _report(result: OperationResult) -> None:
    _say(result.message)


def _ask_int(label: str) -> int | None:
    value = typer.prompt(label, default="", show_default=False)
    try:
        return int(value)
    except ValueError:
        _say("Please enter a whole number.")
        return None


def _list(service: TaskService, include_completed: bool) -> None:
    tasks = service.list_tasks()
    if not tasks:
        _say("No tasks yet.")
        return
    for task in tasks:
        if task.completed and not include_completed:
            continue
        _say(task_line(task.model_dump(mode="json")))


def _add(service: TaskService) -> None:
    title = typer.prompt("Title", default="", show_default=False)
    subject = typer.prompt("Subject", default="", show_default=False)
    duration = _ask_int("Estimated duration (minutes)")
    if duration is None:
        return
    priority = _ask_int("Priority (1 = highest)")
    if priority is None:
        return
    due = typer.prompt("Due date (YYYY-MM-DD) or blank", default="", show_default=False)
    _report(
        service.add_task(
            title,
            subject=subject,
            duration_minutes=duration,
            priority=priority,
            due_date=due,
        )
    )


def _edit(service: TaskService) -> None:
    task_id = _ask_int("Enter task ID to edit")
    if task_id is None:
        return
    current = service.get_task(task_id)
    if current.task is None:
        _report(current)
        return

    try:
        changes = _prompt_changes(current.task)
    except ValueError:
        _say("Please enter a whole number.")
        return
    _report(service.edit_task(task_id, **changes))


def _delete(service: TaskService) -> None:
    task_id = _ask_int("Enter task ID to delete")
    if task_id is not None:
        _report(service.delete_task(task_id))


def _toggle(service: TaskService) -> None:
    task_id = _ask_int("Enter task ID to toggle complete")
    if task_id is not None:
        _report(service.toggle_task(task_id))


def _plan(service: TaskService) -> None:
    minutes = _ask_int("Enter available study time today (minutes)")
    if minutes is None:
        return
    plan = service.generate_plan(minutes).model_dump(mode="json")
    if plan["outcome"] == "no_tasks":
        _say(plan_summary(plan))
        return
    _say("\n--- Suggested Plan for Today ---")
    if plan["outcome"] == "planned":
        for task in plan["tasks"]:
            _say(task_line(task))
    _say(plan_summary(plan))
    _say("--------------------------------")


@app.command("menu")
@command_wrapper
def menu() -> None:
    """Run the interactive numbered menu until 0 is chosen."""
    task_service = get_task_service()
    warn_skipped_records(task_service)

    actions = {
        1: lambda: _list(task_service, True),
        2: lambda: _list(task_service, False),
        3: lambda: _add(task_service),
        4: lambda: _edit(task_service),
        5: lambda: _delete(task_service),
        6: lambda: _toggle(task_service),
        7: lambda: _plan(task_service),
        8: lambda: _report(task_service.import_sample_data()),
        9: lambda: _report(task_service.save()),
    }

    while True:
        _say(MENU)
        choice = typer.prompt("Choose", default="", show_default=False)
        try:
            number = int(choice)
        except ValueError:
            continue

        if number == 0:
            result = task_service.save()
            if not result.ok:
                _report(result)
            _say("Goodbye!")
            return

        action = actions.get(number)
        if action is None:
            _say("Unknown choice.")
            continue
        try:
            action()
        except ValidationError as e:
            _say(f"Invalid input: {_validation_message(e)}")
