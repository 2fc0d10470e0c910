"""Command 'edit' of studyplan-cli - edit a task interactively or via flags."""

from __future__ import annotations

import typer

from studyplan_cli.models.exceptions import TaskNotFoundError
from studyplan_cli.services.task_service import get_task_service
from studyplan_cli.utils.exit_codes import ERROR_INVALID_ARGS
from studyplan_cli.utils.ui.formatters import format_error

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


def _prompt_changes(task) -> dict:
    """Ask for each field, showing the current value; blank keeps it."""

    def ask(label: str, current) -> str:
        return typer.prompt(f"{label} ({current})", default="", show_default=False)

    changes: dict = {}
    if value := ask("Title", task.title):
        changes["title"] = value
    if value := ask("Subject", task.subject):
        changes["subject"] = value
    if value := ask("Estimated duration (minutes)", task.duration_minutes):
        changes["duration_minutes"] = int(value)
    if value := ask("Priority", task.priority):
        changes["priority"] = int(value)
    if value := ask("Due date", task.due_date):
        changes["due_date"] = value
    return changes


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    subject: str | None = typer.Option(None, "--subject", "-s", help="New subject"),
    duration: int | None = typer.Option(
        None, "--duration", "-d", help="New duration in minutes"
    ),
    priority: int | None = typer.Option(None, "--priority", "-p", help="New priority"),
    due: str | None = typer.Option(None, "--due", help="New due date (YYYY-MM-DD)"),
) -> None:
    """Edit a task. Without options, prompts for each field."""
    task_service = get_task_service()
    warn_skipped_records(task_service)

    changes = {
        "title": title,
        "subject": subject,
        "duration_minutes": duration,
        "priority": priority,
        "due_date": due,
    }
    if all(value is None for value in changes.values()):
        current = task_service.get_task(task_id)
        if current.task is None:
            raise TaskNotFoundError(task_id)
        try:
            changes = _prompt_changes(current.task)
        except ValueError as e:
            format_error("Duration and priority must be whole numbers")
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

    report_result(task_service.edit_task(task_id, **changes))
