"""Command 'delete' of studyplan-cli"""

import typer

from studyplan_cli.models.exceptions import TaskNotFoundError
from studyplan_cli.services.task_service import get_task_service
from studyplan_cli.utils.ui.formatters import format_info

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    task_service = get_task_service()
    warn_skipped_records(task_service)

    current = task_service.get_task(task_id)
    if current.task is None:
        raise TaskNotFoundError(task_id)

    if not force:
        confirm = typer.confirm(f"Delete task '{current.task.title}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    report_result(task_service.delete_task(task_id))
