"""Command 'toggle' of studyplan-cli"""

import typer

from studyplan_cli.services.task_service import get_task_service

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


@app.command("toggle")
@command_wrapper
def toggle_task(
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task complete, or incomplete again."""
    task_service = get_task_service()
    warn_skipped_records(task_service)
    report_result(task_service.toggle_task(task_id))
