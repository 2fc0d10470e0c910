"""Command 'save' of studyplan-cli"""

import typer

from studyplan_cli.services.task_service import get_task_service

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


@app.command("save")
@command_wrapper
def save_tasks() -> None:
    """Rewrite the task file from the loaded tasks."""
    task_service = get_task_service()
    warn_skipped_records(task_service)
    report_result(task_service.save())
