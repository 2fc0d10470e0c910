"""Command 'add' of studyplan-cli"""

import typer

from studyplan_cli.services.task_service import get_task_service

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


@app.command("add")
@command_wrapper
def add_task(
    title: str = typer.Option(
        "", "--title", "-t", prompt="Title", show_default=False, help="Task title"
    ),
    subject: str = typer.Option(
        "",
        "--subject",
        "-s",
        prompt="Subject",
        show_default=False,
        help="Course or subject",
    ),
    duration: int = typer.Option(
        ...,
        "--duration",
        "-d",
        prompt="Estimated duration (minutes)",
        help="Estimated duration in minutes",
    ),
    priority: int = typer.Option(
        ..., "--priority", "-p", prompt="Priority (1 = highest)", help="Priority, 1 is highest"
    ),
    due: str = typer.Option(
        "",
        "--due",
        prompt="Due date (YYYY-MM-DD) or blank",
        show_default=False,
        help="Due date (YYYY-MM-DD)",
    ),
) -> None:
    """Add a study task. Prompts for any value not given as an option."""
    task_service = get_task_service()
    warn_skipped_records(task_service)
    result = task_service.add_task(
        title,
        subject=subject,
        duration_minutes=duration,
        priority=priority,
        due_date=due.strip(),
    )
    report_result(result)
