"""Command 'import-sample' of studyplan-cli"""

import typer

from studyplan_cli.services.task_service import get_task_service
from studyplan_cli.utils.ui.formatters import format_info

from .decorators import command_wrapper
from .utils import report_result, warn_skipped_records

app = typer.Typer()


@app.command("import-sample")
@command_wrapper
def import_sample(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Replace all tasks with a small sample data set."""
    task_service = get_task_service()
    warn_skipped_records(task_service)

    existing = task_service.list_tasks()
    if existing and not yes:
        confirm = typer.confirm(f"Replace all {len(existing)} existing task(s)?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    report_result(task_service.import_sample_data())
