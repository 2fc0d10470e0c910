"""Command 'list' of studyplan-cli"""

import typer

from studyplan_cli.services.task_service import get_task_service
from studyplan_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import resolve_output, warn_skipped_records

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    pending: bool = typer.Option(
        False, "--pending", "-p", help="Show only incomplete tasks"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty, table, json, yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List tasks: incomplete first, then by priority and due date."""
    output = resolve_output(output, json_opt)

    task_service = get_task_service()
    warn_skipped_records(task_service)
    tasks = task_service.list_tasks(include_completed=not pending)

    result = {"tasks": [t.model_dump(mode="json") for t in tasks]}
    format_output(result, output)
