"""Command 'plan' of studyplan-cli"""

import typer

from studyplan_cli.services.config_service import get_config_service
from studyplan_cli.services.task_service import get_task_service
from studyplan_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import resolve_output, warn_skipped_records

app = typer.Typer()


@app.command("plan")
@command_wrapper
def plan_day(
    minutes: int | None = typer.Option(
        None, "--minutes", "-m", help="Available study time today, in minutes"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty, table, json, yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """Suggest which tasks fit into today's study time.

    Tasks are taken by priority, then due date, then duration; any task
    that does not fit the time still left is skipped.
    """
    output = resolve_output(output, json_opt)

    if minutes is None:
        minutes = get_config_service().config.planner.default_minutes
    if minutes is None:
        minutes = typer.prompt("Available study time today (minutes)", type=int)

    task_service = get_task_service()
    warn_skipped_records(task_service)
    plan = task_service.generate_plan(minutes)

    format_output({"plan": plan.model_dump(mode="json")}, output)
