"""Helpers shared by task commands."""

import typer

from studyplan_cli.models import OperationResult, OperationStatus
from studyplan_cli.models.exceptions import TaskNotFoundError
from studyplan_cli.services.task_service import TaskService
from studyplan_cli.utils.exit_codes import ERROR_STORAGE
from studyplan_cli.utils.ui.console import get_console
from studyplan_cli.utils.ui.formatters import format_success, format_warning


def report_result(result: OperationResult) -> None:
    """Print the outcome of a service operation.

    Raises:
        TaskNotFoundError: If the operation referenced a missing task
        typer.Exit: With ``ERROR_STORAGE`` if the change could not be saved
    """
    if result.status is OperationStatus.NOT_FOUND:
        raise TaskNotFoundError(result.task_id)
    if result.status is OperationStatus.PERSISTENCE_UNAVAILABLE:
        format_warning(result.message)
        raise typer.Exit(code=ERROR_STORAGE)
    format_success(result.message)


def resolve_output(output: str | None, json_opt: bool = False) -> str:
    """Pick the output format from flags, falling back to the configured one."""
    if json_opt:
        return "json"
    if output:
        return output
    from studyplan_cli.services.config_service import get_config_service

    return get_config_service().config.output.format


def warn_skipped_records(task_service: TaskService) -> None:
    """Tell the user, on stderr, about task file lines that could not be loaded."""
    for error in task_service.skipped_records():
        format_warning(
            f"{error}. The line is kept in the task file unchanged.",
            console=get_console(stderr=True),
        )
