"""Configuration management commands."""

from typing import Optional

import typer

from studyplan_cli.services.config_service import get_config_service
from studyplan_cli.utils.exit_codes import ERROR_INVALID_ARGS
from studyplan_cli.utils.ui.console import get_console
from studyplan_cli.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
)

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")


def _parse_value(value: str):
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if value.lower() in ("none", "null", ""):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    format_output(config_service.config.model_dump(mode="json"), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.db_path)"),
) -> None:
    """Get a configuration value."""
    config_service = get_config_service()
    try:
        value = config_service.get(key)
    except KeyError as e:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from e
    get_console(highlight=False).print(value, markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.db_path)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()
    parsed_value = _parse_value(value)
    try:
        config_service.set(key, parsed_value)
    except KeyError as e:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    config_service = get_config_service()
    try:
        config_service.reset(key)
    except KeyError as e:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
