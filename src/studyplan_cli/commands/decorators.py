"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from studyplan_cli.models.exceptions import StudyPlanError
from studyplan_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    get_exit_code_description,
    get_exit_code_name,
)
from studyplan_cli.utils.logger import get_logger
from studyplan_cli.utils.ui.formatters import format_error


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


def command_wrapper(func: Callable):
    """Wrap a command with logging and uniform error handling."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except StudyPlanError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [%s: %s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(e.exit_code),
                get_exit_code_description(e.exit_code),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except ValidationError as e:
            elapsed = time.monotonic() - start
            message = _validation_message(e)
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, message)
            format_error(f"Invalid input: {message}")
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except (typer.Exit, typer.Abort):
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
