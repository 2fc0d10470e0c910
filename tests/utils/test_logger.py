"""Tests for the application logger utility."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset the logger singleton and logging state between tests."""
    import studyplan_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("studyplan_cli").handlers.clear()

    yield

    for handler in logging.getLogger("studyplan_cli").handlers:
        handler.close()
    logging.getLogger("studyplan_cli").handlers.clear()
    logger_mod._logger = None


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    from studyplan_cli.utils.logger import get_logger

    logger = get_logger()

    log_file = tmp_path / "studyplan.log"
    assert log_file.exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    from studyplan_cli.utils.logger import get_logger

    assert get_logger() is get_logger()


def test_module_loggers_reach_the_log_file(tmp_path):
    """Records from module loggers propagate into the application log."""
    from studyplan_cli.utils.logger import get_logger

    logger = get_logger()
    logging.getLogger("studyplan_cli.services.task_store").info("hello from store")

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "studyplan.log").read_text(encoding="utf-8")
    assert "hello from store" in content
    assert "[studyplan_cli.services.task_store]" in content


def test_get_logger_creates_parent_dirs(tmp_path):
    """Logger creates nested directories if they do not exist."""
    nested = tmp_path / "a" / "b" / "c"
    with patch("studyplan_cli.utils.logger.user_log_dir", return_value=str(nested)):
        from studyplan_cli.utils.logger import get_logger

        get_logger()

    assert nested.is_dir()
