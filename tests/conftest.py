"""Shared test fixtures and configuration.

Keeps config, data and log files inside a per-test temporary directory.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from studyplan_cli.models import Task
from studyplan_cli.models.config_models import AppConfig
from studyplan_cli.services.task_service import TaskService
from studyplan_cli.services.task_store import TaskStore


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached services."""
    import studyplan_cli.utils.logger as logger_mod
    from studyplan_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    original_logger = logger_mod._logger
    logger_mod._logger = None
    get_config_service.cache_clear()
    with (
        patch("studyplan_cli.services.config_service.user_config_dir", return_value=tmpdir),
        patch("studyplan_cli.services.config_service.user_data_dir", return_value=tmpdir),
        patch("studyplan_cli.utils.logger.user_log_dir", return_value=tmpdir),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    app_logger = logging.getLogger("studyplan_cli")
    for handler in list(app_logger.handlers):
        handler.close()
    app_logger.handlers.clear()
    logger_mod._logger = original_logger


@pytest.fixture()
def tmp_config():
    """Provide a real ConfigService backed by the temporary directory."""
    from studyplan_cli.services.config_service import ConfigService

    return ConfigService()


@pytest.fixture()
def mock_config_service():
    """Provide a MagicMock that stands in for get_config_service()."""
    config = AppConfig()
    svc = MagicMock()
    svc.config = config
    svc.load_config.return_value = config
    return svc


@pytest.fixture()
def make_task():
    """Factory building a Task with sensible defaults."""

    def _make(id_: int = 1, **overrides) -> Task:
        data = {
            "title": f"Task {id_}",
            "subject": "Maths",
            "duration_minutes": 30,
            "priority": 1,
            "due_date": "2025-11-20",
            "completed": False,
        }
        data.update(overrides)
        return Task(id=id_, **data)

    return _make


@pytest.fixture()
def task_repo():
    """In-memory stand-in for the task file."""
    repository = MagicMock()
    repository.load.return_value = []
    repository.skipped_records.return_value = []
    return repository


@pytest.fixture()
def task_service(task_repo):
    store = TaskStore(task_repo)
    store.load()
    return TaskService(store)


@pytest.fixture()
def seeded_service(task_service):
    """Service holding tasks A (id 1), B (id 2) and C (id 3)."""
    task_service.add_task(
        "Alpha reading", subject="OS", duration_minutes=60, priority=1, due_date="2025-11-20"
    )
    task_service.add_task(
        "Beta queries", subject="DB", duration_minutes=90, priority=2, due_date="2025-11-25"
    )
    task_service.add_task(
        "Gamma notes", subject="Net", duration_minutes=45, priority=1, due_date="2025-11-19"
    )
    return task_service
