"""Unit tests for save_command.py."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from studyplan_cli.commands.save_command import app
from studyplan_cli.models.exceptions import PersistenceUnavailableError

runner = CliRunner()


def _run(service):
    with patch("studyplan_cli.commands.save_command.get_task_service", return_value=service):
        return runner.invoke(app, [])


def test_save(seeded_service, task_repo):
    task_repo.save.reset_mock()

    result = _run(seeded_service)

    assert result.exit_code == 0, result.output
    assert "Saved." in result.output
    saved = task_repo.save.call_args.args[0]
    assert [t.id for t in saved] == [1, 2, 3]


def test_save_failure(seeded_service, task_repo):
    task_repo.save.side_effect = PersistenceUnavailableError("/ro/tasks.db", "read-only")
    result = _run(seeded_service)
    assert result.exit_code == 8
