"""Unit tests for delete_command.py."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from studyplan_cli.commands.delete_command import app

runner = CliRunner()


def _run(service, args, input=None):
    with patch("studyplan_cli.commands.delete_command.get_task_service", return_value=service):
        return runner.invoke(app, args, input=input)


def test_force_flag_skips_confirmation(seeded_service):
    result = _run(seeded_service, ["2", "--force"])

    assert result.exit_code == 0, result.output
    assert "Task deleted." in result.output
    assert seeded_service.get_task(2).task is None


def test_confirm_yes_deletes(seeded_service):
    result = _run(seeded_service, ["1"], input="y\n")
    assert result.exit_code == 0, result.output
    assert seeded_service.get_task(1).task is None


def test_confirm_no_cancels(seeded_service, task_repo):
    task_repo.save.reset_mock()

    result = _run(seeded_service, ["1"], input="n\n")

    assert result.exit_code == 0
    assert "Cancelled" in result.output
    assert seeded_service.get_task(1).ok
    task_repo.save.assert_not_called()


def test_missing_task_does_not_write(seeded_service, task_repo):
    task_repo.save.reset_mock()

    result = _run(seeded_service, ["42", "-f"])

    assert result.exit_code == 5
    assert "Task 42 not found" in result.output
    task_repo.save.assert_not_called()
