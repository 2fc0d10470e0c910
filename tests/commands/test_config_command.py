"""Unit tests for config_command.py."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from studyplan_cli.commands.config_command import app

runner = CliRunner()


def test_view_json():
    result = runner.invoke(app, ["view", "-o", "json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["output"]["format"] == "pretty"
    assert data["storage"]["strict_load"] is False


def test_get_value():
    result = runner.invoke(app, ["get", "output.format"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "pretty"


def test_get_unknown_key():
    result = runner.invoke(app, ["get", "output.colour"])
    assert result.exit_code == 2
    assert "not found" in result.output


def test_set_coerces_types(tmp_config):
    result = runner.invoke(app, ["set", "planner.default_minutes", "90"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["set", "storage.strict_load", "true"])
    assert result.exit_code == 0, result.output

    tmp_config.load_config()
    assert tmp_config.get("planner.default_minutes") == 90
    assert tmp_config.get("storage.strict_load") is True


def test_set_invalid_format():
    result = runner.invoke(app, ["set", "output.format", "xml"])
    assert result.exit_code == 2
    assert "Invalid input" in result.output


def test_reset_key_with_yes(tmp_config):
    tmp_config.set("output.format", "yaml")

    result = runner.invoke(app, ["reset", "output.format", "--yes"])

    assert result.exit_code == 0, result.output
    assert json.loads(tmp_config.config_path.read_text())["output"]["format"] == "pretty"


def test_reset_cancelled():
    result = runner.invoke(app, ["reset"], input="n\n")
    assert result.exit_code == 0
    assert "Cancelled" in result.output
