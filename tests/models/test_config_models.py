"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from studyplan_cli.models.config_models import AppConfig, OutputConfig


def test_defaults():
    config = AppConfig()
    assert config.storage.db_path is None
    assert config.storage.strict_load is False
    assert config.output.format == "pretty"
    assert config.planner.default_minutes is None


@pytest.mark.parametrize("fmt", ["pretty", "table", "json", "yaml"])
def test_output_format_accepted(fmt):
    assert OutputConfig(format=fmt).format == fmt


def test_output_format_rejected():
    with pytest.raises(ValidationError, match="format must be one of"):
        OutputConfig(format="xml")
