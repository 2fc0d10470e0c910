"""Unit tests for studyplan_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from studyplan_cli.utils.exit_codes import (
    ERROR_DATA,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)


def test_codes_are_distinct():
    codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND, ERROR_DATA, ERROR_STORAGE]
    assert len(set(codes)) == len(codes)
    assert SUCCESS == 0


@pytest.mark.parametrize(
    "code, name",
    [
        (SUCCESS, "SUCCESS"),
        (ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
        (ERROR_DATA, "ERROR_DATA"),
        (ERROR_STORAGE, "ERROR_STORAGE"),
    ],
)
def test_names(code, name):
    assert get_exit_code_name(code) == name


def test_unknown_code():
    assert get_exit_code_name(99) == "UNKNOWN(99)"
    assert get_exit_code_description(99) == "Unknown error"


def test_descriptions():
    assert get_exit_code_description(ERROR_NOT_FOUND) == "Task not found"
    assert "malformed" in get_exit_code_description(ERROR_DATA)
