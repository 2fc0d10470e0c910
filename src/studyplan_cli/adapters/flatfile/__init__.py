"""Flat file adapter module - pipe-delimited task record file."""

from studyplan_cli.adapters.flatfile.codec import (
    RecordFormatError,
    deserialize_task,
    record_id,
    serialize_task,
)
from studyplan_cli.adapters.flatfile.task_repository import FlatFileTaskRepository

__all__ = [
    "FlatFileTaskRepository",
    "RecordFormatError",
    "deserialize_task",
    "record_id",
    "serialize_task",
]
