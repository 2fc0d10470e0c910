"""Line codec for the task record file.

One task per line, fields joined by ``|`` in a fixed order::

    id|title|subject|duration_minutes|priority|due_date|completed_flag

``completed_flag`` is ``1`` or ``0``. Nothing is escaped: text containing
``|`` cannot round-trip, which is why ``TaskCreate``/``TaskUpdate`` reject it.
"""

from __future__ import annotations

from pydantic import ValidationError

from studyplan_cli.models import Task
from studyplan_cli.models.task import RECORD_DELIMITER

FIELD_COUNT = 7


class RecordFormatError(ValueError):
    """A line does not decode into a task."""


def serialize_task(task: Task) -> str:
    """Encode a task as a single record line (without the trailing newline)."""
    return RECORD_DELIMITER.join(
        [
            str(task.id),
            task.title,
            task.subject,
            str(task.duration_minutes),
            str(task.priority),
            task.due_date,
            "1" if task.completed else "0",
        ]
    )


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RecordFormatError(f"{field} is not an integer: {value!r}") from None


def deserialize_task(line: str) -> Task:
    """Decode one record line into a task.

    Trailing fields that are missing read as empty, as they did for files
    written by older builds that omitted an empty due date. The completion
    flag is true only for the literal ``1``.

    Raises:
        RecordFormatError: If there are too many fields or a numeric field
            does not parse
    """
    fields = line.split(RECORD_DELIMITER)
    if len(fields) > FIELD_COUNT:
        raise RecordFormatError(
            f"expected {FIELD_COUNT} fields, got {len(fields)} "
            f"(is there a '{RECORD_DELIMITER}' inside a text field?)"
        )
    fields += [""] * (FIELD_COUNT - len(fields))
    raw_id, title, subject, raw_duration, raw_priority, due_date, flag = fields

    try:
        return Task(
            id=_parse_int(raw_id, "id"),
            title=title,
            subject=subject,
            duration_minutes=_parse_int(raw_duration, "duration_minutes"),
            priority=_parse_int(raw_priority, "priority"),
            due_date=due_date,
            completed=flag == "1",
        )
    except ValidationError as e:
        raise RecordFormatError(str(e)) from e


def record_id(line: str) -> int | None:
    """Leading id field of a record line, or None if it is not an integer."""
    try:
        return int(line.split(RECORD_DELIMITER, 1)[0])
    except ValueError:
        return None
