"""Flat record file implementation of TaskRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from studyplan_cli.adapters.flatfile.codec import (
    RecordFormatError,
    deserialize_task,
    record_id,
    serialize_task,
)
from studyplan_cli.models import Task
from studyplan_cli.models.exceptions import (
    MalformedRecordError,
    PersistenceUnavailableError,
)
from studyplan_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)


class FlatFileTaskRepository(TaskRepository):
    """Stores tasks one per line in a pipe-delimited text file.

    Lines that fail to decode are not lost: they are remembered on load and
    written back verbatim, after the tasks, on every save.
    """

    def __init__(self, path: str | Path, strict: bool = False):
        """Initialize the flat file repository.

        Args:
            path: Task file location. It does not need to exist yet.
            strict: Raise ``MalformedRecordError`` on the first bad line
                instead of skipping it with a warning.
        """
        self.path = Path(path)
        self.strict = strict
        self._skipped: list[MalformedRecordError] = []

    def load(self) -> list[Task]:
        """Read every task from the file.

        A missing file is an empty store. Blank lines are ignored. A line
        that fails to decode, or repeats an id seen earlier in the file, is
        set aside (see ``skipped_records``) unless ``strict`` is set.
        """
        self._skipped = []
        if not self.path.exists():
            logger.info("task file %s does not exist, starting empty", self.path)
            return []

        tasks: list[Task] = []
        seen_ids: set[int] = set()
        with open(self.path, encoding="utf-8") as f:
            for line_number, raw_line in enumerate(f, start=1):
                line = raw_line.rstrip("\n")
                if not line.strip():
                    continue

                try:
                    task = deserialize_task(line)
                    if task.id in seen_ids:
                        raise RecordFormatError(f"duplicate id {task.id}")
                except RecordFormatError as e:
                    error = MalformedRecordError(line_number, line, str(e), record_id(line))
                    if self.strict:
                        raise error from e
                    logger.warning("skipping record: %s", error)
                    self._skipped.append(error)
                    continue

                seen_ids.add(task.id)
                tasks.append(task)

        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def skipped_records(self) -> list[MalformedRecordError]:
        return list(self._skipped)

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the whole file, keeping skipped lines at the end.

        The write is not atomic; an interrupted save can leave a truncated
        file behind.
        """
        lines = [serialize_task(task) + "\n" for task in tasks]
        kept = [error.line + "\n" for error in self._skipped]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.writelines(lines + kept)
        except OSError as e:
            logger.error("failed to save tasks to %s: %s", self.path, e)
            raise PersistenceUnavailableError(str(self.path), str(e)) from e

        logger.debug(
            "saved %d task(s) and %d skipped line(s) to %s",
            len(lines),
            len(kept),
            self.path,
        )
