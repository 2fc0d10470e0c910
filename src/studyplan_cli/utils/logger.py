"""File logging for studyplan-cli.

Everything under the ``studyplan_cli`` logger namespace ends up in
``studyplan.log`` inside the platform log directory; nothing is logged to
the terminal.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "studyplan_cli"
_LOG_FILE = "studyplan.log"

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the ``studyplan_cli`` logger, attaching its file handler once."""
    global _logger
    if _logger is None:
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / _LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s [%(name)s] %(message)s")
        )

        _logger = logging.getLogger(_APP_NAME)
        _logger.setLevel(logging.DEBUG)
        if not _logger.handlers:
            _logger.addHandler(handler)
        _logger.propagate = False
    return _logger
