"""Configuration service for managing StudyPlan CLI configuration.

This module provides the ConfigService class, the single source of truth
for configuration. It handles:

- Loading and saving config.json under the platform config directory
- Dot-separated key access (``storage.db_path``) for the config commands
- Resolving the task file location
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from studyplan_cli.models.config_models import AppConfig

_APP_NAME = "studyplan_cli"
DEFAULT_TASK_FILE = "tasks.db"

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def task_file_path(self) -> Path:
        """Configured task file, or ``tasks.db`` in the user data directory."""
        if self.config.storage.db_path:
            return Path(self.config.storage.db_path).expanduser()
        return self.data_dir / DEFAULT_TASK_FILE

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e
        logger.debug("saved config to %s", self.config_path)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
        """
        return _get_from(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a configuration field
            ValidationError: If the value is invalid for the field
        """
        self.get(key)
        config_dict = self.config.model_dump()

        *parents, leaf = key.split(".")
        current = config_dict
        for part in parents:
            current = current[part]
        current[leaf] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()
        logger.info("config %s set to %r", key, value)

    def reset(self, key: str | None = None) -> None:
        """Reset configuration (or a single key) to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            logger.info("config reset to defaults")
            return

        default_value = _get_from(AppConfig(), key)
        self.set(key, default_value)


def _get_from(config: AppConfig, key: str) -> Any:
    value: Any = config
    for part in key.split("."):
        if not isinstance(value, BaseModel) or part not in type(value).model_fields:
            raise KeyError(key)
        value = getattr(value, part)
    return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
