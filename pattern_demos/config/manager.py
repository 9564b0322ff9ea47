"""Unified configuration management for the demos."""
from __future__ import annotations

import copy
import json
import os
import threading
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pattern_demos.config.defaults import DEFAULT_CONFIG
from pattern_demos.config.schemas import AppConfig
from pattern_demos.config.utils.env_expansion import expand_config_env_vars
from pattern_demos.domain.exceptions import ConfigurationError
from pattern_demos.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, descending into nested dicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from three sources, later ones winning:
    - DEFAULT_CONFIG
    - an optional JSON or YAML file
    - environment variables referenced as ``${VAR:default}`` placeholders

    The result is validated into an AppConfig on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_app_config(self) -> AppConfig:
        """Return the validated application configuration."""
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)
        if self._config_file:
            config_data = _deep_merge(config_data, self.load_from_file(self._config_file))

        config_data = expand_config_env_vars(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

        logger.debug("Configuration loaded", config_file=self._config_file)
        return app_config

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load raw configuration data from a JSON or YAML file.

        Args:
            path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Parsed configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """Build the application configuration from defaults, file and environment."""
    return ConfigurationManager(config_file).get_app_config()
