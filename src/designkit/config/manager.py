"""Unified configuration management for the application."""
from __future__ import annotations

import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from designkit.config.loader import ConfigurationLoader
from designkit.config.schemas import (
    AppConfig,
    EventsConfig,
    LoggingConfig,
    NotificationsConfig,
    PricingConfig,
    ServerConfig,
)
from designkit.domain.exceptions import ConfigurationError

T = TypeVar("T")

_TYPE_MAPPING: Dict[Type, str] = {
    LoggingConfig: "logging",
    EventsConfig: "events",
    PricingConfig: "pricing",
    NotificationsConfig: "notifications",
    ServerConfig: "server",
}


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Loads lazily on first access: file (JSON or YAML), then environment
    overrides, then pydantic validation into ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader: Optional[ConfigurationLoader] = None

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        if self._config_file:
            if not os.path.exists(self._config_file):
                raise ConfigurationError(f"Configuration file not found: {self._config_file}")
            config_data = self.loader.load_from_file(self._config_file)
        else:
            config_data = self.loader.load_configuration()

        config_data = self.loader.apply_environment_overrides(config_data)
        config_data = _deep_merge(config_data, self._overrides)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def get_typed(self, config_type: Type[T]) -> T:
        """Get one configuration section by its schema type."""
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        attr_name = _TYPE_MAPPING.get(config_type)
        if attr_name is None:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``events.failure_policy``."""
        value: Any = self.app_config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part, default)
            elif hasattr(value, part):
                value = getattr(value, part)
            else:
                return default
        return value

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
