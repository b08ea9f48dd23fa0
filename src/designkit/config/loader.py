"""Configuration loader - reads configuration sources into a plain dictionary."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from designkit.config.schemas import AppConfig
from designkit.config.utils.env_expansion import expand_config_env_vars
from designkit.domain.exceptions import ConfigurationError
from designkit.infrastructure.logging.logger import get_logger

ENV_PREFIX = "DESIGNKIT_"
ENV_NESTING_SEPARATOR = "__"
DEFAULT_CONFIG_LOCATIONS = [
    "${DESIGNKIT_CONFIG_DIR:.}/designkit.yml",
    "${DESIGNKIT_CONFIG_DIR:.}/designkit.yaml",
    "${DESIGNKIT_CONFIG_DIR:.}/designkit.json",
]


class ConfigurationLoader:
    """
    Loads configuration from files and the environment.

    Files may be JSON or YAML, chosen by suffix. Environment overrides use the
    ``DESIGNKIT_<SECTION>__<KEY>`` naming, e.g. ``DESIGNKIT_LOGGING__LEVEL=DEBUG``.
    """

    def __init__(self, search_paths: Optional[List[str]] = None):
        self.search_paths = search_paths or DEFAULT_CONFIG_LOCATIONS
        self.logger = get_logger(__name__)

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Load one configuration file."""
        file_path = Path(path)
        try:
            with file_path.open("r", encoding="utf-8") as handle:
                if file_path.suffix in (".yml", ".yaml"):
                    data = yaml.safe_load(handle) or {}
                else:
                    data = json.load(handle)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a mapping")

        self.logger.debug("Loaded configuration file", path=str(file_path))
        return expand_config_env_vars(data)

    def load_configuration(self) -> Dict[str, Any]:
        """Load the first configuration file found in the search paths, or nothing."""
        for candidate in expand_config_env_vars(list(self.search_paths)):
            if os.path.exists(candidate):
                return self.load_from_file(candidate)
        self.logger.debug("No configuration file found, using defaults")
        return {}

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay DESIGNKIT_* environment variables onto a configuration dictionary."""
        result = copy.deepcopy(config)
        for name, raw_value in os.environ.items():
            if not name.startswith(ENV_PREFIX) or name == "DESIGNKIT_CONFIG_DIR":
                continue
            keys = name[len(ENV_PREFIX):].lower().split(ENV_NESTING_SEPARATOR)
            target = result
            for key in keys[:-1]:
                existing = target.get(key)
                if not isinstance(existing, dict):
                    existing = {}
                    target[key] = existing
                target = existing
            target[keys[-1]] = self._parse_value(raw_value, keys)
            self.logger.debug("Applied environment override", variable=name)
        return result

    @staticmethod
    def _parse_value(raw_value: str, keys: Sequence[str] = ()) -> Any:
        """
        Interpret JSON literals (numbers, booleans, lists); anything else stays a string.

        Values for string fields of ``AppConfig`` are never decoded, so
        ``DESIGNKIT_VERSION=1.0`` stays ``"1.0"``.
        """
        if _is_string_field(keys):
            return raw_value
        try:
            return json.loads(raw_value)
        except json.JSONDecodeError:
            return raw_value


def _is_string_field(keys: Sequence[str]) -> bool:
    """Check whether a nested key path names a string field of ``AppConfig``."""
    annotation: Any = AppConfig
    for key in keys:
        fields = getattr(annotation, "model_fields", None)
        if not fields or key not in fields:
            return False
        annotation = fields[key].annotation
    return annotation in (str, Optional[str])
