"""Configuration utilities."""

from .env_expansion import expand_config_env_vars, expand_env_vars

__all__ = ["expand_config_env_vars", "expand_env_vars"]
