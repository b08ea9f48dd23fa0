"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    EventsConfig,
    LoggingConfig,
    NotificationsConfig,
    PricingConfig,
    ServerConfig,
)
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    "AppConfig",
    "EventsConfig",
    "LoggingConfig",
    "NotificationsConfig",
    "PricingConfig",
    "ServerConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
]
