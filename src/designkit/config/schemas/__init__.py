"""Configuration schemas."""

from .app_schema import (
    AppConfig,
    EventsConfig,
    NotificationsConfig,
    PricingConfig,
)
from .logging_schema import LoggingConfig
from .server_schema import ServerConfig

__all__ = [
    "AppConfig",
    "EventsConfig",
    "LoggingConfig",
    "NotificationsConfig",
    "PricingConfig",
    "ServerConfig",
]
