"""Infrastructure patterns package."""

from designkit.infrastructure.patterns.app_logger import AppLogger
from designkit.infrastructure.patterns.singleton_access import get_singleton, reset_singletons
from designkit.infrastructure.patterns.singleton_registry import SingletonRegistry, SingletonService

__all__ = ["AppLogger", "SingletonRegistry", "SingletonService", "get_singleton", "reset_singletons"]
