"""Thread-safe registry holding the one instance of each singleton class."""

import threading
from typing import Any, Dict, Optional, Set, Type, TypeVar

from designkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry for singleton instances.

    The registry itself is a lazily created process-wide instance. Each
    registered class gets exactly one instance, created on the first ``get``
    call even when several threads race for it (double-checked locking).

    ``reset()`` drops every instance and is the teardown hook for tests.
    Additional registries may be created directly; each holds its own
    instances and may construct guarded services.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()
    # Classes each thread is constructing, across every registry instance
    _construction = threading.local()

    def __init__(self) -> None:
        self._instances: Dict[Type, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Return the process-wide registry, creating it on first call."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Return the instance of ``singleton_class``, constructing it on first call.

        Arguments are only used for that first construction.
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._registry_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                constructing = self._constructing_set()
                constructing.add(singleton_class)
                try:
                    instance = singleton_class(*args, **kwargs)
                finally:
                    constructing.discard(singleton_class)
                self._instances[singleton_class] = instance
                self.logger.debug("Created singleton", singleton=singleton_class.__name__)
        return instance

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of ``singleton_class`` exists."""
        return singleton_class in self._instances

    @classmethod
    def is_constructing(cls, singleton_class: Type) -> bool:
        """Check whether the calling thread is inside a registry constructing ``singleton_class``."""
        return singleton_class in cls._constructing_set()

    @classmethod
    def _constructing_set(cls) -> Set[Type]:
        constructing = getattr(cls._construction, "classes", None)
        if constructing is None:
            constructing = cls._construction.classes = set()
        return constructing

    def remove(self, singleton_class: Type) -> None:
        """Drop the instance of one class."""
        with self._registry_lock:
            self._instances.pop(singleton_class, None)

    def clear(self) -> None:
        """Drop every instance held by this registry."""
        with self._registry_lock:
            self._instances.clear()

    @classmethod
    def reset(cls) -> None:
        """Drop the registry and all instances it holds."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.clear()
            cls._instance = None


class SingletonService:
    """
    Base for services that may only be created through the singleton registry.

    Direct construction raises ``TypeError``; use ``get_singleton(cls)``.
    """

    def __new__(cls, *args: Any, **kwargs: Any):
        if not SingletonRegistry.is_constructing(cls):
            raise TypeError(
                f"{cls.__name__} is a singleton; obtain it with get_singleton({cls.__name__})"
            )
        return super().__new__(cls)
