"""Kind registry - maps discriminator strings to constructors.

Shared by the transport factory and the notifier chain builder so that new
variants are added by registration instead of by editing conditionals.
"""

import threading
from typing import Any, Callable, Dict, Generic, List, TypeVar

from designkit.domain.exceptions import ConfigurationError, UnsupportedKindError
from designkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class KindRegistration(Generic[T]):
    """Container for one registered kind."""

    def __init__(self, kind: str, constructor: Callable[..., T], description: str = ""):
        self.kind = kind
        self.constructor = constructor
        self.description = description

    def __repr__(self) -> str:
        return f"KindRegistration(kind='{self.kind}')"


class KindRegistry(Generic[T]):
    """
    Registry of constructors keyed by normalized kind.

    Kinds are matched case-insensitively after trimming whitespace. The
    registry holds constructors only; every ``create`` call builds a new value.
    """

    def __init__(self, name: str):
        self.name = name
        self._registrations: Dict[str, KindRegistration[T]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    @staticmethod
    def normalize(kind: str) -> str:
        """Normalize a discriminator for lookup."""
        if not isinstance(kind, str):
            raise UnsupportedKindError(repr(kind))
        return kind.strip().lower()

    def register(self, kind: str, constructor: Callable[..., T], description: str = "") -> None:
        """
        Register a kind with its constructor.

        Raises:
            ConfigurationError: If the kind is already registered
        """
        key = self.normalize(kind)
        if not key:
            raise ConfigurationError(f"{self.name}: kind must not be empty")
        with self._lock:
            if key in self._registrations:
                raise ConfigurationError(f"{self.name}: kind '{key}' is already registered")
            self._registrations[key] = KindRegistration(key, constructor, description)
        self.logger.debug("Registered kind", registry=self.name, kind=key)

    def unregister(self, kind: str) -> bool:
        """Remove a kind. Returns True if it was registered."""
        with self._lock:
            return self._registrations.pop(self.normalize(kind), None) is not None

    def create(self, kind: str, *args: Any, **kwargs: Any) -> T:
        """
        Construct a new value for ``kind``.

        Raises:
            UnsupportedKindError: If the kind is not registered
        """
        key = self.normalize(kind)
        registration = self._registrations.get(key)
        if registration is None:
            self.logger.warning("Unsupported kind requested", registry=self.name, kind=kind)
            raise UnsupportedKindError(kind, self._registrations.keys())
        return registration.constructor(*args, **kwargs)

    def is_registered(self, kind: str) -> bool:
        """Check whether a kind is registered."""
        return self.normalize(kind) in self._registrations

    def supported_kinds(self) -> List[str]:
        """Registered kinds, sorted."""
        return sorted(self._registrations)
