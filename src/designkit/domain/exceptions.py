# src/designkit/domain/exceptions.py
from typing import Any, Iterable, List, Optional, Tuple


class DesignKitError(Exception):
    """Base exception for all designkit errors."""
    pass


class ValidationError(DesignKitError):
    """Raised when input validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DesignKitError):
    """Raised when there's an issue with configuration or registration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnsupportedKindError(DesignKitError):
    """Raised when a factory is given a discriminator it does not recognize."""
    def __init__(self, kind: str, supported: Iterable[str] = ()):
        self.kind = kind
        self.supported = sorted(supported)
        super().__init__(
            f"Unsupported kind '{kind}'. Supported kinds: {', '.join(self.supported) or 'none'}"
        )


class HandlerNotFoundError(DesignKitError):
    """Raised when no handler is registered for a command type."""
    def __init__(self, command_type: type):
        super().__init__(f"No handler registered for command type: {command_type.__name__}")
        self.command_type = command_type


class ObserverNotAttachedError(DesignKitError, ValueError):
    """Raised when detaching an observer that was never attached."""
    def __init__(self, observer: Any):
        super().__init__(f"Observer {observer!r} is not attached")
        self.observer = observer


class NotificationError(DesignKitError):
    """Raised after a notification pass in which one or more observers failed."""
    def __init__(self, event: Any, failures: List[Tuple[Any, Exception]]):
        names = ", ".join(type(observer).__name__ for observer, _ in failures)
        super().__init__(f"{len(failures)} observer(s) failed for event {event!r}: {names}")
        self.event = event
        self.failures = failures


class InvalidStateTransitionError(DesignKitError):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state


class RouteNotFoundError(DesignKitError):
    """Raised when no route matches a request."""
    def __init__(self, method: str, path: str):
        super().__init__(f"No route for {method} {path}")
        self.method = method
        self.path = path
