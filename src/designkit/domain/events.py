"""Event hub - ordered observer registry with synchronous notification."""

import threading
from collections import deque
from typing import Any, Callable, Deque, List, Tuple

from designkit.domain.exceptions import NotificationError, ObserverNotAttachedError
from designkit.domain.ports.observer_port import Observer
from designkit.infrastructure.logging.logger import get_logger

FAILURE_POLICY_CONTINUE = "continue"
FAILURE_POLICY_FAIL_FAST = "fail_fast"
DEFAULT_AUDIT_TRAIL_SIZE = 1000


class EventHub:
    """
    Subject holding an ordered sequence of observers.

    Observers are notified in attachment order with the same event value.
    The same observer may be attached more than once and is then notified once
    per attachment. The hub does not own its observers.

    Failure policies:
    - "continue": every observer runs; failures are collected and raised
      together as NotificationError after the pass
    - "fail_fast": the first failure propagates and later observers are skipped
    """

    def __init__(self, failure_policy: str = FAILURE_POLICY_CONTINUE):
        valid_policies = [FAILURE_POLICY_CONTINUE, FAILURE_POLICY_FAIL_FAST]
        if failure_policy not in valid_policies:
            raise ValueError(f"Invalid failure policy '{failure_policy}'. Must be one of: {valid_policies}")
        self.failure_policy = failure_policy
        self._observers: List[Observer] = []
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def attach(self, observer: Observer) -> None:
        """Append an observer to the registry."""
        with self._lock:
            self._observers.append(observer)
        self._logger.debug("Attached observer", observer=type(observer).__name__)

    def detach(self, observer: Observer) -> None:
        """
        Remove the first attachment of an observer.

        Raises:
            ObserverNotAttachedError: If the observer is not attached
        """
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                raise ObserverNotAttachedError(observer) from None
        self._logger.debug("Detached observer", observer=type(observer).__name__)

    @property
    def observers(self) -> List[Observer]:
        """Attached observers, in notification order."""
        with self._lock:
            return list(self._observers)

    def notify(self, event: Any) -> None:
        """
        Call ``update(event)`` on every attached observer, in order.

        Observers attached or detached during the pass take effect on the next one.

        Raises:
            NotificationError: Under the "continue" policy, if any observer failed
        """
        failures: List[Tuple[Observer, Exception]] = []
        for observer in self.observers:
            try:
                observer.update(event)
            except Exception as e:
                self._logger.error(
                    "Observer failed",
                    observer=type(observer).__name__,
                    error=str(e),
                    failure_policy=self.failure_policy,
                )
                if self.failure_policy == FAILURE_POLICY_FAIL_FAST:
                    raise
                failures.append((observer, e))

        if failures:
            raise NotificationError(event, failures)

    def __len__(self) -> int:
        return len(self._observers)


class CallbackObserver(Observer):
    """Observer that forwards each event to a callable."""

    def __init__(self, callback: Callable[[Any], None]):
        self._callback = callback

    def update(self, event: Any) -> None:
        self._callback(event)


class AuditLogObserver(Observer):
    """
    Observer that writes every event to the structured log and keeps a trail.

    The trail holds the newest ``max_events`` events; older ones are evicted.
    """

    def __init__(self, name: str = "audit", max_events: int = DEFAULT_AUDIT_TRAIL_SIZE):
        if max_events < 1:
            raise ValueError(f"max_events must be at least 1, got {max_events}")
        self.name = name
        self._trail: Deque[Any] = deque(maxlen=max_events)
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    @property
    def trail(self) -> List[Any]:
        """Observed events, oldest first."""
        with self._lock:
            return list(self._trail)

    def update(self, event: Any) -> None:
        with self._lock:
            self._trail.append(event)
        self._logger.info("Event observed", observer=self.name, event=str(event))
