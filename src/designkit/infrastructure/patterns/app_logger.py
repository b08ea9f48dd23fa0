"""Process-wide application log service, obtainable only through the singleton registry."""

import threading
from collections import deque
from typing import Deque, List

from designkit.infrastructure.logging.logger import get_logger
from designkit.infrastructure.patterns.singleton_registry import SingletonService

DEFAULT_MAX_ENTRIES = 1000


class AppLogger(SingletonService):
    """
    Shared log book: every caller appends to the same ordered record of messages.

    Only the newest ``max_entries`` messages are kept; older ones are evicted.
    """

    def __init__(self, channel: str = "app", max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.channel = channel
        self._entries: Deque[str] = deque(maxlen=max_entries)
        self._lock = threading.Lock()
        self._logger = get_logger(f"designkit.{channel}")

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen

    def log(self, message: str) -> None:
        """Record a message and forward it to the structured log."""
        with self._lock:
            self._entries.append(message)
        self._logger.info(message, channel=self.channel)

    @property
    def entries(self) -> List[str]:
        """Messages recorded so far, oldest first."""
        with self._lock:
            return list(self._entries)
