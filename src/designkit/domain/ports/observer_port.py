"""Observer port."""

from abc import ABC, abstractmethod
from typing import Any


class Observer(ABC):
    """Port for anything that wants to be told about hub events."""

    @abstractmethod
    def update(self, event: Any) -> None:
        """Receive an event."""
