"""Transport port - product capability of the transport factory."""

from abc import ABC, abstractmethod


class Transport(ABC):
    """Port for a means of delivering goods."""

    kind: str = ""

    @abstractmethod
    def deliver(self, destination: str) -> str:
        """Deliver to a destination and describe how it was done."""
