"""Notifier port - capability shared by the base notifier and its decorators."""

from abc import ABC, abstractmethod
from typing import List


class Notifier(ABC):
    """Port for sending a message through one or more channels."""

    @abstractmethod
    def send(self, message: str) -> List[str]:
        """Send a message.

        Returns:
            Ordered delivery records, one per channel that handled the message
        """
