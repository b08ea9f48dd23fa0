"""Data provider port - target interface of the legacy adapter."""

from abc import ABC, abstractmethod
from typing import Any


class DataProvider(ABC):
    """Port for reading data in the current format."""

    @abstractmethod
    def get_data(self) -> Any:
        """Return the provider's data."""
