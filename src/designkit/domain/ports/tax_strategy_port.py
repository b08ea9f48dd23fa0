"""Tax strategy port."""

from abc import ABC, abstractmethod


class TaxStrategy(ABC):
    """Port for an interchangeable tax computation."""

    @abstractmethod
    def calculate(self, price: float) -> float:
        """Return the taxed price."""
