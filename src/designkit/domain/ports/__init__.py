"""Domain ports - capability interfaces implemented by each pattern's participants."""

from .data_provider_port import DataProvider
from .notifier_port import Notifier
from .observer_port import Observer
from .tax_strategy_port import TaxStrategy
from .transport_port import Transport

__all__ = [
    "DataProvider",
    "Notifier",
    "Observer",
    "TaxStrategy",
    "Transport",
]
