"""Factories for pattern participants."""

from .kind_registry import KindRegistration, KindRegistry
from .transport_factory import TransportFactory
from .transports import Plane, Ship, Truck

__all__ = [
    "KindRegistration",
    "KindRegistry",
    "TransportFactory",
    "Plane",
    "Ship",
    "Truck",
]
