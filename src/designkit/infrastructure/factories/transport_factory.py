"""Transport factory - builds a new Transport from a discriminator string."""

from typing import Callable, List, Optional

from designkit.domain.ports.transport_port import Transport
from designkit.infrastructure.factories.kind_registry import KindRegistry
from designkit.infrastructure.factories.transports import Plane, Ship, Truck


class TransportFactory:
    """
    Factory for transports.

    ``create`` is pure with respect to prior calls: each call returns a new
    instance and mutates nothing. Registration happens at start-up.
    """

    def __init__(self, registry: Optional[KindRegistry[Transport]] = None, register_defaults: bool = True):
        self._registry: KindRegistry[Transport] = registry or KindRegistry("transports")
        if register_defaults:
            for transport_class in (Truck, Ship, Plane):
                self._registry.register(transport_class.kind, transport_class)

    def register(self, kind: str, constructor: Callable[[], Transport]) -> None:
        """Register an additional transport kind."""
        self._registry.register(kind, constructor)

    def create(self, kind: str) -> Transport:
        """
        Create a transport for ``kind``.

        Raises:
            UnsupportedKindError: If ``kind`` is not recognized
        """
        return self._registry.create(kind)

    def supported_kinds(self) -> List[str]:
        """Kinds this factory recognizes."""
        return self._registry.supported_kinds()
