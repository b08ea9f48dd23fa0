"""Concrete transports produced by the transport factory."""

from designkit.domain.ports.transport_port import Transport


class Truck(Transport):
    kind = "truck"

    def deliver(self, destination: str) -> str:
        return f"Delivering by land in a box to {destination}"


class Ship(Transport):
    kind = "ship"

    def deliver(self, destination: str) -> str:
        return f"Delivering by sea in a container to {destination}"


class Plane(Transport):
    kind = "plane"

    def deliver(self, destination: str) -> str:
        return f"Delivering by air in a cargo hold to {destination}"
