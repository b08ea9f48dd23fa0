"""Tests for the transport factory and kind registry."""

import pytest

from designkit.domain.exceptions import ConfigurationError, UnsupportedKindError
from designkit.domain.ports import Transport
from designkit.infrastructure.factories import KindRegistry, Plane, Ship, TransportFactory, Truck


class Drone(Transport):
    kind = "drone"

    def deliver(self, destination):
        return f"Delivering by drone to {destination}"


class TestTransportFactory:
    """Test transport creation from discriminators."""

    def setup_method(self):
        self.factory = TransportFactory()

    @pytest.mark.parametrize(
        "kind, expected_class",
        [("truck", Truck), ("ship", Ship), ("plane", Plane)],
    )
    def test_recognized_kinds(self, kind, expected_class):
        transport = self.factory.create(kind)

        assert isinstance(transport, Transport)
        assert isinstance(transport, expected_class)
        assert transport.deliver("Lyon").endswith("Lyon")

    def test_kind_is_normalized(self):
        assert isinstance(self.factory.create("  ShIp "), Ship)

    @pytest.mark.parametrize("kind", ["bicycle", "", "trucks", "TRAIN"])
    def test_unrecognized_kinds(self, kind):
        with pytest.raises(UnsupportedKindError) as exc_info:
            self.factory.create(kind)

        assert exc_info.value.kind == kind
        assert exc_info.value.supported == ["plane", "ship", "truck"]

    def test_non_string_kind(self):
        with pytest.raises(UnsupportedKindError):
            self.factory.create(None)

    def test_each_call_returns_new_instance(self):
        assert self.factory.create("truck") is not self.factory.create("truck")

    def test_register_additional_kind(self):
        self.factory.register("drone", Drone)

        assert isinstance(self.factory.create("drone"), Drone)
        assert "drone" in self.factory.supported_kinds()

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ConfigurationError, match="already registered"):
            self.factory.register("truck", Truck)

    def test_factories_do_not_share_registrations(self):
        self.factory.register("drone", Drone)

        with pytest.raises(UnsupportedKindError):
            TransportFactory().create("drone")


class TestKindRegistry:
    """Test the generic kind registry."""

    def test_empty_kind_rejected(self):
        registry = KindRegistry("things")

        with pytest.raises(ConfigurationError):
            registry.register("   ", object)

    def test_unregister(self):
        registry = KindRegistry("things")
        registry.register("thing", object)

        assert registry.unregister("THING") is True
        assert registry.unregister("thing") is False
        assert not registry.is_registered("thing")

    def test_create_passes_arguments(self):
        registry = KindRegistry("pairs")
        registry.register("pair", lambda left, right=None: (left, right))

        assert registry.create("pair", 1, right=2) == (1, 2)
