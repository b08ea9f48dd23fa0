"""Tests for the front controller."""

from unittest.mock import Mock

import pytest

from designkit.api.front_controller import FrontController
from designkit.api.models import LifecycleState, Response
from designkit.api.routes import build_router
from designkit.application.bus import CommandBus
from designkit.application.commands import SendWelcomeNotificationCommand
from designkit.application.handlers import SendWelcomeNotificationHandler
from designkit.config.schemas import PricingConfig
from designkit.infrastructure.factories import TransportFactory


@pytest.fixture
def bus(email_notifier):
    bus = CommandBus()
    bus.register_handler(SendWelcomeNotificationCommand, SendWelcomeNotificationHandler(email_notifier))
    return bus


@pytest.fixture
def controller(bus):
    return FrontController(build_router(bus, TransportFactory(), PricingConfig()))


class TestFrontController:
    """Test the single entry point."""

    def test_lifecycle_visits_every_state_once_in_order(self, controller):
        exchange = controller.process("GET", "/health")

        assert exchange.lifecycle.history == [
            LifecycleState.RECEIVED,
            LifecycleState.ROUTED,
            LifecycleState.HANDLED,
            LifecycleState.RESPONDED,
            LifecycleState.TERMINATED,
        ]
        assert exchange.response.body == {"status": "healthy", "service": "designkit"}

    def test_unmatched_route_still_completes_lifecycle(self, controller):
        exchange = controller.process("GET", "/nowhere")

        assert exchange.response.status_code == 404
        assert exchange.response.body["error"]["code"] == "NOT_FOUND"
        assert exchange.lifecycle.is_terminated
        assert len(exchange.lifecycle.history) == 5

    def test_path_params_reach_action(self, controller):
        response = controller.handle("GET", "/pricing/reduced/quote", query={"price": "100"})

        assert response.status_code == 200
        assert response.body["strategy"] == "reduced"
        assert response.body["total"] == pytest.approx(105.5)

    def test_default_strategy(self, controller):
        response = controller.handle("GET", "/pricing/quote", query={"price": "10"})

        assert response.body == {"strategy": "standard", "price": 10.0, "total": pytest.approx(12.0)}

    @pytest.mark.parametrize(
        "query", [{}, {"price": "abc"}, {"price": "-1"}, {"price": "nan"}, {"price": "inf"}, {"price": "-inf"}]
    )
    def test_invalid_price_is_422(self, controller, query):
        response = controller.handle("GET", "/pricing/quote", query=query)

        assert response.status_code == 422
        assert response.body["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_kind_is_400(self, controller):
        response = controller.handle("GET", "/transports/rocket/deliver")

        assert response.status_code == 400
        assert "rocket" in response.body["error"]["message"]

    def test_transport_delivery(self, controller):
        response = controller.handle("GET", "/transports/Ship/deliver", query={"destination": "Oslo"})

        assert response.body == {"kind": "ship", "plan": "Delivering by sea in a container to Oslo"}

    def test_register_user_dispatches_command(self, controller, email_notifier):
        response = controller.handle(
            "POST",
            "/users",
            headers={"x-request-id": "req-1"},
            body={"email": "ada@example.com", "name": "Ada"},
        )

        assert response.status_code == 201
        assert response.body["success"] is True
        assert email_notifier.outbox == ["Welcome, Ada!"]

    def test_invalid_command_is_422(self, controller, email_notifier):
        response = controller.handle("POST", "/users", body={"email": "bad", "name": "Ada"})

        assert response.status_code == 422
        assert email_notifier.outbox == []

    def test_action_exception_is_500(self):
        class Broken:
            def explode(self, request):
                raise RuntimeError("boom")

        router = build_router(CommandBus(), TransportFactory(), PricingConfig())
        router.get("/explode", Broken(), "explode")

        exchange = FrontController(router).process("GET", "/explode")

        assert exchange.response.status_code == 500
        assert "boom" not in exchange.response.body["error"]["message"]
        assert exchange.lifecycle.is_terminated

    def test_sender_receives_the_one_response(self, controller):
        sender = Mock(return_value="sent")

        exchange = controller.process("GET", "/health", sender=sender)

        sender.assert_called_once_with(exchange.response)
        assert exchange.sent == "sent"

    def test_failing_sender_still_runs_terminate_hooks(self, controller):
        seen = []
        controller.on_terminate(lambda request, response: seen.append((request.path, response.status_code)))

        def broken_sender(response):
            raise RuntimeError("socket closed")

        with pytest.raises(RuntimeError, match="socket closed"):
            controller.process("GET", "/health", sender=broken_sender)

        assert seen == [("/health", 200)]

    def test_non_finite_price_reaches_terminate_hooks(self, controller):
        seen = []
        controller.on_terminate(lambda request, response: seen.append(response.status_code))

        exchange = controller.process("GET", "/pricing/standard/quote", query={"price": "nan"})

        assert exchange.response.status_code == 422
        assert exchange.lifecycle.is_terminated
        assert seen == [422]

    def test_terminate_hooks_run_after_send(self, controller):
        journal = []
        controller.on_terminate(lambda request, response: journal.append(("hook", response.status_code)))

        controller.process("GET", "/health", sender=lambda response: journal.append(("send", response.status_code)))

        assert journal == [("send", 200), ("hook", 200)]

    def test_failing_terminate_hook_does_not_stop_others(self, controller):
        seen = []

        def broken(request, response):
            raise RuntimeError("hook failed")

        controller.on_terminate(broken)
        controller.on_terminate(lambda request, response: seen.append(request.path))

        response = controller.handle("GET", "/health")

        assert response.status_code == 200
        assert seen == ["/health"]

    def test_routes_listing(self, controller):
        response = controller.handle("GET", "/routes")

        assert {"method": "POST", "path": "/users", "action": "UserController.register"} in response.body

    def test_controller_response_passes_through(self, controller):
        class Teapot:
            def brew(self, request):
                return Response(status_code=418, body="teapot")

        controller.router.get("/brew", Teapot(), "brew")

        assert controller.handle("GET", "/brew").status_code == 418
