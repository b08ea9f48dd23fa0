"""Controllers reached through the front controller."""
import math
from typing import Any, Dict, List

from designkit.api.models import Request, Response
from designkit.api.router import Router
from designkit.application.bus import CommandBus
from designkit.application.commands import SendWelcomeNotificationCommand
from designkit.config.schemas import PricingConfig
from designkit.domain.exceptions import ValidationError
from designkit.domain.pricing import PriceCalculator, strategy_for
from designkit.infrastructure.factories.transport_factory import TransportFactory


class SystemController:
    """Health and route listing."""

    def __init__(self, router: Router):
        self._router = router

    def health(self, request: Request) -> Dict[str, str]:
        return {"status": "healthy", "service": "designkit"}

    def routes(self, request: Request) -> List[Dict[str, Any]]:
        return self._router.describe()


class PricingController:
    """Quotes a taxed price using a named tax strategy."""

    def __init__(self, config: PricingConfig):
        self.config = config

    def quote(self, request: Request) -> Dict[str, Any]:
        strategy_name = request.path_params.get("strategy", self.config.default_strategy)
        raw_price = request.query.get("price")
        if raw_price is None:
            raise ValidationError("Query parameter 'price' is required")
        try:
            price = float(raw_price)
        except ValueError:
            raise ValidationError(f"Invalid price: {raw_price}") from None
        if not math.isfinite(price):
            raise ValidationError(f"Price must be a finite number: {raw_price}")

        calculator = PriceCalculator(strategy_for(strategy_name, self.config.rates))
        return {"strategy": strategy_name, "price": price, "total": calculator.total(price)}


class TransportController:
    """Plans a delivery with a transport built by the factory."""

    def __init__(self, factory: TransportFactory):
        self.factory = factory

    def kinds(self, request: Request) -> Dict[str, Any]:
        return {"kinds": self.factory.supported_kinds()}

    def deliver(self, request: Request) -> Dict[str, Any]:
        transport = self.factory.create(request.path_params["kind"])
        destination = request.query.get("destination", "warehouse")
        return {"kind": transport.kind, "plan": transport.deliver(destination)}


class UserController:
    """Registers users by dispatching a command; never calls the handler itself."""

    def __init__(self, bus: CommandBus):
        self.bus = bus

    def register(self, request: Request) -> Response:
        body = request.body or {}
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        command = SendWelcomeNotificationCommand(
            email=body.get("email", ""),
            name=body.get("name", ""),
            correlation_id=request.headers.get("x-request-id"),
        )
        result = self.bus.dispatch(command)
        return Response(status_code=201, body=result.to_dict())
