"""Route table of the application."""
from designkit.api.controllers import (
    PricingController,
    SystemController,
    TransportController,
    UserController,
)
from designkit.api.router import Router
from designkit.application.bus import CommandBus
from designkit.config.schemas import PricingConfig
from designkit.infrastructure.factories.transport_factory import TransportFactory


def build_router(bus: CommandBus, factory: TransportFactory, pricing: PricingConfig) -> Router:
    """Register every route against its controller action."""
    router = Router()

    system = SystemController(router)
    router.get("/health", system, "health")
    router.get("/routes", system, "routes")

    pricing_controller = PricingController(pricing)
    router.get("/pricing/quote", pricing_controller, "quote")
    router.get("/pricing/{strategy}/quote", pricing_controller, "quote")

    transports = TransportController(factory)
    router.get("/transports", transports, "kinds")
    router.get("/transports/{kind}/deliver", transports, "deliver")

    router.post("/users", UserController(bus), "register")

    return router
