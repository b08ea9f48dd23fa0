"""API layer - front controller, router, controllers and the HTTP surface."""

from .front_controller import Exchange, FrontController
from .models import LifecycleState, Request, RequestLifecycle, Response
from .router import Router

__all__ = [
    "Exchange",
    "FrontController",
    "LifecycleState",
    "Request",
    "RequestLifecycle",
    "Response",
    "Router",
]
