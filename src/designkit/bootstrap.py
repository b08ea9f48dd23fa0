"""Application bootstrap - wires every component at start-up."""

from __future__ import annotations

from typing import Any, Dict, Optional

from designkit.api.front_controller import FrontController
from designkit.api.models import Request, Response
from designkit.api.routes import build_router
from designkit.application.bus import CommandBus
from designkit.application.commands import SendWelcomeNotificationCommand
from designkit.application.handlers import SendWelcomeNotificationHandler
from designkit.config.manager import ConfigurationManager
from designkit.config.schemas import AppConfig
from designkit.domain.events import AuditLogObserver, EventHub
from designkit.domain.ports.notifier_port import Notifier
from designkit.infrastructure.factories.transport_factory import TransportFactory
from designkit.infrastructure.logging.logger import get_logger, setup_logging
from designkit.infrastructure.notifiers import EmailNotifier, build_notifier_chain
from designkit.infrastructure.patterns import AppLogger, get_singleton


class Application:
    """
    Application context.

    ``initialize`` is the explicit initialization point: configuration,
    logging, the transport factory, the notifier chain, the event hub, the
    command bus (with its handler registry) and the front controller are all
    built there, once.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.config_path = config_path
        self._config_manager = ConfigurationManager(config_path, overrides)
        self._notifier_override = notifier
        self._initialized = False

        self.config: Optional[AppConfig] = None
        self.factory: Optional[TransportFactory] = None
        self.notifier: Optional[Notifier] = None
        self.hub: Optional[EventHub] = None
        self.audit: Optional[AuditLogObserver] = None
        self.bus: Optional[CommandBus] = None
        self.front_controller: Optional[FrontController] = None

        self.logger = get_logger(__name__)

    def initialize(self) -> "Application":
        """Build every component. Calling it again is a no-op."""
        if self._initialized:
            return self

        self.config = self._config_manager.app_config
        setup_logging(self.config.logging)
        self.logger = get_logger(__name__)
        self.logger.info("Initializing application", environment=self.config.environment)

        self.factory = TransportFactory()
        self.notifier = self._notifier_override or self._build_notifier()

        self.hub = EventHub(failure_policy=self.config.events.failure_policy)
        self.audit = AuditLogObserver(max_events=self.config.events.audit_trail_size)
        self.hub.attach(self.audit)

        self.bus = CommandBus()
        self.bus.register_handler(
            SendWelcomeNotificationCommand, SendWelcomeNotificationHandler(self.notifier)
        )

        router = build_router(self.bus, self.factory, self.config.pricing)
        self.front_controller = FrontController(router)
        self.front_controller.on_terminate(self._publish_request_completed)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            routes=len(router.routes),
            commands=self.bus.registered_commands(),
        )
        return self

    def _build_notifier(self) -> Notifier:
        notifications = self.config.notifications
        channel_options: Dict[str, Dict[str, Any]] = {
            "sns": {"topic_arn": notifications.sns_topic_arn, "region_name": notifications.aws_region},
        }
        return build_notifier_chain(
            notifications.channels,
            base=EmailNotifier(sender=notifications.sender),
            channel_options=channel_options,
        )

    def _publish_request_completed(self, request: Request, response: Response) -> None:
        app_logger = get_singleton(AppLogger, max_entries=self.config.events.audit_trail_size)
        app_logger.log(f"{request.method} {request.path} -> {response.status_code}")
        self.hub.notify(
            {
                "type": "request.completed",
                "method": request.method,
                "path": request.path,
                "status_code": response.status_code,
            }
        )

    def create_http_app(self):
        """FastAPI application serving the front controller."""
        from designkit.api.server import create_fastapi_app

        self.initialize()
        return create_fastapi_app(self.front_controller, self.config.server)

    @property
    def is_initialized(self) -> bool:
        return self._initialized
