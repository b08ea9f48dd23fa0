"""
Command bus.

Mediates between callers and command handlers. The handler registry is
explicit: handlers are registered per command type at start-up and looked up
by exact command type at dispatch time. Middleware wraps every dispatch.
"""
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Type

from designkit.application.dto.base import BaseCommand, CommandResult
from designkit.application.handlers import BaseCommandHandler
from designkit.domain.exceptions import ConfigurationError, HandlerNotFoundError
from designkit.infrastructure.logging.logger import get_logger


class BusMiddleware(ABC):
    """Base class for bus middleware."""

    @abstractmethod
    def execute(self, message: Any, next_handler: Callable[[], Any]) -> Any:
        """Execute middleware logic, calling ``next_handler`` to continue the chain."""


class LoggingMiddleware(BusMiddleware):
    """Middleware for logging bus operations."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger(__name__)

    def execute(self, message: Any, next_handler: Callable[[], Any]) -> Any:
        """Log bus operations."""
        message_type = type(message).__name__
        start_time = time.time()

        self.logger.debug("Executing command", command=message_type)

        try:
            result = next_handler()
            execution_time = time.time() - start_time
            self.logger.debug("Completed command", command=message_type, duration=round(execution_time, 3))
            return result
        except Exception as e:
            execution_time = time.time() - start_time
            self.logger.error(
                "Failed command", command=message_type, duration=round(execution_time, 3), error=str(e)
            )
            raise


class ValidationMiddleware(BusMiddleware):
    """Middleware for validating messages."""

    def execute(self, message: Any, next_handler: Callable[[], Any]) -> Any:
        """Validate message before processing."""
        if message is None:
            raise ValueError("Message cannot be None")
        if not isinstance(message, BaseCommand):
            raise TypeError(f"Expected a command, got {type(message).__name__}")
        return next_handler()


class CommandBus:
    """
    Bus for dispatching commands to their handlers.

    Callers build a command and hand it to ``dispatch``; they never call the
    handler themselves.
    """

    def __init__(self, logger=None, default_middleware: bool = True):
        self.logger = logger or get_logger(__name__)
        self.middleware: List[BusMiddleware] = []
        self._handlers: Dict[Type[BaseCommand], BaseCommandHandler] = {}
        self._lock = threading.Lock()

        if default_middleware:
            self.add_middleware(LoggingMiddleware(self.logger))
            self.add_middleware(ValidationMiddleware())

    def add_middleware(self, middleware: BusMiddleware) -> None:
        """Add middleware to the bus. The first added runs outermost."""
        self.middleware.append(middleware)
        self.logger.debug("Added middleware", middleware=type(middleware).__name__)

    def register_handler(self, command_type: Type[BaseCommand], handler: BaseCommandHandler) -> None:
        """
        Register the handler for a command type.

        Raises:
            ConfigurationError: If the command type already has a handler
        """
        with self._lock:
            if command_type in self._handlers:
                raise ConfigurationError(
                    f"Handler already registered for command type: {command_type.__name__}"
                )
            self._handlers[command_type] = handler
        self.logger.debug(
            "Registered command handler",
            command=command_type.__name__,
            handler=type(handler).__name__,
        )

    def get_handler(self, command_type: Type[BaseCommand]) -> BaseCommandHandler:
        """
        Get the handler registered for a command type.

        Raises:
            HandlerNotFoundError: If no handler is registered
        """
        handler = self._handlers.get(command_type)
        if handler is None:
            raise HandlerNotFoundError(command_type)
        return handler

    def has_handler(self, command_type: Type[BaseCommand]) -> bool:
        return command_type in self._handlers

    def dispatch(self, command: BaseCommand) -> CommandResult:
        """
        Dispatch a command to its handler through the middleware chain.

        The handler is invoked exactly once per dispatch.

        Raises:
            HandlerNotFoundError: If no handler is registered for the command type
        """
        def final_handler() -> CommandResult:
            handler = self.get_handler(type(command))
            return handler.handle(command)

        chain: Callable[[], CommandResult] = final_handler
        for middleware in reversed(self.middleware):
            chain = self._link(middleware, command, chain)
        return chain()

    @staticmethod
    def _link(
        middleware: BusMiddleware, command: BaseCommand, next_handler: Callable[[], Any]
    ) -> Callable[[], Any]:
        return lambda: middleware.execute(command, next_handler)

    def registered_commands(self) -> List[str]:
        """Names of command types with a registered handler."""
        return sorted(command_type.__name__ for command_type in self._handlers)
