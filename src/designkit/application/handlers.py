"""
Command handler hierarchy.

A handler consumes one command instance per call. Handlers are never called
directly by callers; the command bus locates and invokes them.
"""

import time
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from designkit.application.commands import SendWelcomeNotificationCommand
from designkit.application.dto.base import BaseCommand, CommandResult
from designkit.domain.ports.notifier_port import Notifier
from designkit.infrastructure.logging.logger import get_logger

TCommand = TypeVar("TCommand", bound=BaseCommand)


class BaseCommandHandler(ABC, Generic[TCommand]):
    """
    Base for all command handlers.

    ``handle`` is the template method: validate, execute, log timing.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger(self.__class__.__module__)

    def handle(self, command: TCommand) -> CommandResult:
        """Handle one command."""
        operation_id = f"{self.__class__.__name__}.handle"
        start_time = time.time()
        self.logger.debug("Starting command", operation=operation_id)

        self.validate_command(command)
        result = self.execute_command(command)

        duration = time.time() - start_time
        self.logger.debug("Completed command", operation=operation_id, duration=round(duration, 3))
        return result

    def validate_command(self, command: TCommand) -> None:
        """
        Validate command before execution.

        Override in specific handlers for custom validation logic.
        """
        if command is None:
            raise ValueError("Command cannot be None")

    @abstractmethod
    def execute_command(self, command: TCommand) -> CommandResult:
        """Execute the specific command logic."""


class SendWelcomeNotificationHandler(BaseCommandHandler[SendWelcomeNotificationCommand]):
    """Sends the welcome message through the injected notifier."""

    def __init__(self, notifier: Notifier, template: str = "Welcome, {name}!", logger=None):
        super().__init__(logger)
        self.notifier = notifier
        self.template = template

    def execute_command(self, command: SendWelcomeNotificationCommand) -> CommandResult:
        message = self.template.format(name=command.name, email=command.email)
        deliveries = self.notifier.send(message)
        self.logger.info(
            "Welcome notification sent",
            email=command.email,
            channels=len(deliveries),
            correlation_id=command.correlation_id,
        )
        return CommandResult(
            message=f"Welcome notification sent to {command.email}",
            data={"email": command.email, "name": command.name, "deliveries": deliveries},
        )

