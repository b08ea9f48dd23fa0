"""Notifier decorators.

Each decorator owns exactly one inner notifier. ``send`` always delegates to
the inner notifier first and then adds its own delivery, so the records of a
chain come out innermost (the base notifier) first and outermost last.
Failures raised by the inner notifier propagate unchanged.
"""

from abc import abstractmethod
from typing import Any, List, Optional

import boto3

from designkit.domain.exceptions import ConfigurationError
from designkit.domain.ports.notifier_port import Notifier
from designkit.infrastructure.logging.logger import get_logger


class NotifierDecorator(Notifier):
    """Base decorator: delegates, then delivers on its own channel."""

    channel = ""

    def __init__(self, wrapped: Notifier):
        self._wrapped = wrapped
        self.logger = get_logger(__name__)

    @property
    def wrapped(self) -> Notifier:
        """The inner notifier."""
        return self._wrapped

    def send(self, message: str) -> List[str]:
        records = self._wrapped.send(message)
        self.deliver(message)
        records.append(f"{self.channel}: {message}")
        return records

    @abstractmethod
    def deliver(self, message: str) -> None:
        """Deliver the message on this decorator's channel."""


class SMSNotifierDecorator(NotifierDecorator):
    """Adds an SMS delivery."""

    channel = "sms"

    def __init__(self, wrapped: Notifier, phone_number: str = "+33000000000"):
        super().__init__(wrapped)
        self.phone_number = phone_number
        self.sent: List[str] = []

    def deliver(self, message: str) -> None:
        self.sent.append(message)
        self.logger.info("SMS sent", phone_number=self.phone_number)


class SlackNotifierDecorator(NotifierDecorator):
    """Adds a Slack delivery."""

    channel = "slack"

    def __init__(self, wrapped: Notifier, slack_channel: str = "#general"):
        super().__init__(wrapped)
        self.slack_channel = slack_channel
        self.sent: List[str] = []

    def deliver(self, message: str) -> None:
        self.sent.append(message)
        self.logger.info("Slack message posted", slack_channel=self.slack_channel)


class SNSNotifierDecorator(NotifierDecorator):
    """Adds a delivery to an AWS SNS topic."""

    channel = "sns"

    def __init__(
        self,
        wrapped: Notifier,
        topic_arn: Optional[str] = None,
        region_name: str = "us-east-1",
        sns_client: Optional[Any] = None,
    ):
        super().__init__(wrapped)
        if not topic_arn:
            raise ConfigurationError("topic_arn is required for the sns channel", ["topic_arn"])
        self.topic_arn = topic_arn
        self._client = sns_client or boto3.client("sns", region_name=region_name)
        self.message_ids: List[str] = []

    def deliver(self, message: str) -> None:
        response = self._client.publish(TopicArn=self.topic_arn, Message=message)
        self.message_ids.append(response["MessageId"])
        self.logger.info("SNS message published", topic_arn=self.topic_arn, message_id=response["MessageId"])
