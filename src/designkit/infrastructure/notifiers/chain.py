"""Builds notifier decorator chains from channel names."""

from typing import Any, Dict, Iterable, Optional

from designkit.domain.ports.notifier_port import Notifier
from designkit.infrastructure.factories.kind_registry import KindRegistry
from designkit.infrastructure.notifiers.decorators import (
    SlackNotifierDecorator,
    SMSNotifierDecorator,
    SNSNotifierDecorator,
)
from designkit.infrastructure.notifiers.email_notifier import EmailNotifier


def create_channel_registry() -> KindRegistry[Notifier]:
    """Registry of the built-in decorator channels."""
    registry: KindRegistry[Notifier] = KindRegistry("notifier_channels")
    registry.register("sms", SMSNotifierDecorator, "SMS delivery")
    registry.register("slack", SlackNotifierDecorator, "Slack delivery")
    registry.register("sns", SNSNotifierDecorator, "AWS SNS topic delivery")
    return registry


def build_notifier_chain(
    channels: Iterable[str],
    base: Optional[Notifier] = None,
    channel_options: Optional[Dict[str, Dict[str, Any]]] = None,
    registry: Optional[KindRegistry[Notifier]] = None,
) -> Notifier:
    """
    Wrap ``base`` in one decorator per channel.

    The first channel is the innermost layer, the last one is the entry point.

    Raises:
        UnsupportedKindError: If a channel is not registered
    """
    registry = registry or create_channel_registry()
    channel_options = channel_options or {}
    notifier = base or EmailNotifier()
    for channel in channels:
        options = channel_options.get(KindRegistry.normalize(channel), {})
        notifier = registry.create(channel, notifier, **options)
    return notifier
