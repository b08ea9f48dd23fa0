"""Notifiers - base e-mail notifier, its decorators and the chain builder."""

from .chain import build_notifier_chain, create_channel_registry
from .decorators import (
    NotifierDecorator,
    SlackNotifierDecorator,
    SMSNotifierDecorator,
    SNSNotifierDecorator,
)
from .email_notifier import EmailNotifier

__all__ = [
    "EmailNotifier",
    "NotifierDecorator",
    "SMSNotifierDecorator",
    "SlackNotifierDecorator",
    "SNSNotifierDecorator",
    "build_notifier_chain",
    "create_channel_registry",
]
