"""Base notifier at the core of every decorator chain."""

from typing import List

from designkit.domain.ports.notifier_port import Notifier
from designkit.infrastructure.logging.logger import get_logger


class EmailNotifier(Notifier):
    """Sends messages by e-mail. Sent messages are kept in ``outbox``."""

    channel = "email"

    def __init__(self, sender: str = "noreply@designkit.local"):
        self.sender = sender
        self.outbox: List[str] = []
        self.logger = get_logger(__name__)

    def send(self, message: str) -> List[str]:
        self.outbox.append(message)
        self.logger.info("E-mail sent", sender=self.sender, length=len(message))
        return [f"{self.channel}: {message}"]
