"""Commands - immutable descriptions of intended actions."""
from pydantic import field_validator

from designkit.application.dto.base import BaseCommand


class SendWelcomeNotificationCommand(BaseCommand):
    """Ask for a welcome notification to be sent to a new user."""
    email: str
    name: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate e-mail address shape."""
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError(f"Invalid e-mail address: {v}")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate recipient name."""
        if not v.strip():
            raise ValueError("Name must not be empty")
        return v
