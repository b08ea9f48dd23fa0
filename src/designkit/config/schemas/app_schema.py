"""Main application configuration schema."""

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig
from .server_schema import ServerConfig


class EventsConfig(BaseModel):
    """Observer hub configuration."""

    failure_policy: str = Field(
        "continue", description="What the hub does when an observer fails (continue, fail_fast)"
    )
    audit_trail_size: int = Field(
        1000, ge=1, description="Events kept by the audit observer and messages kept by the application log"
    )

    @field_validator("failure_policy")
    @classmethod
    def validate_failure_policy(cls, v: str) -> str:
        """Validate failure policy."""
        valid_policies = ["continue", "fail_fast"]
        if v not in valid_policies:
            raise ValueError(f"Failure policy must be one of {valid_policies}")
        return v


class PricingConfig(BaseModel):
    """Tax strategy configuration."""

    default_strategy: str = Field("standard", description="Tax strategy used when none is given")
    rates: Dict[str, float] = Field(
        default_factory=lambda: {"standard": 1.2, "reduced": 1.055, "exempt": 1.0},
        description="Tax multiplier per strategy name",
    )

    @field_validator("rates")
    @classmethod
    def validate_rates(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate tax rates."""
        for name, rate in v.items():
            if not math.isfinite(rate) or rate < 0:
                raise ValueError(f"Tax rate for '{name}' must be a finite, non-negative number")
        return v


class NotificationsConfig(BaseModel):
    """Notifier chain configuration."""

    channels: List[str] = Field(
        default_factory=lambda: ["sms"],
        description="Decorator channels wrapped around the base e-mail notifier, innermost first",
    )
    sender: str = Field("noreply@designkit.local", description="Sender address of the e-mail notifier")
    sns_topic_arn: Optional[str] = Field(None, description="SNS topic used by the sns channel")
    aws_region: str = Field("us-east-1", description="AWS region of the SNS topic")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    events: EventsConfig = Field(default_factory=lambda: EventsConfig())
    pricing: PricingConfig = Field(default_factory=lambda: PricingConfig())
    notifications: NotificationsConfig = Field(default_factory=lambda: NotificationsConfig())
    server: ServerConfig = Field(default_factory=lambda: ServerConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create a validated configuration from a plain dictionary."""
        return cls.model_validate(data)
