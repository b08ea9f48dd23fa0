"""Base DTO classes with a stable API and snake_case format."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Instances are frozen: once built, a DTO's fields never change.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Stable public API - returns a snake_case dictionary."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseDTO":
        """Stable public API - creates an instance from a snake_case dictionary."""
        return cls.model_validate(data)


class BaseCommand(BaseDTO):
    """Base class for command DTOs."""
    command_id: Optional[str] = None
    correlation_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseDTO):
    """Result returned by a command handler."""
    success: bool = True
    message: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
