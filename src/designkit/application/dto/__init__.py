"""Application DTOs."""

from .base import BaseCommand, BaseDTO, CommandResult

__all__ = ["BaseCommand", "BaseDTO", "CommandResult"]
