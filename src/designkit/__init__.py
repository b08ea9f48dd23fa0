"""designkit - Root Package.

A small library of object-oriented design patterns, each restated as a
tiny component with an explicit capability interface.

Key Components:
    - domain: capability ports, exceptions, strategies and the event hub
    - application: commands, command handlers and the command bus
    - infrastructure: singleton registry, factories, adapters, notifiers, logging
    - api: front controller and the FastAPI surface in front of it
    - config: pydantic configuration schemas and manager
    - cli: one demo entry point per pattern

Usage:
    >>> designkit strategy --price 100 --rate 1.2
    >>> designkit command --email a@b.com --name A
"""

from ._version import __version__

PACKAGE_NAME = "designkit"

__all__ = ["__version__", "PACKAGE_NAME"]
