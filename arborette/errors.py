from __future__ import annotations

"""Exceptions raised by arborette."""

__all__ = [
    "ArboretteError",
    "InvalidArgumentError",
    "CycleError",
    "ConfigError",
]


class ArboretteError(Exception):
    """Base class for every arborette error."""
    pass


class InvalidArgumentError(ArboretteError, ValueError):
    """Raised when a node, label or option is absent or of the wrong kind."""
    pass


class CycleError(ArboretteError, ValueError):
    """Raised when adding a child would make a node its own ancestor."""
    pass


class ConfigError(ArboretteError):
    """Raised when a configuration file cannot be read or validated."""
    pass
