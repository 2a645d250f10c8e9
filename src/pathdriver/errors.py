"""Error definitions for pathdriver."""

from typing import Any, Dict


class PathDriverError(Exception):
    """Base exception for all pathdriver errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class InvalidArgumentError(PathDriverError, TypeError):
    """A path operation received an argument of the wrong type or shape."""
    pass


class ConfigurationError(PathDriverError):
    """Configuration is invalid or names an unknown driver."""
    pass


def type_name(value: Any) -> str:
    """Return the type name reported in invalid-argument messages."""
    if value is None:
        return "None"
    return type(value).__name__
