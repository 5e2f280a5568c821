"""
Domain Errors

Errors raised by the device schema helpers.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a required argument was passed as ``None``."""

    def __init__(self, argument: str, details: Optional[Dict[str, Any]] = None):
        self.argument = argument
        message = f"Argument '{argument}' must not be None"
        super().__init__(message, {"argument": argument, **(details or {})})


class RequiredPropertyMissingError(DomainError):
    """Raised when a mandatory property of a device record is missing.

    This points at bad data in the stored record, retrying will not help.
    """

    def __init__(
        self, property_name: str, details: Optional[Dict[str, Any]] = None
    ):
        self.property_name = property_name
        message = f"'{property_name}' property is missing"
        super().__init__(message, {"property": property_name, **(details or {})})
