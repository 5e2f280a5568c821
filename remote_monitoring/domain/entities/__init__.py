"""
Domain Entities Package

Device record entities and the errors raised while reading them.
"""

from .device import (
    DeviceProperties,
    DeviceRecord,
    DeviceState,
    HubProperties,
    SystemProperties,
)
from .errors import DomainError, InvalidArgumentError, RequiredPropertyMissingError

__all__ = [
    "DeviceRecord",
    "DeviceProperties",
    "DeviceState",
    "HubProperties",
    "SystemProperties",
    "DomainError",
    "InvalidArgumentError",
    "RequiredPropertyMissingError",
]
