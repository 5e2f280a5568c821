"""
Shared module - Cross-cutting concerns

Constants, enums and the logging setup used by every layer of the device
schema package. Nothing in here may depend on the domain or infrastructure
layers.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumLogRenderer
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumLogRenderer",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
