"""Enumerations shared across layers."""

from enum import Enum


class EnumEnvironment(str, Enum):
    """Deployment environment the package runs in."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumLogRenderer(str, Enum):
    """Output format of structured log lines."""

    CONSOLE = "console"
    JSON = "json"

    @classmethod
    def for_environment(cls, environment: str) -> "EnumLogRenderer":
        if environment.lower() == EnumEnvironment.PRODUCTION.value:
            return cls.JSON
        return cls.CONSOLE
