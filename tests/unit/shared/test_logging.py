from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from remote_monitoring.shared.consts import EnumLogRenderer
from remote_monitoring.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "devices.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("device_schema.test_event", device_id="dev-1")

    for handler in root.handlers:
        handler.flush()
    assert "device_schema.test_event" in log_file.read_text(encoding="utf-8")


def test_renderer_follows_environment() -> None:
    assert EnumLogRenderer.for_environment("production") is EnumLogRenderer.JSON
    assert EnumLogRenderer.for_environment("PRODUCTION") is EnumLogRenderer.JSON
    assert EnumLogRenderer.for_environment("development") is EnumLogRenderer.CONSOLE


def test_get_logger_returns_structlog_proxy() -> None:
    configure_logging(level="INFO")
    logger = get_logger("remote_monitoring.tests")
    bound = logger.bind(device_id="dev-1")
    assert isinstance(bound, structlog.stdlib.BoundLogger)


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.ERROR


def test_update_logging_from_settings_logs_failures(caplog) -> None:
    update_logging_from_settings(object())

    assert any(
        "Failed to update logging from settings" in record.getMessage()
        for record in caplog.records
    )
