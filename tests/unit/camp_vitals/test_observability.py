"""Tests for structlog configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from camp_vitals.config import LoggingConfig
from camp_vitals.observability import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


def test_console_format_uses_console_renderer() -> None:
    configure_logging(LoggingConfig(level="DEBUG", format="console"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert processors[0] is structlog.stdlib.filter_by_level


def test_json_format_uses_json_renderer() -> None:
    configure_logging(LoggingConfig(format="json"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)
