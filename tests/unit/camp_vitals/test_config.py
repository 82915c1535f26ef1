"""
Tests for configuration management in `camp_vitals/config.py`.

Covers:
- Environment parsing and debug defaults
- Logging level coercion to the expected Literal
- Evaluation settings from the environment
- get_config cache behavior
- AppConfig validation (debug only allowed in development)
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from camp_vitals.config import (
    AppConfig,
    EvaluationConfig,
    LoggingConfig,
    get_config,
    load_config_from_env,
)


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    """Ensure get_config cache is cleared before and after each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "LOG_LEVEL", "CAMP_NAME", "REDACT_READINGS"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_dev_defaults() -> None:
    config = load_config_from_env()

    assert config.environment == "development"
    assert config.debug is True
    assert config.logging.format == "console"
    assert config.logging.level == "INFO"
    assert config.evaluation.camp_name == "Health Camp"
    assert config.evaluation.redact_readings is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("dev", "development"), ("Stage", "staging"), ("prod", "production"), ("qa", "production")],
)
def test_environment_aliases(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
) -> None:
    monkeypatch.setenv("ENVIRONMENT", raw)
    assert load_config_from_env().environment == expected


def test_production_uses_json_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    config = load_config_from_env()

    assert config.debug is False
    assert config.logging.format == "json"


def test_logging_level_literal_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")

    # Unknown level should coerce to INFO
    monkeypatch.setenv("LOG_LEVEL", "unknown")
    assert load_config_from_env().logging.level == "INFO"

    # Known level should pass through
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_config_from_env().logging.level == "DEBUG"


def test_evaluation_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAMP_NAME", "Ward 7 Camp")
    monkeypatch.setenv("REDACT_READINGS", "no")

    config = load_config_from_env()

    assert config.evaluation.camp_name == "Ward 7 Camp"
    assert config.evaluation.redact_readings is False


def test_get_config_cache() -> None:
    c1 = get_config()
    c2 = get_config()
    assert c1 is c2  # same object due to lru_cache


def test_app_config_debug_only_in_dev_validation() -> None:
    with pytest.raises(ValueError, match="debug mode is only allowed"):
        AppConfig(
            environment="production",
            debug=True,
            evaluation=EvaluationConfig(),
            logging=LoggingConfig(),
        )


def test_blank_camp_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        EvaluationConfig(camp_name="")
