"""Tests for environment and configuration validation."""

import logging
from types import SimpleNamespace

import pytest

from mentorme.core.config import validate_config
from mentorme.core.validation import EnvValidationError, validate_env


def make_settings(**overrides):
    defaults = dict(
        ENV="development",
        GROQ_API_KEY=None,
        SUMMARIZER_ENABLED=True,
        SUMMARIZER_TIMEOUT_SECONDS=8.0,
        SUMMARIZER_MAX_TOKENS=80,
        OTEL_EXPORTER="console",
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def test_valid_production_config_passes():
    validate_env(settings_obj=make_settings(ENV="production", GROQ_API_KEY="gsk_test"))


def test_missing_groq_key_in_production_fails():
    with pytest.raises(EnvValidationError):
        validate_env(settings_obj=make_settings(ENV="production"))


def test_production_without_summarizer_needs_no_key():
    validate_env(settings_obj=make_settings(ENV="production", SUMMARIZER_ENABLED=False))


def test_unknown_env_fails():
    with pytest.raises(EnvValidationError):
        validate_env(settings_obj=make_settings(ENV="prod-eu"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"SUMMARIZER_TIMEOUT_SECONDS": 0},
        {"SUMMARIZER_MAX_TOKENS": -1},
        {"OTEL_EXPORTER": "jaeger"},
    ],
)
def test_invalid_summarizer_or_tracing_settings_fail(overrides):
    with pytest.raises(EnvValidationError):
        validate_env(settings_obj=make_settings(**overrides))


def test_skip_env_validation_bypass(monkeypatch):
    monkeypatch.setenv("SKIP_ENV_VALIDATION", "1")
    validate_env(settings_obj=make_settings(ENV="production"))


def test_config_warns_when_key_missing(caplog):
    logger = logging.getLogger("mentorme.test_config")
    with caplog.at_level(logging.WARNING, logger="mentorme.test_config"):
        assert validate_config(strict=False, settings_obj=make_settings(), logger=logger) is True
    assert "GROQ_API_KEY" in caplog.text


def test_config_strict_mode_raises():
    with pytest.raises(RuntimeError):
        validate_config(strict=True, settings_obj=make_settings())


def test_config_disabled_summarizer_needs_nothing():
    assert validate_config(strict=True, settings_obj=make_settings(SUMMARIZER_ENABLED=False)) is True
