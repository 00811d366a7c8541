"""Tests for environment-driven settings and error context."""

import logging

import pytest
from pydantic import ValidationError

from eitherfx import NoMatchingCaseError, ScopeStateError
from eitherfx.config import (
    EitherSettings,
    configure_logging,
    get_settings,
    parse_bool_env,
    reset_settings,
)


class TestEitherSettings:
    def test_defaults(self):
        settings = EitherSettings()

        assert settings.trace_scopes is False
        assert settings.log_level is None
        assert settings.annotate_recovery_failures is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("EITHERFX_TRACE_SCOPES", "yes")
        monkeypatch.setenv("EITHERFX_LOG_LEVEL", "debug")
        monkeypatch.setenv("EITHERFX_ANNOTATE_RECOVERY", "0")

        settings = EitherSettings.from_env()

        assert settings.trace_scopes is True
        assert settings.log_level == "DEBUG"
        assert settings.annotate_recovery_failures is False

    def test_blank_log_level_means_unset(self):
        assert EitherSettings(log_level="  ").log_level is None

    def test_invalid_log_level_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            EitherSettings(log_level="LOUD")

    def test_settings_are_frozen(self):
        settings = EitherSettings()
        with pytest.raises(ValidationError):
            settings.trace_scopes = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("ON", True), ("1", True), ("false", False), ("no", False)],
    )
    def test_parse_bool_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("EITHERFX_FLAG", raw)
        assert parse_bool_env("EITHERFX_FLAG") is expected

    def test_parse_bool_env_default(self):
        assert parse_bool_env("EITHERFX_MISSING", default=True) is True


class TestCachedSettings:
    def test_cached_until_reset(self, monkeypatch, fresh_settings):
        first = get_settings()
        monkeypatch.setenv("EITHERFX_TRACE_SCOPES", "true")

        assert get_settings() is first

        reset_settings()
        assert get_settings().trace_scopes is True


class TestConfigureLogging:
    def test_applies_level_to_package_logger(self):
        logger = logging.getLogger("eitherfx")
        previous = logger.level
        try:
            configured = configure_logging(EitherSettings(log_level="WARNING"))
            assert configured is logger
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)

    def test_unset_level_leaves_logger_alone(self):
        logger = logging.getLogger("eitherfx")
        previous = logger.level
        configure_logging(EitherSettings())
        assert logger.level == previous


class TestErrorContext:
    def test_scope_state_error_context(self):
        error = ScopeStateError("slot written twice", scope="comprehension")
        context = error.get_error_context()

        assert context["error_type"] == "ScopeStateError"
        assert context["error_code"] == "ScopeStateError"
        assert context["scope"] == "comprehension"
        assert isinstance(error, RuntimeError)

    def test_no_matching_case_context(self):
        context = NoMatchingCaseError(3.5).get_error_context()

        assert context["value_type"] == "float"
        assert "3.5" in context["message"]
