"""Unit tests for structured logging configuration.

Tests the structlog configuration and logging output format.
"""

import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from src.infrastructure.observability.correlation import set_correlation_id
from src.infrastructure.observability.logging import (
    _get_log_level,
    build_processors,
    configure_structlog,
)


class TestBuildProcessors:
    def test_production_ends_with_json_renderer(self) -> None:
        processors = build_processors("production")

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_ends_with_console_renderer(self) -> None:
        processors = build_processors("development")

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ValueError, match="environment must be one of"):
            build_processors("staging")


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_defaults_to_production(self) -> None:
        configure_structlog()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestLogOutput:
    """Tests for actual log output format."""

    @pytest.fixture(autouse=True)
    def setup_production_logging(self) -> None:
        configure_structlog(environment="production")

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        set_correlation_id("test-json-output")

        structlog.get_logger().info("test_event", custom_field="value")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["event"] == "test_event"
        assert log_entry["level"] == "info"
        assert "T" in log_entry["timestamp"]
        assert log_entry["correlation_id"] == "test-json-output"
        assert log_entry["custom_field"] == "value"

    def test_additional_context_preserved(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        structlog.get_logger().info(
            "context_test",
            service="ApplicantRegistryService",
            operation="verify_applicant",
            verification_timestamp=123,
            nested={"key": "value"},
        )

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["service"] == "ApplicantRegistryService"
        assert log_entry["operation"] == "verify_applicant"
        assert log_entry["verification_timestamp"] == 123
        assert log_entry["nested"] == {"key": "value"}
        assert "correlation_id" not in log_entry


class TestLogLevelConfiguration:
    """Tests for log level configuration."""

    def test_default_log_level_is_info(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.INFO

    def test_log_level_from_environment(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert _get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            assert _get_log_level() == logging.INFO

    def test_debug_suppressed_at_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO"}):
            configure_structlog(environment="production")

        structlog.get_logger().debug("debug_level_test")

        assert capsys.readouterr().out == ""
