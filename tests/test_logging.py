"""Tests for policygraph.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from policygraph import (
    Group,
    LogLevel,
    Policy,
    ResolverConfig,
    Resolver,
    get_resolver_logger,
    safe_preview,
    setup_logging,
)
from policygraph.logging import PolicyGraphFormatter


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        """Test that None returns empty string."""
        assert safe_preview(None) == ""

    def test_string_with_whitespace(self) -> None:
        """Test that whitespace is normalized."""
        assert safe_preview("hello\n\tworld  test") == "hello world test"

    def test_string_truncation(self) -> None:
        """Test that long strings are truncated."""
        result = safe_preview("a" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_dict_value(self) -> None:
        """Test that dicts are converted to JSON."""
        result = safe_preview({"id": "myapp", "kind": "policy"})
        assert '"id": "myapp"' in result

    def test_record_value(self) -> None:
        """Records are rendered through their str()."""
        assert safe_preview(Group(id="admins")) == "Group 'admins'"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_config(self) -> None:
        """Test logging setup with ResolverConfig."""
        setup_logging(config=ResolverConfig(log_level=LogLevel.DEBUG), json_format=False)
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_with_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test logging setup loading from environment."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging(json_format=False)
        assert logging.getLogger().level == logging.WARNING

    def test_json_format(self, capsys: pytest.CaptureFixture) -> None:
        """Test JSON format output."""
        setup_logging(config=ResolverConfig(log_level=LogLevel.INFO), json_format=True)

        logging.getLogger("test").info("Test message")

        stderr_output = capsys.readouterr().err.strip()
        data = json.loads(stderr_output)
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "test"

    def test_json_from_config(self, capsys: pytest.CaptureFixture) -> None:
        """log_json selects the JSON format when not overridden."""
        setup_logging(config=ResolverConfig(log_level=LogLevel.INFO, log_json=True))

        logging.getLogger("test").info("Test message")

        assert capsys.readouterr().err.strip().startswith("{")

    def test_plain_format(self, capsys: pytest.CaptureFixture) -> None:
        """Test plain text format output."""
        setup_logging(config=ResolverConfig(log_level=LogLevel.INFO), json_format=False)

        logging.getLogger("test").info("Test message")

        stderr_output = capsys.readouterr().err.strip()
        assert "INFO" in stderr_output
        assert "Test message" in stderr_output
        assert not stderr_output.startswith("{")


class TestResolverLogger:
    """Tests for the resolver logger adapter."""

    def test_adds_resolver_name(self, caplog: pytest.LogCaptureFixture) -> None:
        """The pass name is attached to every record."""
        logger = get_resolver_logger("test", resolver="namespace")

        with caplog.at_level(logging.INFO):
            logger.info("Test message")

        assert caplog.records[0].resolver == "namespace"

    def test_policy_id_per_call(self, caplog: pytest.LogCaptureFixture) -> None:
        """policy_id can be given per call."""
        logger = get_resolver_logger("test", resolver="owner")

        with caplog.at_level(logging.INFO):
            logger.info("Entering policy", policy_id="myapp")

        assert caplog.records[0].policy_id == "myapp"

    def test_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        """No context fields are added when none are given."""
        logger = get_resolver_logger("test")

        with caplog.at_level(logging.INFO):
            logger.info("Test message")

        assert not hasattr(caplog.records[0], "resolver")

    def test_passes_log_policy_scopes(self, caplog: pytest.LogCaptureFixture) -> None:
        """Resolution logs policy scope changes at debug level."""
        with caplog.at_level(logging.DEBUG, logger="policygraph"):
            Resolver.resolve(Policy(id="myapp", body=[Group(id="g")]), "acme", "acme:user:admin")

        scoped = [r for r in caplog.records if getattr(r, "policy_id", None) == "myapp"]
        assert {r.resolver for r in scoped} == {"namespace", "owner"}


class TestPolicyGraphFormatter:
    """Tests for PolicyGraphFormatter."""

    def _record(self) -> logging.LogRecord:
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        record.resolver = "flatten"
        record.policy_id = "myapp"
        return record

    def test_json_format(self) -> None:
        """Test JSON formatter."""
        data = json.loads(PolicyGraphFormatter(json_format=True).format(self._record()))
        assert data["level"] == "INFO"
        assert data["resolver"] == "flatten"
        assert data["policy_id"] == "myapp"

    def test_plain_format(self) -> None:
        """Test plain text formatter."""
        result = PolicyGraphFormatter(json_format=False).format(self._record())
        assert "INFO" in result
        assert "resolver=flatten" in result
        assert "policy=myapp" in result
        assert result.endswith(": Test message")
