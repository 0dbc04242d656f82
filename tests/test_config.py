"""Tests for ResolverConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from policygraph import ConfigurationError, LogLevel, ResolverConfig, load_resolver_config_from_env
from policygraph.config import split_roleid


class TestResolverConfig:
    """Tests for ResolverConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating a ResolverConfig with defaults."""
        config = ResolverConfig()
        assert config.account is None
        assert config.ownerid is None
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False

    def test_create_custom_config(self) -> None:
        """Test creating a ResolverConfig with custom values."""
        config = ResolverConfig(
            account="acme",
            ownerid="acme:user:admin",
            log_level=LogLevel.DEBUG,
            log_json=True,
        )
        assert config.account == "acme"
        assert config.ownerid == "acme:user:admin"
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True

    def test_log_level_from_string(self) -> None:
        """Test creating config with log level as lowercase string."""
        config = ResolverConfig(log_level="debug")
        assert config.log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        """Test creating config with invalid log level."""
        with pytest.raises(ValueError, match="Invalid log level"):
            ResolverConfig(log_level="INVALID")

    def test_ownerid_validation_invalid(self) -> None:
        """An ownerid without three segments is rejected."""
        for ownerid in ("admin", "user:admin"):
            with pytest.raises(ValueError, match="fully qualified"):
                ResolverConfig(ownerid=ownerid)

    def test_ownerid_identifier_may_contain_colons(self) -> None:
        """Config accepts the same ownerids as split_roleid."""
        config = ResolverConfig(ownerid="acme:host:build:01")
        assert split_roleid(config.ownerid) == ("acme", "host", "build:01")

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are forbidden."""
        with pytest.raises(Exception):  # Pydantic validation error
            ResolverConfig(namespace="value")  # type: ignore[call-arg]

    def test_require_identity(self) -> None:
        """Both account and ownerid must be present."""
        assert ResolverConfig(account="acme", ownerid="acme:user:admin").require_identity() == (
            "acme",
            "acme:user:admin",
        )
        with pytest.raises(ConfigurationError, match="ownerid is required"):
            ResolverConfig(account="acme").require_identity()


class TestSplitRoleid:
    """Tests for split_roleid."""

    def test_three_segments(self) -> None:
        assert split_roleid("acme:group:admins") == ("acme", "group", "admins")

    def test_invalid(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            split_roleid("acme:admins")
        assert exc_info.value.details == {"ownerid": "acme:admins"}


class TestLoadResolverConfigFromEnv:
    """Tests for load_resolver_config_from_env function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_load_defaults(self) -> None:
        """Test loading config with no environment variables."""
        config = load_resolver_config_from_env()
        assert config.account is None
        assert config.ownerid is None
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False

    @patch.dict(
        os.environ,
        {
            "POLICY_ACCOUNT": "acme",
            "POLICY_OWNERID": "acme:user:admin",
            "LOG_LEVEL": "DEBUG",
            "LOG_JSON": "true",
        },
        clear=True,
    )
    def test_load_from_env(self) -> None:
        """Test loading config from environment variables."""
        config = load_resolver_config_from_env()
        assert config.account == "acme"
        assert config.ownerid == "acme:user:admin"
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True

    @patch.dict(os.environ, {"POLICY_ACCOUNT": ""}, clear=True)
    def test_empty_account_is_unset(self) -> None:
        """An empty variable counts as missing."""
        assert load_resolver_config_from_env().account is None

    @patch.dict(os.environ, {"POLICY_OWNERID": "admin"}, clear=True)
    def test_invalid_ownerid_from_env(self) -> None:
        """A malformed ownerid in the environment fails validation."""
        with pytest.raises(ValueError):
            load_resolver_config_from_env()
