"""Tests for the policygraph exception hierarchy and registry."""

from __future__ import annotations

import pytest

from policygraph.exceptions import (
    ConfigurationError,
    DependencyCycleError,
    DuplicateRecordError,
    InvalidRelativeReferenceError,
    MissingIdentifierError,
    PolicyGraphError,
    ResolutionError,
    error_registry,
    register_error,
)


class TestErrorHierarchy:
    """Tests for exception classes."""

    def test_default_message_and_code(self) -> None:
        """Class defaults are used when nothing is passed."""
        error = DuplicateRecordError()
        assert error.code == "DUPLICATE_RECORD"
        assert error.message == "Record is declared more than once"
        assert str(error) == "Record is declared more than once"

    def test_details(self) -> None:
        """Keyword arguments become details."""
        error = MissingIdentifierError("Group has a blank id", record="Group")
        assert error.details == {"record": "Group"}
        assert str(error) == "Group has a blank id"

    def test_code_override(self) -> None:
        """The code can be overridden per instance."""
        assert PolicyGraphError("boom", code="CUSTOM").code == "CUSTOM"

    @pytest.mark.parametrize(
        "error_cls",
        [
            MissingIdentifierError,
            InvalidRelativeReferenceError,
            DependencyCycleError,
            DuplicateRecordError,
        ],
    )
    def test_resolution_errors(self, error_cls: type[PolicyGraphError]) -> None:
        """Graph errors share the ResolutionError base."""
        assert issubclass(error_cls, ResolutionError)
        assert not issubclass(error_cls, ConfigurationError)

    def test_configuration_error(self) -> None:
        """Configuration errors are still policygraph errors."""
        with pytest.raises(PolicyGraphError):
            raise ConfigurationError("account is required")


class TestErrorRegistry:
    """Tests for code → class mapping."""

    def test_base_errors_registered(self) -> None:
        """Every built-in error is registered under its code."""
        for error_cls in (
            PolicyGraphError,
            ConfigurationError,
            ResolutionError,
            MissingIdentifierError,
            InvalidRelativeReferenceError,
            DependencyCycleError,
            DuplicateRecordError,
        ):
            assert error_registry.get(error_cls.code) is error_cls

    def test_unknown_code(self) -> None:
        assert error_registry.get("NO_SUCH_ERROR") is None

    def test_register_error(self) -> None:
        """The decorator registers and returns the class."""

        @register_error("UNKNOWN_PRIVILEGE")
        class UnknownPrivilegeError(ResolutionError):
            code = "UNKNOWN_PRIVILEGE"

        assert error_registry.get("UNKNOWN_PRIVILEGE") is UnknownPrivilegeError
        assert "UNKNOWN_PRIVILEGE" in error_registry.all()
