"""Exception hierarchy for policy graph resolution.

Every failure raised while resolving a record graph inherits from
PolicyGraphError. This module provides:
- Base exception hierarchy with stable error codes
- ErrorRegistry for mapping codes back to exception classes

Usage:
    from policygraph.exceptions import (
        PolicyGraphError,
        DuplicateRecordError,
    )

    try:
        records = Resolver.resolve(policy, "acme", "acme:user:admin")
    except PolicyGraphError as e:
        print(e.code, e.message, e.details)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "PolicyGraphError",
    "ConfigurationError",
    "ResolutionError",
    "MissingIdentifierError",
    "InvalidRelativeReferenceError",
    "DependencyCycleError",
    "DuplicateRecordError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
]


# ---- Exception Hierarchy ----------------------------------------------------


class PolicyGraphError(Exception):
    """Base exception for the policy graph resolver.

    Attributes:
        code: Stable error code string (e.g. "DUPLICATE_RECORD").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(PolicyGraphError):
    """Missing account/ownerid, or an ownerid that is not fully qualified."""

    code: str = "CONFIGURATION_ERROR"
    message: str = "Invalid resolver configuration"


class ResolutionError(PolicyGraphError):
    """A record graph cannot be resolved."""

    code: str = "RESOLUTION_ERROR"
    message: str = "Record graph could not be resolved"


class MissingIdentifierError(ResolutionError):
    """A blank id outside of any policy namespace."""

    code: str = "MISSING_IDENTIFIER"
    message: str = "Record has a blank id"


class InvalidRelativeReferenceError(ResolutionError):
    """A '..' reference climbs above its root or collapses to nothing."""

    code: str = "INVALID_RELATIVE_REFERENCE"
    message: str = "Invalid relative reference"


class DependencyCycleError(ResolutionError):
    """Records depend on each other, so no creation order exists."""

    code: str = "DEPENDENCY_CYCLE"
    message: str = "Dependency cycle encountered"


class DuplicateRecordError(ResolutionError):
    """The same (kind, id) pair is declared more than once."""

    code: str = "DUPLICATE_RECORD"
    message: str = "Record is declared more than once"


# ---- Error Registry ---------------------------------------------------------

_E = TypeVar("_E", bound=type[PolicyGraphError])


class ErrorRegistry:
    """Registry for mapping error codes to exception classes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[PolicyGraphError]] = {}

    def register(self, code: str, error_cls: type[PolicyGraphError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[PolicyGraphError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[PolicyGraphError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("UNKNOWN_PRIVILEGE")
        class UnknownPrivilegeError(ResolutionError):
            code = "UNKNOWN_PRIVILEGE"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


# Register base errors
error_registry.register("INTERNAL_ERROR", PolicyGraphError)
error_registry.register("CONFIGURATION_ERROR", ConfigurationError)
error_registry.register("RESOLUTION_ERROR", ResolutionError)
error_registry.register("MISSING_IDENTIFIER", MissingIdentifierError)
error_registry.register("INVALID_RELATIVE_REFERENCE", InvalidRelativeReferenceError)
error_registry.register("DEPENDENCY_CYCLE", DependencyCycleError)
error_registry.register("DUPLICATE_RECORD", DuplicateRecordError)
