"""Resolver configuration.

Pydantic-validated settings for a resolution run: the default account, the
default owner, and the logging knobs. Direct os.environ/os.getenv usage is
confined to ``load_resolver_config_from_env``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def split_roleid(roleid: str) -> tuple[str, str, str]:
    """Split ``account:kind:identifier`` into its three parts.

    The identifier may itself contain colons; only the first two are
    separators.

    Raises:
        ConfigurationError: if fewer than three segments are present.
    """
    tokens = str(roleid).split(":", 2)
    if len(tokens) != 3:
        raise ConfigurationError(
            "ownerid must be fully qualified account, kind and identifier",
            ownerid=roleid,
        )
    return tokens[0], tokens[1], tokens[2]


class ResolverConfig(BaseModel):
    """Settings shared by every resolver pass.

    ``account`` is the default account whenever a record specifies none.
    ``ownerid`` owns every top-level record without an explicit owner;
    records inside a policy default to the policy role instead.
    """

    account: Optional[str] = Field(
        default=None,
        description="Default account for records with no account",
    )
    ownerid: Optional[str] = Field(
        default=None,
        description="Fully qualified default owner (account:kind:identifier)",
    )

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    @field_validator("ownerid")
    @classmethod
    def validate_ownerid(cls, v: Optional[str]) -> Optional[str]:
        """Require a fully qualified ownerid when one is given."""
        if v is None:
            return v
        try:
            split_roleid(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    def require_identity(self) -> tuple[str, str]:
        """Return ``(account, ownerid)``, failing if either is missing."""
        if not self.account:
            raise ConfigurationError("account is required")
        if not self.ownerid:
            raise ConfigurationError("ownerid is required")
        return self.account, self.ownerid

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def load_resolver_config_from_env() -> ResolverConfig:
    """Load resolver configuration from environment variables.

    This is the ONLY place where os.getenv is allowed for resolver settings.

    Environment variables:
    - POLICY_ACCOUNT: Default account
    - POLICY_OWNERID: Default owner (account:kind:identifier)
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)

    Returns:
        ResolverConfig instance with values from environment or defaults.
    """
    import os

    return ResolverConfig(
        account=os.getenv("POLICY_ACCOUNT") or None,
        ownerid=os.getenv("POLICY_OWNERID") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
    )


__all__ = [
    "LogLevel",
    "ResolverConfig",
    "load_resolver_config_from_env",
    "split_roleid",
]
