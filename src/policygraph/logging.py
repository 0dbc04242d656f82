"""Logging utilities for the policy graph resolver.

This module provides:
- Logging configuration from ResolverConfig
- Safe, bounded previews of record values
- Structured logging with resolver pass and policy context
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, ResolverConfig


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Converts any value to a single-line string, normalizes whitespace and
    truncates to ``limit`` characters.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "resolver", "policy_id",
    }
)


class PolicyGraphFormatter(logging.Formatter):
    """Formatter that includes resolver context, as JSON or plain text.

    Reads the ``resolver`` (pass name) and ``policy_id`` attributes set by
    ResolverLoggerAdapter and renders any other ``extra`` fields through
    safe_preview.
    """

    def __init__(self, json_format: bool = True, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        resolver = getattr(record, "resolver", None)
        policy_id = getattr(record, "policy_id", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if resolver:
            log_data["resolver"] = resolver
        if policy_id:
            log_data["policy_id"] = policy_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if resolver:
            parts.append(f"resolver={resolver}")
        if policy_id:
            parts.append(f"policy={policy_id}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class ResolverLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds resolver pass and policy context.

    Usage:
        logger = get_resolver_logger(__name__, resolver="namespace")
        logger.debug("Entering policy", policy_id="myapp")
    """

    def __init__(
        self,
        logger: logging.Logger,
        resolver: Optional[str] = None,
        policy_id: Optional[str] = None,
    ):
        super().__init__(logger, {})
        self.resolver = resolver
        self.policy_id = policy_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        resolver = kwargs.pop("resolver", self.resolver)
        policy_id = kwargs.pop("policy_id", self.policy_id)

        extra = kwargs.get("extra", {})
        if resolver:
            extra["resolver"] = resolver
        if policy_id:
            extra["policy_id"] = policy_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[ResolverConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for resolver output.

    Args:
        config: ResolverConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_resolver_config_from_env
        config = load_resolver_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)
    if json_format is None:
        json_format = config.log_json

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(PolicyGraphFormatter(json_format=json_format))
    root_logger.addHandler(console_handler)


def get_resolver_logger(
    name: str,
    resolver: Optional[str] = None,
    policy_id: Optional[str] = None,
) -> ResolverLoggerAdapter:
    """Get a logger adapter carrying resolver context.

    Args:
        name: Logger name (typically __name__)
        resolver: Name of the resolver pass logging through this adapter
        policy_id: Optional policy id to include in all logs

    Returns:
        ResolverLoggerAdapter instance
    """
    return ResolverLoggerAdapter(logging.getLogger(name), resolver=resolver, policy_id=policy_id)


__all__ = [
    "safe_preview",
    "PolicyGraphFormatter",
    "ResolverLoggerAdapter",
    "setup_logging",
    "get_resolver_logger",
]
