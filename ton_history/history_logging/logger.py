"""
Structured JSON logging for the indexer adapter.

Every event passes through redact_secrets before rendering: values under
credential-like keys are masked, and any string registered with
register_secrets (API keys, configured extra header values) is replaced
wherever it appears, including inside error messages and nested fields.
IndexerClient registers its settings' secrets on construction.

No ton_history imports here to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# json for aggregation, console for local runs
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

REDACTED = "***"

# Compared after lower-casing and mapping "-" to "_"
_SENSITIVE_KEYS = frozenset({"api_key", "x_api_key", "apikey", "authorization", "headers"})

_secrets: set[str] = set()


def register_secrets(values: Iterable[str | None]) -> None:
    """Add values that must never appear in log output. Blank values are ignored."""
    for value in values:
        if value and value.strip():
            _secrets.add(value.strip())


def clear_secrets() -> None:
    _secrets.clear()


def _is_sensitive_key(key: Any) -> bool:
    return isinstance(key, str) and key.lower().replace("-", "_") in _SENSITIVE_KEYS


def _scrub(value: Any) -> Any:
    if isinstance(value, str):
        # Longest first so a secret containing another is masked whole
        for secret in sorted(_secrets, key=len, reverse=True):
            if secret in value:
                value = value.replace(secret, REDACTED)
        return value
    if isinstance(value, dict):
        return {k: REDACTED if _is_sensitive_key(k) else _scrub(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_scrub(v) for v in value]
    return value


def redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor: mask credential keys and registered secret values."""
    return {k: REDACTED if _is_sensitive_key(k) else _scrub(v) for k, v in event_dict.items()}


def _rename_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's 'event' becomes event_type, the key log queries filter on."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_structlog() -> None:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.format_exc_info,
        _rename_event,
        redact_secrets,
    ]
    if LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("transactions_fetched", network="mainnet", event_count=20)
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_account(address: str | list[str]) -> structlog.BoundLogger:
    """Return a logger with the queried account(s) bound to all subsequent log calls."""
    return get_logger("ton_history").bind(account=address)
