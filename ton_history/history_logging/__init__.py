"""
Structured logging for ton_history.

JSON logs with timestamp, level, logger name and event_type; registered
secrets are redacted from every event.
"""

from ton_history.history_logging.logger import (
    bind_account,
    get_logger,
    redact_secrets,
    register_secrets,
)

__all__ = ["bind_account", "get_logger", "redact_secrets", "register_secrets"]
