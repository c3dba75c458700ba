# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging configuration for passhash using structlog.

Every log line is one structured event: JSON for production, console
rendering when LOG_JSON is false.

Assumptions:
- request_id is bound per request through contextvars
- Passwords and hashes are redacted by the processor chain, whichever
  logger emitted them
- Unknown LOG_LEVEL names fall back to INFO
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from passhash.config import settings

SENSITIVE_FIELDS = {"password", "hash", "secret", "token"}
REDACTED = "[REDACTED]"


def sanitize_data(data: dict[str, Any]) -> dict[str, Any]:
    """Redact sensitive fields at any depth.

    Args:
        data: Mapping that may contain passwords or hashes

    Returns:
        dict: Copy with sensitive values replaced by [REDACTED]
    """
    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = REDACTED
        elif isinstance(value, dict):
            sanitized[key] = sanitize_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_data(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value
    return sanitized


def redact_sensitive_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    return sanitize_data(event_dict)


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None
) -> None:
    """Configure structlog for the service.

    Args:
        log_level: Log level name; defaults to LOG_LEVEL
        json_output: JSON if True, console if False; defaults to LOG_JSON
    """
    level = (log_level or settings.log_level).upper()
    use_json = json_output if json_output is not None else settings.log_json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        redact_sensitive_fields,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    processors.append(
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Replace the bound log context (request_id, etc.)."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


configure_logging()
