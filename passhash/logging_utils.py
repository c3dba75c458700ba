# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for passhash.

Provides specialized logging functions for:
- Application logs (requests, hash/verify outcomes)
- Security logs (classified failures)

Assumptions:
- All logs use structlog for structured output
- Passwords and hashes are never logged
"""
from typing import Any, Optional

from passhash.logging_config import get_logger, sanitize_data

# Get loggers for different categories
app_logger = get_logger("passhash.application")
security_logger = get_logger("passhash.security")


def log_application_event(
    event: str,
    **kwargs: Any
) -> None:
    """Log an application operational event.

    Args:
        event: Event name (e.g., "api_request", "hash_completed")
        **kwargs: Additional context (method, path, status_code, etc.)

    Assumptions:
    - Context is sanitized before it reaches the logger
    """
    app_logger.info(event, **sanitize_data(kwargs))


def log_security_event(
    event: str,
    algorithm: Optional[str] = None,
    operation: Optional[str] = None,
    reason: Optional[str] = None,
    **kwargs: Any
) -> None:
    """Log a security event for forensics.

    Args:
        event: Security event type (hash_rejected, verify_failed, etc.)
        algorithm: Algorithm involved (argon2, bcrypt)
        operation: Operation involved (hash, verify)
        reason: Classified error kind
        **kwargs: Additional context

    Assumptions:
    - Used for every request that ends in a classified failure
    - Wrong-password verifications are not security events
    """
    security_logger.warning(
        event,
        algorithm=algorithm,
        operation=operation,
        reason=reason,
        **sanitize_data(kwargs)
    )

