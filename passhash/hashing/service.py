# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Hash and verify dispatch.

Runs an operation against any PasswordAlgorithm and logs its outcome. This is
the only place the API layer calls into the hashing core.

Assumptions:
- Passwords and hashes are never passed to a logger
- Classified failures are logged as security events and re-raised
- A verify mismatch is an ordinary result, logged at info level
"""
import time
from typing import Any, Optional

from passhash.hashing.algorithms import PasswordAlgorithm
from passhash.hashing.errors import HashingError
from passhash.logging_utils import log_application_event, log_security_event


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def hash_password(
    algorithm: PasswordAlgorithm,
    password: str,
    options: Optional[Any] = None,
) -> str:
    """Hash a password with the given algorithm.

    Args:
        algorithm: Algorithm to run
        password: Plain text password
        options: Algorithm options, or None for defaults

    Returns:
        str: Self-describing encoded hash

    Raises:
        HashingError: Classified failure from the algorithm
    """
    started = time.perf_counter()
    try:
        digest = algorithm.hash(password, options)
    except HashingError as e:
        log_security_event(
            "hash_rejected",
            algorithm=algorithm.name,
            operation="hash",
            reason=e.kind.name,
            default_options=options is None,
        )
        raise

    log_application_event(
        "hash_completed",
        algorithm=algorithm.name,
        default_options=options is None,
        duration_ms=_elapsed_ms(started),
    )
    return digest


def verify_password(
    algorithm: PasswordAlgorithm,
    password: str,
    password_hash: str,
) -> bool:
    """Verify a password against a hash with the given algorithm.

    Args:
        algorithm: Algorithm to run
        password: Plain text password
        password_hash: Encoded hash to check against

    Returns:
        bool: True on match, False on mismatch

    Raises:
        HashingError: Classified failure from the algorithm
    """
    started = time.perf_counter()
    try:
        result = algorithm.verify(password, password_hash)
    except HashingError as e:
        log_security_event(
            "verify_rejected",
            algorithm=algorithm.name,
            operation="verify",
            reason=e.kind.name,
        )
        raise

    log_application_event(
        "verify_completed",
        algorithm=algorithm.name,
        result=result,
        duration_ms=_elapsed_ms(started),
    )
    return result
