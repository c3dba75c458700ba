# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Error taxonomy for hash and verify operations.

Every failure inside the hashing core is raised as a HashingError carrying
exactly one ErrorKind. The API layer turns the kind into a status code and a
fixed message.

Assumptions:
- Messages are static and never include primitive error details
- A wrong password is not an error (verify returns False)
"""
from enum import Enum


class ErrorKind(Enum):
    """Classified failure with its HTTP status and public message."""

    INVALID_ROUTE = (404, "Not found.")
    BAD_REQUEST = (400, "Bad request.")
    INVALID_HASH_OPTIONS = (400, "Invalid option for specified hash algorithm.")
    HASH_FAILED = (500, "Hash failed.")
    INVALID_PASSWORD_HASH = (400, "Invalid hash")
    VERIFY_FAILED = (500, "Verification failed.")
    INTERNAL_SERVER_ERROR = (500, "Internal server error.")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


class HashingError(Exception):
    """Raised when a hash or verify operation fails."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind
