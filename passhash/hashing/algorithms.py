# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Password hashing algorithms.

Each algorithm wraps one primitive (argon2-cffi or bcrypt) behind the same
two-method contract and translates primitive exceptions into ErrorKinds.

Assumptions:
- Algorithms hold no state; one instance can serve every request
- Salts come from the primitive's CSPRNG, never from the input
- Argon2 distinguishes bad options and unparseable hashes; bcrypt does not
"""
import base64
from typing import Any, Optional, Protocol

import argon2
import bcrypt
from argon2.exceptions import (
    HashingError as Argon2HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from passhash.hashing.errors import ErrorKind, HashingError
from passhash.hashing.options import (
    Argon2Options,
    BcryptOptions,
    argon2_parameters,
    default_argon2_options,
    default_bcrypt_options,
)

# libargon2 refuses to verify below these lengths
ARGON2_MIN_SALT_LEN = 8
ARGON2_MIN_HASH_LEN = 4


def _decode_phc_b64(segment: str) -> bytes:
    """Decode an unpadded standard-alphabet base64 segment of a PHC string.

    Raises:
        ValueError: If the segment is not valid base64
    """
    if "=" in segment:
        raise ValueError("PHC segments are unpadded")
    return base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)


class PasswordAlgorithm(Protocol):
    """Hash/verify capability shared by every algorithm."""

    name: str

    def hash(self, password: str, options: Optional[Any] = None) -> str:
        """Hash a password with a fresh salt.

        Raises:
            HashingError: INVALID_HASH_OPTIONS or HASH_FAILED
        """

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against an encoded hash.

        Returns:
            bool: False on mismatch, which is not an error

        Raises:
            HashingError: INVALID_PASSWORD_HASH or VERIFY_FAILED
        """


class Argon2idAlgorithm:
    """Argon2id via argon2-cffi, producing PHC strings."""

    name = "argon2"

    def hash(self, password: str, options: Optional[Argon2Options] = None) -> str:
        """Hash a password with Argon2id.

        Args:
            password: Plain text password (may be empty)
            options: Cost parameters, or None for the configured defaults

        Returns:
            str: "$argon2id$v=19$m=...,t=...,p=...$<salt>$<digest>"

        Assumptions:
        - Parameters are validated before the primitive runs
        - Any primitive error is HASH_FAILED, not a client error
        """
        parameters = argon2_parameters(options or default_argon2_options())
        hasher = argon2.PasswordHasher.from_parameters(parameters)
        try:
            return hasher.hash(password)
        except (Argon2HashingError, ValueError):
            raise HashingError(ErrorKind.HASH_FAILED) from None

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against any Argon2 PHC string.

        Args:
            password: Plain text password
            password_hash: Encoded hash produced by an Argon2 hasher

        Returns:
            bool: True if the password matches

        Assumptions:
        - Parameters and salt are read from the hash itself
        - Comparison is constant-time inside libargon2
        """
        try:
            argon2.extract_parameters(password_hash)
            hash_bytes = password_hash.encode("ascii")
            salt_b64, digest_b64 = password_hash.split("$")[-2:]
            salt = _decode_phc_b64(salt_b64)
            digest = _decode_phc_b64(digest_b64)
        except ValueError:
            raise HashingError(ErrorKind.INVALID_PASSWORD_HASH) from None
        if len(salt) < ARGON2_MIN_SALT_LEN or len(digest) < ARGON2_MIN_HASH_LEN:
            raise HashingError(ErrorKind.INVALID_PASSWORD_HASH)

        try:
            password_bytes = password.encode("utf-8")
            return argon2.PasswordHasher().verify(hash_bytes, password_bytes)
        except VerifyMismatchError:
            return False
        except InvalidHashError:
            raise HashingError(ErrorKind.INVALID_PASSWORD_HASH) from None
        except (VerificationError, ValueError):
            raise HashingError(ErrorKind.VERIFY_FAILED) from None


class BcryptAlgorithm:
    """bcrypt via the bcrypt package, producing $2b$ strings."""

    name = "bcrypt"

    def hash(self, password: str, options: Optional[BcryptOptions] = None) -> str:
        """Hash a password with bcrypt.

        Args:
            password: Plain text password (may be empty)
            options: Work factor, or None for the configured default

        Returns:
            str: "$2b$<cost>$<salt><digest>"

        Assumptions:
        - work_factor goes to the primitive unchecked
        - A cost outside 4..31 fails as HASH_FAILED
        """
        work_factor = (options or default_bcrypt_options()).work_factor
        try:
            salt = bcrypt.gensalt(rounds=work_factor)
            hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        except (ValueError, OverflowError):
            raise HashingError(ErrorKind.HASH_FAILED) from None
        return hashed.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a bcrypt hash.

        Every primitive failure, malformed hash included, is VERIFY_FAILED.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, OverflowError):
            raise HashingError(ErrorKind.VERIFY_FAILED) from None


ALGORITHMS: dict[str, PasswordAlgorithm] = {
    "argon2": Argon2idAlgorithm(),
    "bcrypt": BcryptAlgorithm(),
}


def get_algorithm(name: str) -> PasswordAlgorithm:
    """Look up an algorithm by its route name.

    Raises:
        HashingError: INVALID_ROUTE for unknown names
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise HashingError(ErrorKind.INVALID_ROUTE) from None
