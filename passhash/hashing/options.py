# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Algorithm options and parameter validation.

Options are parsed from request bodies; each field is an unsigned 32-bit
integer. Argon2 options are additionally checked against the ranges
libargon2 accepts before any hashing happens.

Assumptions:
- Options are all-or-nothing; a partial object is a parse error
- Out-of-range Argon2 tuples raise INVALID_HASH_OPTIONS
- bcrypt work factors are not validated here (the primitive decides)
"""
from typing import Annotated

import argon2
from argon2.low_level import ARGON2_VERSION
from pydantic import BaseModel, Field

from passhash.config import settings
from passhash.hashing.errors import ErrorKind, HashingError

UINT32_MAX = 2**32 - 1

Uint32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]

# libargon2 limits
ARGON2_MIN_TIME_COST = 1
ARGON2_MIN_LANES = 1
ARGON2_MAX_LANES = 0xFFFFFF
ARGON2_SYNC_POINTS = 4
ARGON2_SALT_LEN = 16
ARGON2_HASH_LEN = 32


class Argon2Options(BaseModel):
    """Argon2id cost parameters (memory_cost in KiB)."""
    time_cost: Uint32
    memory_cost: Uint32
    parallelism: Uint32


class BcryptOptions(BaseModel):
    """bcrypt cost parameter."""
    work_factor: Uint32


def default_argon2_options() -> Argon2Options:
    """Argon2 options used when a request omits them."""
    return Argon2Options(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


def default_bcrypt_options() -> BcryptOptions:
    """bcrypt options used when a request omits them."""
    return BcryptOptions(work_factor=settings.bcrypt_work_factor)


def argon2_parameters(options: Argon2Options) -> argon2.Parameters:
    """Build validated Argon2id parameters from request options.

    Args:
        options: Requested cost parameters

    Returns:
        argon2.Parameters: Argon2id, version 19, 16-byte salt, 32-byte digest

    Raises:
        HashingError: INVALID_HASH_OPTIONS if libargon2 would reject the tuple

    Assumptions:
    - Memory must cover at least 2 blocks per lane per sync point
    """
    lanes_ok = ARGON2_MIN_LANES <= options.parallelism <= ARGON2_MAX_LANES
    memory_ok = options.memory_cost >= 2 * ARGON2_SYNC_POINTS * options.parallelism
    time_ok = options.time_cost >= ARGON2_MIN_TIME_COST

    if not (lanes_ok and memory_ok and time_ok):
        raise HashingError(ErrorKind.INVALID_HASH_OPTIONS)

    return argon2.Parameters(
        type=argon2.Type.ID,
        version=ARGON2_VERSION,
        salt_len=ARGON2_SALT_LEN,
        hash_len=ARGON2_HASH_LEN,
        time_cost=options.time_cost,
        memory_cost=options.memory_cost,
        parallelism=options.parallelism,
    )
