# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Unit tests for algorithm options and Argon2 parameter validation.

Assumptions:
- Option fields are strict unsigned 32-bit integers
- Argon2 tuples are checked against libargon2's limits
- Defaults come from settings
"""
import argon2
import pytest
from pydantic import ValidationError

from passhash.hashing.errors import ErrorKind, HashingError
from passhash.hashing.options import (
    UINT32_MAX,
    Argon2Options,
    BcryptOptions,
    argon2_parameters,
    default_argon2_options,
    default_bcrypt_options,
)


@pytest.mark.unit
def test_argon2_parameters_from_valid_options():
    """Test that valid options become Argon2id parameters.

    Assumptions:
    - Type is always Argon2id, version 19
    - Salt is 16 bytes, digest is 32 bytes
    """
    options = Argon2Options(time_cost=3, memory_cost=4096, parallelism=2)

    parameters = argon2_parameters(options)

    assert parameters.type is argon2.Type.ID
    assert parameters.version == 19
    assert parameters.salt_len == 16
    assert parameters.hash_len == 32
    assert parameters.time_cost == 3
    assert parameters.memory_cost == 4096
    assert parameters.parallelism == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    "time_cost,memory_cost,parallelism",
    [
        (1, 8, 1),
        (1, 16, 2),
        (1, 8 * 0xFFFFFF, 0xFFFFFF),
        (UINT32_MAX, 8, 1),
    ],
)
def test_argon2_parameters_accept_boundaries(time_cost, memory_cost, parallelism):
    """Test the smallest and largest tuples libargon2 accepts."""
    options = Argon2Options(
        time_cost=time_cost, memory_cost=memory_cost, parallelism=parallelism
    )

    assert argon2_parameters(options).parallelism == parallelism


@pytest.mark.unit
@pytest.mark.parametrize(
    "time_cost,memory_cost,parallelism",
    [
        (0, 19456, 1),
        (2, 19456, 0),
        (2, 7, 1),
        (2, 15, 2),
        (2, 31, 4),
        (1, UINT32_MAX, 0x1000000),
    ],
)
def test_argon2_parameters_reject_invalid_tuples(time_cost, memory_cost, parallelism):
    """Test that out-of-range tuples raise INVALID_HASH_OPTIONS.

    Assumptions:
    - Memory below 8 KiB per lane is rejected
    - Zero passes and zero or too many lanes are rejected
    """
    options = Argon2Options(
        time_cost=time_cost, memory_cost=memory_cost, parallelism=parallelism
    )

    with pytest.raises(HashingError) as exc_info:
        argon2_parameters(options)

    assert exc_info.value.kind is ErrorKind.INVALID_HASH_OPTIONS


@pytest.mark.unit
def test_argon2_options_require_all_fields():
    """Test that partial Argon2 options do not parse."""
    with pytest.raises(ValidationError):
        Argon2Options.model_validate({"time_cost": 2, "memory_cost": 19456})


@pytest.mark.unit
@pytest.mark.parametrize("value", [-1, UINT32_MAX + 1, "10", 10.5])
def test_bcrypt_options_reject_non_uint32(value):
    """Test that work_factor must be an unsigned 32-bit integer."""
    with pytest.raises(ValidationError):
        BcryptOptions.model_validate({"work_factor": value})


@pytest.mark.unit
def test_bcrypt_options_accept_out_of_range_cost():
    """Test that bcrypt costs are not range-checked at parse time.

    Assumptions:
    - The primitive rejects the cost later, as HASH_FAILED
    """
    assert BcryptOptions(work_factor=99).work_factor == 99


@pytest.mark.unit
def test_defaults_follow_settings(cheap_defaults):
    """Test that omitted options resolve to the configured defaults."""
    assert default_argon2_options() == Argon2Options(
        time_cost=1, memory_cost=8, parallelism=1
    )
    assert default_bcrypt_options() == BcryptOptions(work_factor=4)


@pytest.mark.unit
def test_shipped_defaults():
    """Test the defaults used when nothing is configured."""
    from passhash.config import Settings

    defaults = Settings(_env_file=None)

    assert defaults.argon2_time_cost == 2
    assert defaults.argon2_memory_cost == 19456
    assert defaults.argon2_parallelism == 1
    assert defaults.bcrypt_work_factor == 10
