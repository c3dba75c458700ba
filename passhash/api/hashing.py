# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Hash and verify API endpoints.

Provides REST API for hashing and verifying passwords with Argon2id and bcrypt.

Assumptions:
- POST only; other methods on these paths are reported as not found
- Endpoints are sync so the framework runs the CPU-bound work in its thread pool
- A wrong password returns 200 with {"result": false}
"""
from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from passhash.api.schemas import (
    ErrorResponse,
    HashRequest,
    HashResponse,
    VerifyRequest,
    VerifyResponse,
)
from passhash.hashing import service
from passhash.hashing.algorithms import get_algorithm
from passhash.hashing.errors import ErrorKind, HashingError
from passhash.hashing.options import Argon2Options, BcryptOptions

# Router
router = APIRouter(
    tags=["hashing"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def json_response(body: BaseModel) -> Response:
    """Serialize a response model.

    Args:
        body: Response model

    Returns:
        Response: application/json response with status 200

    Raises:
        HashingError: INTERNAL_SERVER_ERROR if serialization fails
    """
    try:
        content = body.model_dump_json()
    except PydanticSerializationError:
        raise HashingError(ErrorKind.INTERNAL_SERVER_ERROR) from None
    return Response(content=content, media_type="application/json")


@router.post("/argon2/hash", response_model=HashResponse)
def argon2_hash(request: HashRequest[Argon2Options]):
    """Hash a password with Argon2id.

    Args:
        request: Password and optional time_cost/memory_cost/parallelism

    Returns:
        HashResponse: PHC-encoded Argon2id hash

    Assumptions:
    - Invalid parameter tuples are 400, primitive failures are 500
    """
    digest = service.hash_password(
        get_algorithm("argon2"), request.password, request.options
    )
    return json_response(HashResponse(hash=digest))


@router.post("/argon2/verify", response_model=VerifyResponse)
def argon2_verify(request: VerifyRequest):
    """Verify a password against an Argon2 hash.

    Assumptions:
    - Unparseable hashes are 400, other verification faults are 500
    """
    result = service.verify_password(
        get_algorithm("argon2"), request.password, request.hash
    )
    return json_response(VerifyResponse(result=result))


@router.post("/bcrypt/hash", response_model=HashResponse)
def bcrypt_hash(request: HashRequest[BcryptOptions]):
    """Hash a password with bcrypt.

    Assumptions:
    - work_factor is passed through; an unusable cost is a 500
    """
    digest = service.hash_password(
        get_algorithm("bcrypt"), request.password, request.options
    )
    return json_response(HashResponse(hash=digest))


@router.post("/bcrypt/verify", response_model=VerifyResponse)
def bcrypt_verify(request: VerifyRequest):
    """Verify a password against a bcrypt hash.

    Assumptions:
    - Every failure other than a mismatch is a 500, malformed hashes included
    """
    result = service.verify_password(
        get_algorithm("bcrypt"), request.password, request.hash
    )
    return json_response(VerifyResponse(result=result))
