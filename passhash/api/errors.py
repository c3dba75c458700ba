# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Exception handlers mapping failures to HTTP responses.

Every failure leaves the service as {"error": "<static message>"} with the
status of its ErrorKind.

Assumptions:
- Unknown paths and wrong methods are both INVALID_ROUTE (404)
- Undecodable or schema-invalid bodies are BAD_REQUEST (400)
- Framework error details never reach the client
- Unclassified exceptions are caught by the request middleware in main
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from passhash.hashing.errors import ErrorKind, HashingError
from passhash.logging_config import get_logger

logger = get_logger("passhash.api")

# Framework status codes and the kind they are reported as
_HTTP_STATUS_KINDS = {
    400: ErrorKind.BAD_REQUEST,
    404: ErrorKind.INVALID_ROUTE,
    405: ErrorKind.INVALID_ROUTE,
    422: ErrorKind.BAD_REQUEST,
}


def error_response(kind: ErrorKind) -> JSONResponse:
    """Build the response for a classified failure.

    Args:
        kind: Error kind to report

    Returns:
        JSONResponse: Static message body with the kind's status code
    """
    return JSONResponse(
        status_code=kind.status_code,
        content={"error": kind.message},
    )


async def hashing_error_handler(request: Request, exc: HashingError) -> JSONResponse:
    return error_response(exc.kind)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Validation errors echo input values, so only the count is logged
    logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
    return error_response(ErrorKind.BAD_REQUEST)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    kind = _HTTP_STATUS_KINDS.get(exc.status_code, ErrorKind.INTERNAL_SERVER_ERROR)
    return error_response(kind)


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unclassified exception and hide it behind a static 500.

    Called by the request logging middleware rather than registered as a
    handler, so the request still gets its api_request log line.
    """
    logger.error(
        "unhandled_error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(ErrorKind.INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(HashingError, hashing_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
