# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Main FastAPI application entry point.

This module creates and configures the FastAPI application and provides the
passhash-server command.

Assumptions:
- OpenAPI documentation is only served when DOCS_ENABLED is set
- Every request gets a request_id bound to its log context
- Request bodies are never logged
"""
import time
import uuid

import uvicorn
from fastapi import FastAPI, Request

from passhash.api.errors import register_exception_handlers, unhandled_error_response
from passhash.api.hashing import router as hashing_router
from passhash.config import settings
from passhash.logging_config import bind_context, clear_context
from passhash.logging_utils import log_application_event

SERVICE_VERSION = "1.0.0"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance

    Assumptions:
    - Settings are read when the app is created
    - No state is shared between requests
    """
    docs_enabled = settings.docs_enabled

    app = FastAPI(
        title="passhash",
        description="Argon2id and bcrypt password hashing service",
        version=SERVICE_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    register_exception_handlers(app)

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        """Bind a request_id and log one summary line per request.

        Unclassified exceptions become INTERNAL_SERVER_ERROR here so that
        they are logged like every other request.
        """
        bind_context(request_id=request.headers.get("x-request-id") or uuid.uuid4().hex)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = unhandled_error_response(request, exc)
            log_application_event(
                "api_request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_context()

    app.include_router(hashing_router)

    return app


app = create_app()


def cli() -> None:
    """Run the service with uvicorn using the configured host and port."""
    uvicorn.run(
        "passhash.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
