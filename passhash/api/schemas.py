# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Request and response models for the hashing endpoints.

Assumptions:
- Field names are snake_case and match the JSON bodies exactly
- Unknown fields are ignored; a null options object means "use defaults"
- Strings must be encodable as UTF-8 (lone surrogates are rejected)
"""
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel


def _require_utf8(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("value is not valid UTF-8") from None
    return value


Utf8Str = Annotated[str, AfterValidator(_require_utf8)]

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class HashRequest(BaseModel, Generic[OptionsT]):
    """Request model for hashing a password."""
    password: Utf8Str
    options: Optional[OptionsT] = None


class HashResponse(BaseModel):
    """Response model carrying an encoded hash."""
    hash: str


class VerifyRequest(BaseModel):
    """Request model for verifying a password."""
    password: Utf8Str
    hash: Utf8Str


class VerifyResponse(BaseModel):
    """Response model for a verification result."""
    result: bool


class ErrorResponse(BaseModel):
    """Response model for every failed request."""
    error: str
