# src/resident_info_api/infrastructure/http/errors.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Boundary exception handlers.

Every failure leaving the service is rendered as the canonical envelope
``{"error": {code, http_status, message, details, trace_id}}``. Resident source
failures map to gateway statuses: a source that answered badly is a 502, a
source that could not be reached or is not configured is a 503.
"""

from __future__ import annotations

from typing import Any, Final

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response

from resident_info_api.domain.exceptions.base import DomainError
from resident_info_api.domain.exceptions.residents import (
    ConfigurationError,
    SourceNotConfigured,
    SourceRequestFailed,
    SourceSchemaError,
    SourceUnavailable,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

DOMAIN_ERROR_STATUS: Final[dict[type[DomainError], int]] = {
    ConfigurationError: 503,
    SourceRequestFailed: 502,
    SourceSchemaError: 502,
    SourceUnavailable: 503,
    SourceNotConfigured: 503,
}


def status_for(exc: DomainError) -> int:
    """Return the HTTP status for a domain error (500 when unmapped)."""
    for exc_type, status_code in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


def _trace_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


def error_envelope(
    *,
    code: str,
    http_status: int,
    message: str,
    details: dict[str, Any] | None = None,
    trace_id: str | None = None,
) -> dict[str, Any]:
    err: dict[str, Any] = {
        "code": code,
        "http_status": http_status,
        "message": message,
    }
    if details is not None:
        err["details"] = details
    if trace_id is not None:
        err["trace_id"] = trace_id
    return {"error": err}


async def handle_domain_error(request: Request, exc: DomainError) -> Response:
    status_code = status_for(exc)
    logger.warning(
        "domain_error",
        extra={"code": exc.code, "status": status_code, "details": exc.details},
    )
    payload = error_envelope(
        code=exc.code,
        http_status=status_code,
        message=str(exc) or exc.code,
        details=exc.details,
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=status_code, content=payload)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    payload = error_envelope(
        code="VALIDATION_ERROR",
        http_status=422,
        message="Request validation failed",
        details={"errors": exc.errors()},
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=422, content=payload)


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    payload = error_envelope(
        code="HTTP_ERROR",
        http_status=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        details=None if isinstance(exc.detail, str) else {"detail": exc.detail},
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=exc.status_code, content=payload)


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    logger.exception("unhandled_exception", exc_info=exc)
    payload = error_envelope(
        code="INTERNAL_ERROR",
        http_status=500,
        message="Internal server error",
        details=None,
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=500, content=payload)
