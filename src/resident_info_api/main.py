# src/resident_info_api/main.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers and all routers.
    Provides an application factory (``create_app``); run it with
    ``uvicorn --factory resident_info_api.main:create_app``.

Design:
    • Bootstrap only (no business logic): routers + middleware + handlers.
    • Configuration is validated in the factory: a missing or invalid source
      URL or credential raises ConfigurationError before any request is served.
    • Lifespan owns the shared HTTP client and the source gateway registry.
    • Observability: root JSON logging, request ids, access logs, /metrics.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Callable, Mapping
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException
from starlette.responses import Response as StarletteResponse

from resident_info_api.adapters.routers import api_router
from resident_info_api.config import Settings, get_settings
from resident_info_api.dependencies.core.bootstrap import bootstrap
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.base import DomainError
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
)
from resident_info_api.infrastructure.http.errors import (
    handle_domain_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from resident_info_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from resident_info_api.infrastructure.middleware.access_log import AccessLogMiddleware
from resident_info_api.infrastructure.middleware.request_id import RequestIdMiddleware

logger = get_json_logger(__name__)

SERVICE_NAME = "resident-info-api"


def _stable_operation_id(route: APIRoute) -> str:
    """Deterministic operationId, e.g. ``get__v1_residents``."""
    methods = ",".join(sorted(route.methods or []))
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "")
    return f"{methods.lower()}_{path.lower()}"


def _lifespan_for(
    source_settings: Mapping[SourceSystem, ResidentSourceSettings],
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Expose the shared HTTP client and gateways on ``app.state``."""
        async with bootstrap(app, source_settings) as state:
            app.state.settings = state.settings
            app.state.http_client = state.http_client
            app.state.resident_gateways = state.gateways
            yield

    return runtime_lifespan


def _attach_middlewares(app: FastAPI) -> None:
    """Attach core middleware.

    Starlette runs the last added middleware first, so the request id is
    assigned before the access log entry is written.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)


def _patch_exception_handlers(app: FastAPI) -> None:
    """Replace default exception handlers with envelope-producing equivalents.

    Starlette types every handler as ``(Request, Exception)``; the wrappers narrow
    the exception and let anything unexpected bubble to the generic handler.
    """

    async def _http_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, HTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    async def _domain_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, DomainError):
            raise exc
        return await handle_domain_error(request, exc)

    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(Exception, handle_unhandled_exception)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Fully configured application instance.

    Raises:
        ConfigurationError: If application or source configuration is invalid.
    """
    settings: Settings = get_settings()
    configure_root_logging(settings.log_level)
    source_settings = settings.source_settings()

    app = FastAPI(
        title="Resident Information API",
        version=settings.service_version,
        description="Search resident records across council line-of-business systems.",
        lifespan=_lifespan_for(source_settings),
        generate_unique_id_function=_stable_operation_id,
    )

    _patch_exception_handlers(app)
    _attach_middlewares(app)
    app.include_router(api_router)

    @app.get("/healthz", include_in_schema=False)
    async def healthz() -> JSONResponse:
        """Liveness probe."""
        return JSONResponse({"status": "ok"})

    logger.info(
        "service_startup",
        extra={
            "service": SERVICE_NAME,
            "env": settings.environment.value,
            "version": settings.service_version,
            "sources": [s.value for s in source_settings],
        },
    )
    return app


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "resident_info_api.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=int(os.getenv("PORT", "8080")),
    )
