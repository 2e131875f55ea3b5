# src/resident_info_api/dependencies/core/bootstrap.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Core bootstrap for infrastructure (shared HTTP client, source gateways).

This module owns the lifecycle of shared infrastructure used by the FastAPI app.
It is intentionally thin: configuration is read from Settings, and all heavy
lifting is delegated to the infrastructure and adapter modules.

The single public surface is :func:`bootstrap`, an async context manager that
yields a simple state object with the resolved settings, the shared HTTP
client and the resident source gateway registry.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from fastapi import FastAPI

from resident_info_api.adapters.gateways.resident_source_gateway import (
    ResidentSourceGateway,
    build_gateway_registry,
)
from resident_info_api.config.settings import Settings, get_settings
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State yielded by the bootstrap context manager."""

    settings: Settings
    http_client: httpx.AsyncClient
    gateways: dict[SourceSystem, ResidentSourceGateway]


@asynccontextmanager
async def bootstrap(
    app: FastAPI,
    source_settings: Mapping[SourceSystem, ResidentSourceSettings] | None = None,
) -> AsyncGenerator[BootstrapState, None]:
    """Initialize and teardown shared infrastructure.

    Responsibilities:
        * Load application settings.
        * Create the shared HTTPX AsyncClient (one connection pool per process).
        * Build one gateway per enabled resident source on that client.
        * Close the client on exit, even on error.

    Args:
        app: FastAPI application instance (unused today, reserved for hooks).
        source_settings: Pre-validated per-source settings. Loaded from the
            environment when omitted.

    Yields:
        BootstrapState: Resolved settings, shared HTTP client and gateways.

    Raises:
        ConfigurationError: If an enabled source lacks a valid URL or credential.
    """
    settings: Settings = get_settings()
    resolved = source_settings if source_settings is not None else settings.source_settings()
    logger.info("bootstrap.start", extra={"sources": [s.value for s in resolved]})

    http_client = httpx.AsyncClient(timeout=settings.http_timeout_s)
    gateways = build_gateway_registry(resolved, http=http_client)
    state = BootstrapState(settings=settings, http_client=http_client, gateways=gateways)

    try:
        yield state
    finally:
        await http_client.aclose()
        logger.info("bootstrap.stop")
