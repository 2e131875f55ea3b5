# src/resident_info_api/dependencies/residents.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Dependency wiring for resident information (gateways, use case).

Overview:
    FastAPI dependency providers for the ``/v1/residents`` router. The gateway
    registry is built once per process by the application lifespan and read
    from ``app.state``; a fresh use case and controller are created per request.

Layer:
    dependencies

Design:
    * Always return the real use case type; tests override
      :func:`get_resident_information_uc` through ``app.dependency_overrides``.
    * Query exactly the sources enabled in settings, so a source missing from
      the registry fails loudly instead of being skipped.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from resident_info_api.adapters.controllers.residents_controller import ResidentsController
from resident_info_api.application.use_cases.residents.get_resident_information import (
    GetResidentInformation,
)
from resident_info_api.config.settings import Settings, get_settings
from resident_info_api.domain.exceptions.residents import ConfigurationError
from resident_info_api.domain.interfaces.gateways.resident_information_gateway import (
    GatewayRegistry,
)


def get_gateway_registry(request: Request) -> GatewayRegistry:
    """Return the process-wide gateway registry built by the lifespan.

    Raises:
        ConfigurationError: If the application started without a registry.
    """
    registry: GatewayRegistry | None = getattr(request.app.state, "resident_gateways", None)
    if registry is None:
        raise ConfigurationError("Resident source gateways are not initialized")
    return registry


def get_resident_information_uc(
    registry: Annotated[GatewayRegistry, Depends(get_gateway_registry)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> GetResidentInformation:
    """Build the aggregation use case over the enabled sources."""
    return GetResidentInformation(registry, systems=settings.sources)


def get_residents_controller(
    uc: Annotated[GetResidentInformation, Depends(get_resident_information_uc)],
) -> ResidentsController:
    """Build the residents controller around the use case."""
    return ResidentsController(uc)
