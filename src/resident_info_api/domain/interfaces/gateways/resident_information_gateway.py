# src/resident_info_api/domain/interfaces/gateways/resident_information_gateway.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident Information Gateway Protocol.

Synopsis:
    The single capability every resident source exposes to the application
    layer. Concrete implementations (one per source system) live in the
    adapters layer and are selected from a registry keyed by
    :class:`~resident_info_api.domain.enums.source_system.SourceSystem`.

Layer:
    domain/interfaces/gateways
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from resident_info_api.application.schemas.dto.residents import (
    ResidentInformationDTO,
    ResidentQueryParam,
)
from resident_info_api.domain.enums.source_system import SourceSystem


class ResidentInformationGateway(Protocol):
    """Abstraction over one external resident information system.

    Implementations are responsible for:
      * Translating the uniform query to the source's query parameters.
      * Performing exactly one HTTP call (no retries, no caching).
      * Validating the payload and mapping records to canonical DTOs.
      * Raising domain exceptions (no HTTP types) on failures.
    """

    @property
    def system(self) -> SourceSystem:
        """Return the source system this gateway talks to."""
        ...

    async def get_resident_information(
        self, query: ResidentQueryParam
    ) -> list[ResidentInformationDTO]:
        """Return canonical records matching ``query``.

        Args:
            query: Uniform search filter.

        Returns:
            Records in source order. An empty list (never ``None``) when the
            source reports no results.

        Raises:
            SourceRequestFailed: The source answered with a non-2xx status.
            SourceUnavailable: The source could not be reached.
            SourceSchemaError: The payload was malformed or of unexpected shape.
        """
        ...


type GatewayRegistry = Mapping[SourceSystem, ResidentInformationGateway]
