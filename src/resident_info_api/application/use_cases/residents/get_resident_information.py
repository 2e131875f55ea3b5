# src/resident_info_api/application/use_cases/residents/get_resident_information.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Use Case: Get Resident Information

Purpose:
    Query every configured source system concurrently with the same filter and
    concatenate the canonical records in fixed source order.

Semantics:
    * All sources are queried in parallel; total latency is bounded by the
      slowest source, not the sum.
    * Fail-fast: the first source failure aborts the whole query, outstanding
      source calls are cancelled and no partial result is returned.
    * Output order is Housing, Mosaic, Academy, Electoral Register; within a
      source, records keep the order the source returned them.

Layer: application/use_cases
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from time import perf_counter

from resident_info_api.application.schemas.dto.residents import (
    ResidentInformationDTO,
    ResidentInformationListDTO,
    ResidentQueryParam,
)
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.residents import SourceNotConfigured
from resident_info_api.domain.interfaces.gateways.resident_information_gateway import (
    GatewayRegistry,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger
from resident_info_api.infrastructure.observability.metrics_resident_sources import (
    resident_usecase_aggregation_latency_seconds,
)
from resident_info_api.infrastructure.observability.tracing import traced

logger = get_json_logger(__name__)


class GetResidentInformation:
    """Use case to search resident information across source systems.

    Args:
        gateways: One gateway per enabled source system.
        systems: Sources to query. Defaults to every source in ``gateways``.
            A listed source without a gateway fails the query.
    """

    def __init__(
        self,
        gateways: GatewayRegistry,
        systems: Sequence[SourceSystem] | None = None,
    ) -> None:
        self._gateways = gateways
        wanted = set(gateways if systems is None else systems)
        self._systems = [s for s in SourceSystem.ordered() if s in wanted]

    @property
    def systems(self) -> list[SourceSystem]:
        """Return the queried systems in aggregation order."""
        return list(self._systems)

    async def execute(self, query: ResidentQueryParam) -> ResidentInformationListDTO:
        """Query all sources and return the concatenated results.

        Args:
            query: Uniform search filter; sent unchanged to every source.

        Returns:
            ResidentInformationListDTO: Records grouped by source, in source order.

        Raises:
            SourceNotConfigured: A requested source has no registered gateway.
            ResidentSourceError: The first failure raised by any source.
        """
        systems = self.systems
        for system in systems:
            if system not in self._gateways:
                raise SourceNotConfigured(
                    f"Source '{system.value}' is not configured", system=system.value
                )
        started = perf_counter()

        async with traced("usecase.get_resident_information", sources=len(systems)):
            tasks = [
                asyncio.create_task(
                    self._gateways[system].get_resident_information(query),
                    name=f"resident_source.{system.value}",
                )
                for system in systems
            ]
            try:
                per_source = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
            finally:
                resident_usecase_aggregation_latency_seconds.observe(perf_counter() - started)

        items: list[ResidentInformationDTO] = []
        for records in per_source:
            items.extend(records)

        logger.info(
            "usecase.get_resident_information.done",
            extra={
                "sources": [s.value for s in systems],
                "counts": {s.value: len(r) for s, r in zip(systems, per_source, strict=True)},
            },
        )
        return ResidentInformationListDTO(items=items)
