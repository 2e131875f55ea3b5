# src/resident_info_api/adapters/gateways/resident_source_gateway.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapter Gateway: resident source systems -> canonical resident information.

One gateway class implements :class:`ResidentInformationGateway` for every
source. What differs between sources is static data, captured in a
:class:`SourceProfile`:

* resource path under the source's base URL,
* envelope shape (top-level array, or an object with a named collection),
* wire record model and its mapping function,
* query key renames applied on top of the shared serializer.

Design principles:
    * Exactly one upstream call per query; no retries, no caching.
    * Validate payloads deterministically; a "no results" body is an empty
      list, never ``None``; anything else unexpected is a schema error.
    * Surface transport and status failures verbatim from the client.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from resident_info_api.adapters.mappers.resident_mapper import (
    RecordMapper,
    map_academy_record,
    map_electoral_register_record,
    map_housing_record,
    map_mosaic_record,
)
from resident_info_api.application.schemas.dto.residents import (
    ResidentInformationDTO,
    ResidentQueryParam,
)
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.residents import SourceSchemaError
from resident_info_api.infrastructure.external_apis.resident_sources.client import (
    ResidentSourceClient,
)
from resident_info_api.infrastructure.external_apis.resident_sources.query import (
    serialize_query,
)
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
)
from resident_info_api.infrastructure.external_apis.resident_sources.types import (
    AcademyResidentRecord,
    ElectoralRegisterRecord,
    HousingResidentRecord,
    MosaicResidentRecord,
    WireModel,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


@dataclass(frozen=True, slots=True)
class SourceProfile:
    """Static description of one source system's resident endpoint.

    Attributes:
        system: Source system identifier.
        resource_path: Path appended to the base URL (no leading slash).
        collection_key: Name of the array inside the JSON object, or ``None``
            when the body is a top-level array.
        record_model: Wire model for one record.
        mapper: Record -> canonical DTO function.
        query_key_map: Query field renames for this source.
    """

    system: SourceSystem
    resource_path: str
    collection_key: str | None
    record_model: type[WireModel]
    mapper: RecordMapper
    query_key_map: Mapping[str, str] = field(default_factory=dict)


SOURCE_PROFILES: dict[SourceSystem, SourceProfile] = {
    SourceSystem.HOUSING: SourceProfile(
        system=SourceSystem.HOUSING,
        resource_path="api/v1/households",
        collection_key=None,
        record_model=HousingResidentRecord,
        mapper=map_housing_record,
    ),
    SourceSystem.MOSAIC: SourceProfile(
        system=SourceSystem.MOSAIC,
        resource_path="api/v1/residents",
        collection_key="residents",
        record_model=MosaicResidentRecord,
        mapper=map_mosaic_record,
    ),
    SourceSystem.ACADEMY: SourceProfile(
        system=SourceSystem.ACADEMY,
        resource_path="api/v1/claimants",
        collection_key="claimants",
        record_model=AcademyResidentRecord,
        mapper=map_academy_record,
        query_key_map={"address": "address_line1"},
    ),
    SourceSystem.ELECTORAL_REGISTER: SourceProfile(
        system=SourceSystem.ELECTORAL_REGISTER,
        resource_path="api/v1/electors",
        collection_key="electors",
        record_model=ElectoralRegisterRecord,
        mapper=map_electoral_register_record,
        query_key_map={"date_of_birth": "dob"},
    ),
}


class ResidentSourceGateway:
    """Resident information gateway for a single source system."""

    def __init__(self, profile: SourceProfile, client: ResidentSourceClient) -> None:
        """Initialize the gateway.

        Args:
            profile: Static description of the source endpoint.
            client: Transport client bound to the source's base URL and credential.
        """
        self._profile = profile
        self._client = client
        self._records: TypeAdapter[list[Any]] = TypeAdapter(list[profile.record_model])

    @property
    def system(self) -> SourceSystem:
        """Return the source system this gateway talks to."""
        return self._profile.system

    @property
    def system_url_base(self) -> str:
        """Return ``<base>/<resource path>``, the prefix of every ``system_url``."""
        return f"{self._client.base_url}/{self._profile.resource_path}"

    def _extract_rows(self, payload: Any) -> Any:
        """Return the raw record array from a decoded body.

        Raises:
            SourceSchemaError: If the envelope shape is not the expected one.
        """
        system = self._profile.system.value
        key = self._profile.collection_key
        if key is None:
            if not isinstance(payload, list):
                raise SourceSchemaError(
                    f"Source '{system}' returned an unexpected payload",
                    system=system,
                    details={"expected": "array"},
                )
            return payload

        if not isinstance(payload, dict) or key not in payload:
            raise SourceSchemaError(
                f"Source '{system}' returned an unexpected payload",
                system=system,
                details={"expected": f"{key}:array"},
            )
        rows = payload[key]
        # An explicit null collection means "no results".
        return [] if rows is None else rows

    def _parse_records(self, payload: Any) -> list[Any]:
        """Validate a decoded body into wire records.

        Raises:
            SourceSchemaError: If the envelope or any record does not validate.
        """
        rows = self._extract_rows(payload)
        try:
            return self._records.validate_python(rows)
        except ValidationError as exc:
            system = self._profile.system.value
            raise SourceSchemaError(
                f"Source '{system}' returned invalid records",
                system=system,
                details={"errors": exc.error_count()},
            ) from exc

    async def get_resident_information(
        self, query: ResidentQueryParam
    ) -> list[ResidentInformationDTO]:
        """Query the source and return canonical records.

        Args:
            query: Uniform search filter.

        Returns:
            Canonical records in the order the source returned them.

        Raises:
            SourceRequestFailed: Non-2xx upstream status.
            SourceUnavailable: Transport failure.
            SourceSchemaError: Non-JSON body or unexpected shape.
        """
        profile = self._profile
        params = serialize_query(query, profile.query_key_map)
        records = await self._client.get_json(
            profile.resource_path, params, parse=self._parse_records
        )

        base = self.system_url_base
        results = [profile.mapper(record, system_url_base=base) for record in records]
        logger.debug(
            "resident_source.mapped",
            extra={"system": profile.system.value, "count": len(results)},
        )
        return results


def build_gateway_registry(
    settings: Mapping[SourceSystem, ResidentSourceSettings],
    *,
    http: httpx.AsyncClient | None = None,
) -> dict[SourceSystem, ResidentSourceGateway]:
    """Build one gateway per configured source, keyed in aggregation order.

    Args:
        settings: Per-source settings; only these sources get a gateway.
        http: Optional shared HTTP client (connection pool) for all sources.

    Returns:
        Mapping ``SourceSystem -> gateway`` ordered by :meth:`SourceSystem.ordered`.
    """
    registry: dict[SourceSystem, ResidentSourceGateway] = {}
    for system in SourceSystem.ordered():
        source_settings = settings.get(system)
        if source_settings is None:
            continue
        client = ResidentSourceClient(source_settings, system=system.value, http=http)
        registry[system] = ResidentSourceGateway(SOURCE_PROFILES[system], client)
    return registry
