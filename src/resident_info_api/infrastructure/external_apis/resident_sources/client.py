# src/resident_info_api/infrastructure/external_apis/resident_sources/client.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident Source Transport Client: instrumented, async, single-attempt.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with per-request timeout.
* A static credential header attached to every request.
* Deterministic mapping to domain errors (non-2xx, transport, non-JSON).
* Prometheus metrics + OpenTelemetry spans + structured logs.

There is no retry, caching or pagination: one GET per call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

import httpx

from resident_info_api.domain.exceptions.residents import (
    SourceRequestFailed,
    SourceSchemaError,
    SourceUnavailable,
)
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger, get_request_id
from resident_info_api.infrastructure.observability.metrics_resident_sources import (
    observe_source_request,
)
from resident_info_api.infrastructure.observability.tracing import traced

logger = get_json_logger(__name__)

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "resident-info-api/1.0",
}

# Upstream bodies are logged for diagnostics, but only a prefix.
_BODY_LOG_LIMIT: Final[int] = 512


class ResidentSourceClient:
    """Transport client bound to one source's base address and credential."""

    def __init__(
        self,
        settings: ResidentSourceSettings,
        *,
        system: str,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Source settings (base URL, credential, timeout).
            system: Source system name, used for logs and metric labels.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance. Credentials are sent per
                request, so a shared client is never mutated.
        """
        self._settings = settings
        self._system = system
        self._base_url = settings.base_url
        self._timeout = float(settings.timeout_s)
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

    @property
    def base_url(self) -> str:
        """Return the normalized base URL (no trailing slash)."""
        return self._base_url

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = dict(_DEFAULT_HEADERS)
        headers[self._settings.auth_header] = self._settings.token.get_secret_value()
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id
        return headers

    async def get_json(
        self,
        path: str,
        params: Mapping[str, str],
        *,
        parse: Callable[[Any], Any] | None = None,
    ) -> Any:
        """GET ``<base>/<path>`` and return the decoded JSON body.

        Args:
            path: Resource path relative to the base URL (e.g. ``"api/v1/residents"``).
            params: Query parameters (already serialized).
            parse: Optional decoder run on the JSON document inside the observed
                call; a ``SourceSchemaError`` it raises is counted as a failure.

        Returns:
            The JSON document, or what ``parse`` made of it.

        Raises:
            SourceUnavailable: On connect errors, timeouts and other transport failures.
            SourceRequestFailed: On any non-2xx status; carries status and body.
            SourceSchemaError: If a 2xx body is not valid JSON, or ``parse``
                rejects it.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        system = self._system

        async with traced(f"resident_source.{system}", system=system, path=path):
            with observe_source_request(system=system) as obs:
                try:
                    response = await self._client.get(
                        url,
                        params=dict(params),
                        headers=self._headers(),
                        timeout=self._timeout,
                    )
                except httpx.RequestError as exc:
                    obs.mark_error("transport")
                    logger.warning(
                        "resident_source.unavailable",
                        extra={"system": system, "path": path, "error": type(exc).__name__},
                    )
                    raise SourceUnavailable(
                        f"Source '{system}' could not be reached", system=system
                    ) from exc

                obs.record_status(response.status_code)
                logger.info(
                    "resident_source.response",
                    extra={
                        "system": system,
                        "path": path,
                        "status": response.status_code,
                        "param_keys": sorted(params),
                    },
                )

                if not response.is_success:
                    obs.mark_error("http_status")
                    body = response.text
                    logger.warning(
                        "resident_source.failed",
                        extra={
                            "system": system,
                            "status": response.status_code,
                            "body": body[:_BODY_LOG_LIMIT],
                        },
                    )
                    raise SourceRequestFailed(
                        f"Source '{system}' responded with HTTP {response.status_code}",
                        system=system,
                        status_code=response.status_code,
                        body=body,
                    )

                try:
                    payload = response.json()
                except ValueError as exc:
                    obs.mark_error("non_json")
                    raise SourceSchemaError(
                        f"Source '{system}' returned a non-JSON body",
                        system=system,
                        details={"error": str(exc)},
                    ) from exc

                if parse is None:
                    return payload
                try:
                    return parse(payload)
                except SourceSchemaError:
                    obs.mark_error("schema")
                    raise
