# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident Source Domain Exceptions.

Synopsis:
    Domain-level exceptions raised when querying the external resident
    information systems (Housing, Mosaic, Academy, Electoral Register). They are
    raised by gateways, propagated unchanged by the aggregation use case and
    mapped to canonical HTTP envelopes by the router.

Design:
    * Inherit from :class:`DomainError` for consistent ``.code`` and ``.details``.
    * Keep HTTP concerns out of the domain; the upstream status is data, not a
      response status.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any

from resident_info_api.domain.exceptions.base import DomainError


class ConfigurationError(DomainError):
    """Missing or invalid configuration detected at startup.

    Typical causes:
        * A source base URL is absent or not an absolute HTTP(S) URL.
        * A source credential is absent or blank.
        * ``RESIDENT_SOURCES`` names an unknown source.
    """

    code = "CONFIGURATION_ERROR"


class ResidentSourceError(DomainError):
    """Base class for failures attributable to a single source system.

    Attributes:
        system: Source system name (e.g. ``"housing"``).
    """

    code = "RESIDENT_SOURCE_ERROR"

    def __init__(
        self,
        message: str = "",
        *,
        system: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = {"system": system, **(details or {})}
        super().__init__(message, details=merged)
        self.system = system


class SourceRequestFailed(ResidentSourceError):
    """A source answered with a non-2xx HTTP status.

    Attributes:
        status_code: Upstream HTTP status code.
        body: Upstream response body text (kept for logs, not echoed to callers).
    """

    code = "SOURCE_REQUEST_FAILED"

    def __init__(
        self,
        message: str = "",
        *,
        system: str,
        status_code: int,
        body: str = "",
    ) -> None:
        super().__init__(message, system=system, details={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class SourceUnavailable(ResidentSourceError):
    """A source could not be reached (connect error, timeout, protocol error)."""

    code = "SOURCE_UNAVAILABLE"


class SourceSchemaError(ResidentSourceError):
    """A source returned malformed JSON or a payload of unexpected shape."""

    code = "UPSTREAM_SCHEMA_ERROR"


class SourceNotConfigured(ResidentSourceError):
    """A source was requested but no gateway is registered for it."""

    code = "SOURCE_NOT_CONFIGURED"
