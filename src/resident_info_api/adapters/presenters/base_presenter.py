# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presenter primitives shared by the HTTP adapters.

A presenter turns application output into an envelope plus the headers that
travel with it. Routers stay free of envelope construction and of the rule
that every response echoes the caller's ``X-Request-ID``.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi import Response

from resident_info_api.adapters.schemas.http.envelopes import ErrorEnvelope, ErrorObject
from resident_info_api.infrastructure.middleware.request_id import REQUEST_ID_HEADER


@dataclass(slots=True)
class PresentResult[T]:
    """Envelope body with the headers and status it should be sent with."""

    body: T
    headers: Mapping[str, str] = field(default_factory=dict)
    status_code: int | None = None


class BasePresenter:
    """Shared envelope and header helpers for resource presenters."""

    @staticmethod
    def trace_headers(trace_id: str | None) -> dict[str, str]:
        """Return the request id echo header, or nothing without an id."""
        return {REQUEST_ID_HEADER: trace_id} if trace_id else {}

    def present_error(
        self,
        *,
        code: str,
        http_status: int,
        message: str,
        trace_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> PresentResult[ErrorEnvelope]:
        """Wrap a failure in the canonical ``ErrorEnvelope``.

        Args:
            code: Stable machine-readable error code.
            http_status: Status the envelope is sent with.
            message: Human-readable summary, safe to show callers.
            trace_id: Request id; echoed in the body and in ``X-Request-ID``.
            details: Structured context (never upstream bodies or secrets).
        """
        envelope = ErrorEnvelope(
            error=ErrorObject(
                code=code,
                http_status=http_status,
                message=message,
                details=details or {},
                trace_id=trace_id,
            )
        )
        return PresentResult(
            body=envelope,
            headers=self.trace_headers(trace_id),
            status_code=http_status,
        )

    @staticmethod
    def apply_headers(result: PresentResult[Any], response: Response) -> None:
        """Copy headers, and the status override if any, onto ``response``."""
        for name, value in result.headers.items():
            response.headers[name] = value
        if result.status_code is not None:
            response.status_code = result.status_code
