# src/resident_info_api/infrastructure/middleware/access_log.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Access Log Middleware.

One ``access_log`` JSON line per request. Resident searches carry personal
data (names, dates of birth, NHS numbers) in the query string, so only the
parameter *names* are recorded; the raw query string never reaches the logs.

Record fields: ``evt``, ``method``, ``path``, ``query_keys``, ``status``
(500 when the handler raised), ``elapsed_ms``, ``client_ip``, ``ok``.
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from resident_info_api.infrastructure.logging.logger import get_json_logger

_logger = get_json_logger(__name__)


def _access_record(request: Request, status: int, elapsed_s: float, ok: bool) -> dict[str, Any]:
    return {
        "evt": "access",
        "method": request.method,
        "path": request.url.path,
        "query_keys": sorted(set(request.query_params.keys())),
        "status": status,
        "elapsed_ms": round(elapsed_s * 1000.0, 2),
        "client_ip": request.client.host if request.client else None,
        "ok": ok,
    }


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Write a PII-free access record around every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _logger.info(
                "access_log",
                extra=_access_record(request, 500, time.perf_counter() - started, ok=False),
            )
            raise
        _logger.info(
            "access_log",
            extra=_access_record(
                request, response.status_code, time.perf_counter() - started, ok=True
            ),
        )
        return response
