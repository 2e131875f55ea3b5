# Copyright (c)
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (``/metrics``).

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

# Imported for collector registration, so source metrics appear on a cold scrape.
import resident_info_api.infrastructure.observability.metrics_resident_sources  # noqa: F401

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics in the text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
