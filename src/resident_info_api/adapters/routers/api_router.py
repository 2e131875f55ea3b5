# src/resident_info_api/adapters/routers/api_router.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Purpose:
    Compose and expose the top-level ``router`` that includes all feature routers.

Responsibilities:
    • Mount the resident search under ``/v1/residents``.
    • Mount the Prometheus scrape endpoint at ``/metrics``.
    • Mount the deliberate-failure check at ``/v1/ops/error``.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from resident_info_api.adapters.routers.metrics_router import router as metrics_router
from resident_info_api.adapters.routers.ops_router import router as ops_router
from resident_info_api.adapters.routers.residents_router import router as residents_router

router = APIRouter()

# BaseRouter already carries the /v1/residents prefix.
router.include_router(residents_router)

router.include_router(metrics_router)
router.include_router(ops_router)
