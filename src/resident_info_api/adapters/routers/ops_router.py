# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Operations Router.

Summary:
    ``GET /v1/ops/error`` raises on purpose so error-reporting integrations can
    be exercised end to end. Hidden from the OpenAPI document.

Layer:
    adapters/routers
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from resident_info_api.adapters.routers.base_router import BaseRouter
from resident_info_api.application.use_cases.ops.throw_ops_error import ThrowOpsError
from resident_info_api.dependencies.ops import get_throw_ops_error_uc

router = BaseRouter(version="v1", resource="ops", tags=["Operations"])


@router.get("/error", include_in_schema=False, response_model=None)
async def throw_ops_error(
    uc: Annotated[ThrowOpsError, Depends(get_throw_ops_error_uc)],
) -> None:
    """Raise :class:`OpsCheckError`; the generic handler renders the 500."""
    await uc.execute()
