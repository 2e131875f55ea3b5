# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Residents Router.

Summary:
    Public endpoint searching every configured source system for residents
    matching the given filter.

Layer:
    adapters/routers
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from resident_info_api.adapters.controllers.residents_controller import ResidentsController
from resident_info_api.adapters.presenters.residents_presenter import ResidentsPresenter
from resident_info_api.adapters.routers.base_router import BaseRouter
from resident_info_api.adapters.schemas.http.envelopes import SuccessEnvelope
from resident_info_api.adapters.schemas.http.residents import ResidentInformationListHTTP
from resident_info_api.application.schemas.dto.residents import ResidentQueryParam
from resident_info_api.dependencies.residents import get_residents_controller
from resident_info_api.domain.exceptions.residents import ResidentSourceError
from resident_info_api.infrastructure.http.errors import status_for
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

router = BaseRouter(version="v1", resource="residents", tags=["Residents"])
presenter = ResidentsPresenter()


@router.get(
    "",
    response_model=SuccessEnvelope[ResidentInformationListHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Search resident information across source systems",
)
async def get_residents(
    request: Request,
    response: Response,
    controller: Annotated[ResidentsController, Depends(get_residents_controller)],
    first_name: Annotated[str | None, Query(examples=["Jane"])] = None,
    last_name: Annotated[str | None, Query(examples=["Doe"])] = None,
    date_of_birth: Annotated[str | None, Query(examples=["1970-01-01"])] = None,
    address: Annotated[str | None, Query(examples=["1 Hillman Street"])] = None,
    nhs_number: Annotated[str | None, Query(examples=["9434765919"])] = None,
) -> SuccessEnvelope[ResidentInformationListHTTP] | JSONResponse:
    """Return resident records from all sources, in fixed source order.

    Returns:
        SuccessEnvelope on 200; ErrorEnvelope on 502/503 when any source fails.
    """
    trace_id: str | None = getattr(request.state, "request_id", None)
    query = ResidentQueryParam(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        address=address,
        nhs_number=nhs_number,
    )

    try:
        dto = await controller.search(query)
    except ResidentSourceError as exc:
        http_status = status_for(exc)
        logger.warning(
            "residents.search_failed",
            extra={"code": exc.code, "status": http_status, "details": exc.details},
        )
        failed = presenter.present_error(
            code=exc.code,
            http_status=http_status,
            message=str(exc),
            trace_id=trace_id,
            details=exc.details,
        )
        # Bypass response_model validation; the body is an ErrorEnvelope.
        return JSONResponse(
            status_code=http_status,
            content=failed.body.model_dump_http(),
            headers=dict(failed.headers),
        )

    result = presenter.present_list(dto, trace_id=trace_id)
    presenter.apply_headers(result, response)
    return result.body
