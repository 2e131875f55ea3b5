# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presenter: Resident Information -> HTTP SuccessEnvelope.

Synopsis:
    Renders the aggregated application DTO into the canonical SuccessEnvelope
    and echoes the request id header. No business logic, no I/O.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from resident_info_api.adapters.presenters.base_presenter import BasePresenter, PresentResult
from resident_info_api.adapters.schemas.http.envelopes import SuccessEnvelope
from resident_info_api.adapters.schemas.http.residents import (
    AddressHTTP,
    PhoneHTTP,
    ResidentInformationHTTP,
    ResidentInformationListHTTP,
)
from resident_info_api.application.schemas.dto.residents import (
    ResidentInformationDTO,
    ResidentInformationListDTO,
)


def _to_http(dto: ResidentInformationDTO) -> ResidentInformationHTTP:
    return ResidentInformationHTTP(
        system=dto.system,
        system_id=dto.system_id,
        system_url=dto.system_url,
        first_name=dto.first_name,
        last_name=dto.last_name,
        date_of_birth=dto.date_of_birth,
        uprn=dto.uprn,
        nhs_number=dto.nhs_number,
        address_list=(
            [AddressHTTP(**a.model_dump()) for a in dto.address_list]
            if dto.address_list
            else None
        ),
        phone_number=(
            [
                PhoneHTTP(phone_number=p.phone_number, phone_type=p.phone_type)
                for p in dto.phone_number
            ]
            if dto.phone_number
            else None
        ),
    )


class ResidentsPresenter(BasePresenter):
    """Presenter for ``/v1/residents`` success responses."""

    def present_list(
        self,
        dto: ResidentInformationListDTO,
        *,
        trace_id: str | None = None,
    ) -> PresentResult[SuccessEnvelope[ResidentInformationListHTTP]]:
        """Build ``SuccessEnvelope[ResidentInformationListHTTP]``.

        Args:
            dto: Aggregated records, already in source order.
            trace_id: Optional request id to echo in ``X-Request-ID``.

        Returns:
            Body + headers pair.
        """
        payload = ResidentInformationListHTTP(items=[_to_http(i) for i in dto.items])
        return PresentResult(
            body=SuccessEnvelope[ResidentInformationListHTTP](data=payload),
            headers=self.trace_headers(trace_id),
        )
