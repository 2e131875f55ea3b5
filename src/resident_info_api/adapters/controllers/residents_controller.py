# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Residents Controller.

Summary:
    Thin adapter coordinating the GetResidentInformation use-case.

Layer:
    adapters/controllers
"""
from __future__ import annotations

from resident_info_api.adapters.controllers.base import BaseController
from resident_info_api.application.schemas.dto.residents import (
    ResidentInformationListDTO,
    ResidentQueryParam,
)
from resident_info_api.application.use_cases.residents.get_resident_information import (
    GetResidentInformation,
)


class ResidentsController(BaseController):
    """Controller orchestrating the cross-source resident search."""

    __slots__ = ("_uc",)

    def __init__(self, use_case: GetResidentInformation) -> None:
        """Initialize the controller.

        Args:
            use_case: Use-case that queries every configured source.
        """
        self._uc = use_case

    async def search(self, query: ResidentQueryParam) -> ResidentInformationListDTO:
        """Search every configured source with the same filter.

        Args:
            query: Uniform search filter.

        Returns:
            ResidentInformationListDTO: Records in fixed source order.
        """
        return await self._uc.execute(query)
