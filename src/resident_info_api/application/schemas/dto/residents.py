# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application DTOs for resident information.

Synopsis:
    Strict (Pydantic v2) DTOs for the uniform resident query and the canonical,
    cross-source resident information record produced by the source mappers and
    consumed by presenters.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from pydantic import ConfigDict, field_validator

from resident_info_api.application.schemas.dto.base import BaseDTO
from resident_info_api.domain.enums.source_system import PhoneType


class ResidentQueryParam(BaseDTO):
    """Uniform search filter sent to every source system.

    Every field is optional and any subset may be supplied. Blank strings are
    treated as absent by the query serializer.

    Attributes:
        first_name: Resident first name.
        last_name: Resident last name.
        date_of_birth: Date of birth, in whatever format the caller supplies.
        address: Free-text address fragment.
        nhs_number: NHS number or other personal identifier.
    """

    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    address: str | None = None
    nhs_number: str | None = None


class AddressDTO(BaseDTO):
    """Canonical address; any subset of lines may be absent."""

    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    post_code: str | None = None


class PhoneDTO(BaseDTO):
    """Canonical phone number."""

    phone_number: str
    phone_type: PhoneType | None = None


class ResidentInformationDTO(BaseDTO):
    """Canonical resident information record tagged with its source.

    ``address_list`` and ``phone_number`` are ``None`` when the source collected
    no such data; they are never empty lists.

    Attributes:
        system: Source system name.
        system_id: Identifier of the record within the source.
        system_url: URL of the record in the source system.
        first_name: First name.
        last_name: Last name.
        date_of_birth: Date of birth in the source's own format (not parsed).
        uprn: Unique Property Reference Number, passed through unmodified.
        nhs_number: NHS number.
        address_list: Ordered addresses, or ``None``.
        phone_number: Ordered phone numbers, or ``None``.
    """

    system: str
    system_id: str
    system_url: str
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    uprn: str | None = None
    nhs_number: str | None = None
    address_list: list[AddressDTO] | None = None
    phone_number: list[PhoneDTO] | None = None

    @field_validator("address_list", "phone_number", mode="after")
    @classmethod
    def _empty_as_absent(cls, value: list[AddressDTO] | list[PhoneDTO] | None) -> object:
        return value or None


class ResidentInformationListDTO(BaseDTO):
    """Aggregated result set across all queried sources, in source order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    items: list[ResidentInformationDTO]
