# Copyright (c)
# SPDX-License-Identifier: MIT
"""
HTTP Schemas: Resident Information

Purpose:
    Transport-facing models for ``GET /v1/residents``. Field names match the
    canonical record; ``address_list`` and ``phone_number`` are ``null`` (not
    ``[]``) when a source collected no such data.

Layer: adapters/schemas/http
"""

from __future__ import annotations

from pydantic import Field

from resident_info_api.adapters.schemas.http.base import BaseHTTPSchema
from resident_info_api.domain.enums.source_system import PhoneType


class AddressHTTP(BaseHTTPSchema):
    """Postal address."""

    address_line1: str | None = Field(default=None)
    address_line2: str | None = Field(default=None)
    address_line3: str | None = Field(default=None)
    post_code: str | None = Field(default=None)


class PhoneHTTP(BaseHTTPSchema):
    """Phone number with an optional classification."""

    phone_number: str = Field(..., description="Phone number as recorded by the source.")
    phone_type: PhoneType | None = Field(
        default=None, description="Fax, Mobile, Landline, Work, Home or Other."
    )


class ResidentInformationHTTP(BaseHTTPSchema):
    """One resident record, tagged with the source system it came from."""

    system: str = Field(..., examples=["housing"], description="Source system name.")
    system_id: str = Field(..., description="Record identifier within the source.")
    system_url: str = Field(..., description="Record URL within the source system.")
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    date_of_birth: str | None = Field(
        default=None, description="Date of birth in the source's own format."
    )
    uprn: str | None = Field(default=None, description="Unique Property Reference Number.")
    nhs_number: str | None = Field(default=None)
    address_list: list[AddressHTTP] | None = Field(default=None)
    phone_number: list[PhoneHTTP] | None = Field(default=None)


class ResidentInformationListHTTP(BaseHTTPSchema):
    """Aggregated resident records across sources, in fixed source order."""

    items: list[ResidentInformationHTTP] = Field(default_factory=list)
