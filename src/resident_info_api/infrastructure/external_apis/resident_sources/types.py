# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident Source Wire Types.

Summary:
    Typed response records for each resident source system. Every record model
    carries a literal ``source`` tag so that the four shapes form one
    discriminated union, :data:`SourceRecord`.

Wire conventions:
    * JSON keys are camelCase; snake_case names are accepted too.
    * Unknown keys are ignored; wrong types for known keys fail validation.
    * Numeric identifiers (ids, UPRNs) are coerced to strings.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resident_info_api.domain.enums.source_system import PhoneType


def _phone_type(value: object) -> PhoneType | None:
    # Labels and integer ordinals both resolve through PhoneType's lookup.
    return None if value is None else PhoneType(value)


WirePhoneType = Annotated[PhoneType | None, BeforeValidator(_phone_type)]


class WireModel(BaseModel):
    """Base for source payload models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )


class WireAddress(WireModel):
    """Address entry used by Housing and Mosaic (``postCode``)."""

    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    post_code: str | None = None


class NumberTypePhone(WireModel):
    """Phone entry shaped ``{"number", "type"}`` (Housing, Academy)."""

    number: str
    type: WirePhoneType = None


# ---------------------------------------------------------------------------
# Housing: GET /api/v1/households -> top-level array
# ---------------------------------------------------------------------------


class HousingResidentRecord(WireModel):
    source: Literal["housing"] = "housing"
    house_reference: str
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    nhs_number: str | None = None
    uprn: str | None = None
    address_list: list[WireAddress] | None = None
    phone_number_list: list[NumberTypePhone] | None = None


# ---------------------------------------------------------------------------
# Mosaic: GET /api/v1/residents -> {"residents": [...]}
# ---------------------------------------------------------------------------


class MosaicPhone(WireModel):
    """Mosaic phone entry ``{"phoneNumber", "phoneType"}``."""

    phone_number: str
    phone_type: WirePhoneType = None


class MosaicResidentRecord(WireModel):
    source: Literal["mosaic"] = "mosaic"
    mosaic_id: str
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    nhs_number: str | None = None
    uprn: str | None = None
    address_list: list[WireAddress] | None = None
    phone_number: list[MosaicPhone] | None = None


# ---------------------------------------------------------------------------
# Academy: GET /api/v1/claimants -> {"claimants": [...]}
# ---------------------------------------------------------------------------


class AcademyAddress(WireModel):
    """Academy's single claimant address (``postcode``, lower case)."""

    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    postcode: str | None = None


class AcademyResidentRecord(WireModel):
    source: Literal["academy"] = "academy"
    academy_id: str
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    nhs_number: str | None = None
    uprn: str | None = None
    claimant_address: AcademyAddress | None = None
    phone_numbers: list[NumberTypePhone] | None = None


# ---------------------------------------------------------------------------
# Electoral register: GET /api/v1/electors -> {"electors": [...]}
# ---------------------------------------------------------------------------


class ElectoralRegisterRecord(WireModel):
    source: Literal["electoral_register"] = "electoral_register"
    elector_id: str
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    uprn: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    postcode: str | None = None


type SourceRecord = Annotated[
    HousingResidentRecord | MosaicResidentRecord | AcademyResidentRecord | ElectoralRegisterRecord,
    Field(discriminator="source"),
]
