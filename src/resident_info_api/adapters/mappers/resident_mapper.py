# src/resident_info_api/adapters/mappers/resident_mapper.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Source record -> canonical resident information mapping.

Synopsis:
    Pure, deterministic functions translating each source's wire record into
    :class:`ResidentInformationDTO`. One function per source, selected through
    :data:`RECORD_MAPPERS` by the record's ``source`` tag.

Null vs. empty:
    ``address_list`` / ``phone_number`` are ``None`` when the source collected
    nothing. A missing list, an empty list and an all-blank flat address all
    map to ``None``; a populated list is mapped entry by entry, in order.

Layer:
    adapters/mappers
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from resident_info_api.application.schemas.dto.residents import (
    AddressDTO,
    PhoneDTO,
    ResidentInformationDTO,
)
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.infrastructure.external_apis.resident_sources.types import (
    AcademyAddress,
    AcademyResidentRecord,
    ElectoralRegisterRecord,
    HousingResidentRecord,
    MosaicPhone,
    MosaicResidentRecord,
    NumberTypePhone,
    SourceRecord,
    WireAddress,
)

type RecordMapper = Callable[..., ResidentInformationDTO]


def _system_url(system_url_base: str, system_id: str) -> str:
    return f"{system_url_base.rstrip('/')}/{system_id}"


def _wire_addresses(addresses: Sequence[WireAddress] | None) -> list[AddressDTO] | None:
    if not addresses:
        return None
    return [
        AddressDTO(
            address_line1=a.address_line1,
            address_line2=a.address_line2,
            address_line3=a.address_line3,
            post_code=a.post_code,
        )
        for a in addresses
    ]


def _single_address(
    line1: str | None,
    line2: str | None,
    line3: str | None,
    post_code: str | None,
) -> list[AddressDTO] | None:
    """Wrap one address into a list, or ``None`` when every part is absent."""
    if not any(part and part.strip() for part in (line1, line2, line3, post_code)):
        return None
    return [
        AddressDTO(
            address_line1=line1,
            address_line2=line2,
            address_line3=line3,
            post_code=post_code,
        )
    ]


def _number_type_phones(phones: Sequence[NumberTypePhone] | None) -> list[PhoneDTO] | None:
    if not phones:
        return None
    return [PhoneDTO(phone_number=p.number, phone_type=p.type) for p in phones]


def _mosaic_phones(phones: Sequence[MosaicPhone] | None) -> list[PhoneDTO] | None:
    if not phones:
        return None
    return [PhoneDTO(phone_number=p.phone_number, phone_type=p.phone_type) for p in phones]


def _academy_address(address: AcademyAddress | None) -> list[AddressDTO] | None:
    if address is None:
        return None
    return _single_address(
        address.address_line1,
        address.address_line2,
        address.address_line3,
        address.postcode,
    )


def map_housing_record(
    record: HousingResidentRecord, *, system_url_base: str
) -> ResidentInformationDTO:
    """Map a Housing household member to the canonical record."""
    return ResidentInformationDTO(
        system=SourceSystem.HOUSING.value,
        system_id=record.house_reference,
        system_url=_system_url(system_url_base, record.house_reference),
        first_name=record.first_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
        uprn=record.uprn,
        nhs_number=record.nhs_number,
        address_list=_wire_addresses(record.address_list),
        phone_number=_number_type_phones(record.phone_number_list),
    )


def map_mosaic_record(
    record: MosaicResidentRecord, *, system_url_base: str
) -> ResidentInformationDTO:
    """Map a Mosaic resident to the canonical record."""
    return ResidentInformationDTO(
        system=SourceSystem.MOSAIC.value,
        system_id=record.mosaic_id,
        system_url=_system_url(system_url_base, record.mosaic_id),
        first_name=record.first_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
        uprn=record.uprn,
        nhs_number=record.nhs_number,
        address_list=_wire_addresses(record.address_list),
        phone_number=_mosaic_phones(record.phone_number),
    )


def map_academy_record(
    record: AcademyResidentRecord, *, system_url_base: str
) -> ResidentInformationDTO:
    """Map an Academy claimant; the single nested address becomes a list."""
    return ResidentInformationDTO(
        system=SourceSystem.ACADEMY.value,
        system_id=record.academy_id,
        system_url=_system_url(system_url_base, record.academy_id),
        first_name=record.first_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
        uprn=record.uprn,
        nhs_number=record.nhs_number,
        address_list=_academy_address(record.claimant_address),
        phone_number=_number_type_phones(record.phone_numbers),
    )


def map_electoral_register_record(
    record: ElectoralRegisterRecord, *, system_url_base: str
) -> ResidentInformationDTO:
    """Map an elector; flat address fields are gathered into one address."""
    return ResidentInformationDTO(
        system=SourceSystem.ELECTORAL_REGISTER.value,
        system_id=record.elector_id,
        system_url=_system_url(system_url_base, record.elector_id),
        first_name=record.first_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
        uprn=record.uprn,
        address_list=_single_address(
            record.address_line1,
            record.address_line2,
            record.address_line3,
            record.postcode,
        ),
    )


RECORD_MAPPERS: dict[str, RecordMapper] = {
    SourceSystem.HOUSING.value: map_housing_record,
    SourceSystem.MOSAIC.value: map_mosaic_record,
    SourceSystem.ACADEMY.value: map_academy_record,
    SourceSystem.ELECTORAL_REGISTER.value: map_electoral_register_record,
}


def to_resident_information(
    record: SourceRecord, *, system_url_base: str
) -> ResidentInformationDTO:
    """Map any tagged source record to the canonical record.

    Args:
        record: A wire record of any source.
        system_url_base: ``<base>/<resource path>`` of the record's source.

    Returns:
        Canonical resident information tagged with the source metadata.
    """
    return RECORD_MAPPERS[record.source](record, system_url_base=system_url_base)
