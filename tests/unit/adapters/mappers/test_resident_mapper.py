from __future__ import annotations

from resident_info_api.adapters.mappers.resident_mapper import (
    RECORD_MAPPERS,
    map_academy_record,
    map_electoral_register_record,
    map_housing_record,
    map_mosaic_record,
    to_resident_information,
)
from resident_info_api.domain.enums.source_system import PhoneType, SourceSystem
from resident_info_api.infrastructure.external_apis.resident_sources.types import (
    AcademyResidentRecord,
    ElectoralRegisterRecord,
    HousingResidentRecord,
    MosaicResidentRecord,
)

BASE = "https://housing.test/api/v1/households"
ELECTORS_URL = "https://electoral.test/api/v1/electors"


def test_housing_record_without_phones_or_addresses_maps_to_none() -> None:
    rec = HousingResidentRecord.model_validate({"houseReference": "H1", "firstName": "Jane"})
    dto = map_housing_record(rec, system_url_base=BASE)
    assert dto.system == "housing"
    assert dto.system_id == "H1"
    assert dto.system_url == f"{BASE}/H1"
    assert dto.first_name == "Jane"
    assert dto.address_list is None
    assert dto.phone_number is None


def test_empty_wire_lists_also_map_to_none() -> None:
    rec = HousingResidentRecord.model_validate(
        {"houseReference": "H1", "addressList": [], "phoneNumberList": []}
    )
    dto = map_housing_record(rec, system_url_base=BASE)
    assert dto.address_list is None
    assert dto.phone_number is None


def test_single_fax_phone_maps_to_one_canonical_phone() -> None:
    rec = HousingResidentRecord.model_validate(
        {"houseReference": "H1", "phoneNumberList": [{"number": "02071234567", "type": "Fax"}]}
    )
    dto = map_housing_record(rec, system_url_base=BASE)
    assert dto.phone_number is not None
    assert len(dto.phone_number) == 1
    assert dto.phone_number[0].phone_number == "02071234567"
    assert dto.phone_number[0].phone_type is PhoneType.FAX


def test_housing_addresses_keep_order() -> None:
    rec = HousingResidentRecord.model_validate(
        {
            "houseReference": "H1",
            "uprn": "10008",
            "addressList": [
                {"addressLine1": "1 First Road", "postCode": "E8 1AA"},
                {"addressLine1": "2 Second Road", "postCode": "E8 2BB"},
            ],
        }
    )
    dto = map_housing_record(rec, system_url_base=BASE)
    assert dto.uprn == "10008"
    assert dto.address_list is not None
    assert [a.address_line1 for a in dto.address_list] == ["1 First Road", "2 Second Road"]
    assert dto.address_list[1].post_code == "E8 2BB"


def test_mosaic_phone_fields_are_renamed() -> None:
    rec = MosaicResidentRecord.model_validate(
        {
            "mosaicId": "M7",
            "nhsNumber": "9434765919",
            "phoneNumber": [{"phoneNumber": "07700900000", "phoneType": "Mobile"}],
        }
    )
    dto = map_mosaic_record(rec, system_url_base="https://mosaic.test/api/v1/residents")
    assert dto.system == "mosaic"
    assert dto.system_url == "https://mosaic.test/api/v1/residents/M7"
    assert dto.nhs_number == "9434765919"
    assert dto.phone_number is not None
    assert dto.phone_number[0].phone_type is PhoneType.MOBILE


def test_academy_single_address_becomes_one_element_list() -> None:
    rec = AcademyResidentRecord.model_validate(
        {
            "academyId": "A3",
            "claimantAddress": {"addressLine1": "3 Third Road", "postcode": "N1 1AA"},
            "phoneNumbers": [{"number": "0208", "type": "Home"}],
        }
    )
    dto = map_academy_record(rec, system_url_base="https://academy.test/api/v1/claimants")
    assert dto.address_list is not None
    assert len(dto.address_list) == 1
    assert dto.address_list[0].post_code == "N1 1AA"
    assert dto.phone_number is not None and dto.phone_number[0].phone_type is PhoneType.HOME


def test_academy_blank_address_is_none() -> None:
    rec = AcademyResidentRecord.model_validate(
        {"academyId": "A3", "claimantAddress": {"addressLine1": "  "}}
    )
    dto = map_academy_record(rec, system_url_base="https://academy.test/api/v1/claimants")
    assert dto.address_list is None


def test_electoral_flat_address_is_gathered() -> None:
    rec = ElectoralRegisterRecord.model_validate(
        {"electorId": 55, "addressLine1": "5 Fifth Road", "postcode": "E5 5EE"}
    )
    dto = map_electoral_register_record(rec, system_url_base=ELECTORS_URL)
    assert dto.system == "electoral_register"
    assert dto.system_id == "55"
    assert dto.nhs_number is None
    assert dto.phone_number is None
    assert dto.address_list is not None
    assert dto.address_list[0].address_line1 == "5 Fifth Road"
    assert dto.address_list[0].post_code == "E5 5EE"


def test_electoral_without_address_fields_maps_to_none() -> None:
    rec = ElectoralRegisterRecord.model_validate({"electorId": "E1"})
    dto = map_electoral_register_record(rec, system_url_base=ELECTORS_URL)
    assert dto.address_list is None


def test_dispatch_covers_every_source_and_selects_by_tag() -> None:
    assert set(RECORD_MAPPERS) == {s.value for s in SourceSystem}
    rec = MosaicResidentRecord.model_validate({"mosaicId": "M1"})
    dto = to_resident_information(rec, system_url_base="https://mosaic.test/api/v1/residents/")
    assert dto.system == "mosaic"
    assert dto.system_url == "https://mosaic.test/api/v1/residents/M1"
