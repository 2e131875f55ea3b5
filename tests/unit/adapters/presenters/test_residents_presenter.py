from __future__ import annotations

from resident_info_api.adapters.presenters.residents_presenter import ResidentsPresenter
from resident_info_api.application.schemas.dto.residents import (
    PhoneDTO,
    ResidentInformationDTO,
    ResidentInformationListDTO,
)
from resident_info_api.domain.enums.source_system import PhoneType


def test_present_list_wraps_items_and_echoes_request_id() -> None:
    dto = ResidentInformationListDTO(
        items=[
            ResidentInformationDTO(
                system="mosaic",
                system_id="M1",
                system_url="https://mosaic.test/api/v1/residents/M1",
                phone_number=[PhoneDTO(phone_number="0207", phone_type=PhoneType.WORK)],
            )
        ]
    )
    result = ResidentsPresenter().present_list(dto, trace_id="req-9")

    assert result.headers == {"X-Request-ID": "req-9"}
    assert result.status_code is None
    assert result.body is not None
    payload = result.body.model_dump_http()
    item = payload["data"]["items"][0]
    assert item["system_id"] == "M1"
    assert item["phone_number"] == [{"phone_number": "0207", "phone_type": "Work"}]
    assert item["address_list"] is None


def test_present_error_builds_envelope_with_status() -> None:
    result = ResidentsPresenter().present_error(
        code="SOURCE_UNAVAILABLE",
        http_status=503,
        message="unreachable",
        trace_id=None,
        details={"system": "housing"},
    )
    assert result.status_code == 503
    assert result.headers == {}
    assert result.body is not None
    assert result.body.model_dump_http()["error"] == {
        "code": "SOURCE_UNAVAILABLE",
        "http_status": 503,
        "message": "unreachable",
        "details": {"system": "housing"},
        "trace_id": None,
    }
