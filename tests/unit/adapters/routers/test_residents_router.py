from __future__ import annotations

import httpx
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resident_info_api.application.schemas.dto.residents import (
    AddressDTO,
    PhoneDTO,
    ResidentInformationDTO,
    ResidentQueryParam,
)
from resident_info_api.application.use_cases.residents.get_resident_information import (
    GetResidentInformation,
)
from resident_info_api.dependencies.residents import get_resident_information_uc
from resident_info_api.domain.enums.source_system import PhoneType, SourceSystem
from resident_info_api.domain.exceptions.residents import (
    ResidentSourceError,
    SourceRequestFailed,
    SourceSchemaError,
    SourceUnavailable,
)
from resident_info_api.main import create_app


class StubGateway:
    def __init__(
        self,
        system: SourceSystem,
        records: list[ResidentInformationDTO] | None = None,
        error: ResidentSourceError | None = None,
    ) -> None:
        self._system = system
        self._records = records or []
        self._error = error
        self.last_query: ResidentQueryParam | None = None

    @property
    def system(self) -> SourceSystem:
        return self._system

    async def get_resident_information(
        self, query: ResidentQueryParam
    ) -> list[ResidentInformationDTO]:
        self.last_query = query
        if self._error is not None:
            raise self._error
        return list(self._records)


@pytest.fixture
def app(source_env: dict[str, str]) -> FastAPI:
    return create_app()


def _override(app: FastAPI, *gateways: StubGateway) -> None:
    registry = {g.system: g for g in gateways}
    app.dependency_overrides[get_resident_information_uc] = lambda: GetResidentInformation(registry)


def test_returns_success_envelope_in_source_order(app: FastAPI) -> None:
    housing = StubGateway(
        SourceSystem.HOUSING,
        [
            ResidentInformationDTO(
                system="housing",
                system_id="H1",
                system_url="https://housing.test/api/v1/households/H1",
                first_name="Jane",
                address_list=[AddressDTO(address_line1="1 Road", post_code="E8 1AA")],
                phone_number=[PhoneDTO(phone_number="0207", phone_type=PhoneType.FAX)],
            )
        ],
    )
    mosaic = StubGateway(
        SourceSystem.MOSAIC,
        [ResidentInformationDTO(system="mosaic", system_id="M1", system_url="u")],
    )
    _override(app, mosaic, housing)
    client = TestClient(app)

    r = client.get(
        "/v1/residents",
        params={"first_name": "Jane", "last_name": "Doe"},
        headers={"X-Request-ID": "req-1"},
    )

    assert r.status_code == 200
    assert r.headers["X-Request-ID"] == "req-1"
    items = r.json()["data"]["items"]
    assert [i["system"] for i in items] == ["housing", "mosaic"]
    assert items[0]["address_list"] == [
        {
            "address_line1": "1 Road",
            "address_line2": None,
            "address_line3": None,
            "post_code": "E8 1AA",
        }
    ]
    assert items[0]["phone_number"] == [{"phone_number": "0207", "phone_type": "Fax"}]
    # Absent collections are null, never [].
    assert items[1]["address_list"] is None
    assert items[1]["phone_number"] is None
    assert housing.last_query == ResidentQueryParam(first_name="Jane", last_name="Doe")


def test_no_results_is_an_empty_item_list(app: FastAPI) -> None:
    _override(app, StubGateway(SourceSystem.HOUSING))
    r = TestClient(app).get("/v1/residents")
    assert r.status_code == 200
    assert r.json() == {"data": {"items": []}}


@pytest.mark.parametrize(
    ("error", "status", "code"),
    [
        (
            SourceRequestFailed(
                "Source 'mosaic' responded with HTTP 500",
                system="mosaic",
                status_code=500,
                body="secret",
            ),
            502,
            "SOURCE_REQUEST_FAILED",
        ),
        (SourceSchemaError("bad payload", system="mosaic"), 502, "UPSTREAM_SCHEMA_ERROR"),
        (SourceUnavailable("unreachable", system="mosaic"), 503, "SOURCE_UNAVAILABLE"),
    ],
)
def test_source_failures_map_to_error_envelope(
    app: FastAPI, error: ResidentSourceError, status: int, code: str
) -> None:
    _override(
        app,
        StubGateway(
            SourceSystem.HOUSING,
            [ResidentInformationDTO(system="housing", system_id="H1", system_url="u")],
        ),
        StubGateway(SourceSystem.MOSAIC, error=error),
    )
    r = TestClient(app).get("/v1/residents", headers={"X-Request-ID": "req-err"})

    assert r.status_code == status
    assert r.headers["X-Request-ID"] == "req-err"
    body = r.json()
    assert "data" not in body
    err = body["error"]
    assert err["code"] == code
    assert err["http_status"] == status
    assert err["trace_id"] == "req-err"
    assert err["details"]["system"] == "mosaic"
    assert "secret" not in r.text


def test_request_failed_details_carry_upstream_status(app: FastAPI) -> None:
    error = SourceRequestFailed("x", system="academy", status_code=404, body="")
    _override(app, StubGateway(SourceSystem.ACADEMY, error=error))
    r = TestClient(app).get("/v1/residents")
    assert r.json()["error"]["details"] == {"system": "academy", "status_code": 404}


def test_missing_registry_is_service_unavailable(app: FastAPI) -> None:
    # Without the lifespan no gateways exist; the boundary reports a 503.
    r = TestClient(app).get("/v1/residents")
    assert r.status_code == 503
    assert r.json()["error"]["code"] == "CONFIGURATION_ERROR"


def test_end_to_end_through_lifespan_and_real_gateways(app: FastAPI) -> None:
    with respx.mock(assert_all_called=True) as mock:
        mock.get("https://housing.test/api/v1/households").mock(
            return_value=httpx.Response(200, json=[{"houseReference": "H9", "firstName": "Jane"}])
        )
        mosaic = mock.get("https://mosaic.test/api/v1/residents").mock(
            return_value=httpx.Response(200, json={"residents": []})
        )
        mock.get("https://academy.test/api/v1/claimants").mock(
            return_value=httpx.Response(200, json={"claimants": None})
        )
        mock.get("https://electoral.test/api/v1/electors").mock(
            return_value=httpx.Response(
                200, json={"electors": [{"electorId": "E1", "postcode": "E5 5EE"}]}
            )
        )

        with TestClient(app) as client:
            r = client.get("/v1/residents", params={"first_name": "Jane"})

    assert r.status_code == 200
    items = r.json()["data"]["items"]
    assert [(i["system"], i["system_id"]) for i in items] == [
        ("housing", "H9"),
        ("electoral_register", "E1"),
    ]
    assert items[0]["system_url"] == "https://housing.test/api/v1/households/H9"
    assert items[1]["address_list"][0]["post_code"] == "E5 5EE"
    assert mosaic.calls.last.request.headers["X-API-Key"] == "mosaic-key"
