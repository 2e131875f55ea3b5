from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resident_info_api.infrastructure.middleware.access_log import AccessLogMiddleware

ACCESS_LOGGER = "resident_info_api.infrastructure.middleware.access_log"


def test_access_log_records_query_keys_not_values(caplog: pytest.LogCaptureFixture) -> None:
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)

    @app.get("/v1/residents")
    def residents() -> dict[str, str]:
        return {"ok": "yes"}

    params = {"nhs_number": "9434765919", "first_name": "Jane"}
    with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
        r = TestClient(app).get("/v1/residents", params=params)

    assert r.status_code == 200
    records = [rec for rec in caplog.records if rec.getMessage() == "access_log"]
    assert len(records) == 1
    rec = records[0]
    assert rec.path == "/v1/residents"  # type: ignore[attr-defined]
    assert rec.status == 200  # type: ignore[attr-defined]
    assert rec.query_keys == ["first_name", "nhs_number"]  # type: ignore[attr-defined]
    assert rec.ok is True  # type: ignore[attr-defined]
    assert "9434765919" not in caplog.text
