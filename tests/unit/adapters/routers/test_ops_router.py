from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from resident_info_api.domain.exceptions.ops import OpsCheckError
from resident_info_api.main import create_app


def test_ops_error_renders_internal_error_envelope_and_logs_traceback(
    source_env: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    client = TestClient(create_app(), raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        r = client.get("/v1/ops/error", headers={"X-Request-ID": "ops-1"})

    assert r.status_code == 500
    error = r.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["trace_id"] == "ops-1"
    # The message stays generic; the detail goes to the logs only.
    assert "integrations" not in r.text

    logged = [rec for rec in caplog.records if rec.getMessage() == "unhandled_exception"]
    assert len(logged) == 1
    assert logged[0].exc_info is not None
    assert logged[0].exc_info[0] is OpsCheckError


def test_ops_error_route_is_hidden_from_openapi(source_env: dict[str, str]) -> None:
    schema = TestClient(create_app()).get("/openapi.json").json()
    assert "/v1/ops/error" not in schema["paths"]
