from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from resident_info_api.infrastructure.observability import metrics_resident_sources as m

LATENCY_COUNT = "resident_source_request_latency_seconds_count"
ERRORS = "resident_source_errors_total"
STATUSES = "resident_source_http_status_total"


def _sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_success_observes_latency_without_error() -> None:
    before = _sample(LATENCY_COUNT, system="t-ok", outcome="success")
    with m.observe_source_request(system="t-ok") as obs:
        obs.record_status(200)

    assert _sample(LATENCY_COUNT, system="t-ok", outcome="success") == before + 1
    assert _sample(STATUSES, system="t-ok", status_code="200") >= 1
    assert _sample(ERRORS, system="t-ok", reason="http_status") == 0


def test_marked_error_counts_reason() -> None:
    with m.observe_source_request(system="t-err") as obs:
        obs.record_status(500)
        obs.mark_error("http_status")

    assert _sample(ERRORS, system="t-err", reason="http_status") == 1
    assert _sample(LATENCY_COUNT, system="t-err", outcome="error") == 1


def test_raised_exception_uses_class_name_as_reason() -> None:
    with pytest.raises(RuntimeError), m.observe_source_request(system="t-raise"):
        raise RuntimeError("boom")

    assert _sample(ERRORS, system="t-raise", reason="RuntimeError") == 1


def test_collectors_are_reused_on_second_lookup() -> None:
    again = m._get_or_create_counter(ERRORS, "dup", labelnames=("system", "reason"))
    assert again is m.resident_source_errors_total
    hist = m._get_or_create_histogram("resident_usecase_aggregation_latency_seconds", "dup")
    assert hist is m.resident_usecase_aggregation_latency_seconds
