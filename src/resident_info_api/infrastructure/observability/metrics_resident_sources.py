# src/resident_info_api/infrastructure/observability/metrics_resident_sources.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident source observability helpers and Prometheus metrics.

Exports
-------
Core collectors (names are part of the public contract):

* ``resident_source_request_latency_seconds`` (Histogram)
* ``resident_source_errors_total`` (Counter)
* ``resident_source_http_status_total`` (Counter)
* ``resident_usecase_aggregation_latency_seconds`` (Histogram)

Helpers:

* :func:`observe_source_request` - context manager for one upstream call.

Design
------
All collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name already
exists in the active registry (module re-import, tests swapping registries),
the existing instance is reused instead of registering a duplicate.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry


def _existing(registry: CollectorRegistry, name: str) -> object | None:
    # ``_names_to_collectors`` is internal but stable in prometheus_client.
    mapping = getattr(registry, "_names_to_collectors", {})
    return mapping.get(name)


def _get_or_create_histogram(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Histogram:
    """Return a histogram bound to the current default registry.

    Args:
        name: Metric name.
        doc: Human-readable metric description.
        labelnames: Optional iterable of label names.

    Returns:
        A :class:`Histogram` bound to the current :data:`prom.REGISTRY`.
    """
    registry: CollectorRegistry = prom.REGISTRY
    existing = _existing(registry, name)
    if isinstance(existing, Histogram):
        return existing
    try:
        return Histogram(name, doc, tuple(labelnames or ()), registry=registry)
    except ValueError as exc:
        again = _existing(registry, name)
        if "Duplicated timeseries" in str(exc) and isinstance(again, Histogram):
            return again
        raise


def _get_or_create_counter(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Counter:
    """Return a counter bound to the current default registry.

    Mirrors :func:`_get_or_create_histogram` for :class:`Counter` collectors.
    Counters are registered under their ``_total``-less base name.
    """
    registry: CollectorRegistry = prom.REGISTRY
    existing = _existing(registry, name) or _existing(registry, name.removesuffix("_total"))
    if isinstance(existing, Counter):
        return existing
    try:
        return Counter(name, doc, tuple(labelnames or ()), registry=registry)
    except ValueError as exc:
        again = _existing(registry, name) or _existing(registry, name.removesuffix("_total"))
        if "Duplicated timeseries" in str(exc) and isinstance(again, Counter):
            return again
        raise


resident_source_request_latency_seconds: Histogram = _get_or_create_histogram(
    "resident_source_request_latency_seconds",
    "Latency of outbound resident source calls (seconds).",
    labelnames=("system", "outcome"),
)

resident_source_errors_total: Counter = _get_or_create_counter(
    "resident_source_errors_total",
    "Total errors encountered when calling resident source systems.",
    labelnames=("system", "reason"),
)

resident_source_http_status_total: Counter = _get_or_create_counter(
    "resident_source_http_status_total",
    "HTTP status codes returned by resident source systems.",
    labelnames=("system", "status_code"),
)

resident_usecase_aggregation_latency_seconds: Histogram = _get_or_create_histogram(
    "resident_usecase_aggregation_latency_seconds",
    "Latency of the resident information aggregation use case (seconds).",
)


@dataclass
class SourceObservation:
    """State captured while observing one source call.

    Attributes:
        system: Source system name (for labelling).
        start: Monotonic start time in seconds.
        outcome: ``"success"`` or ``"error"``.
        error_reason: Short, machine-readable error reason if any.
    """

    system: str
    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    def record_status(self, status_code: int) -> None:
        """Count one upstream HTTP status."""
        resident_source_http_status_total.labels(
            system=self.system, status_code=str(status_code)
        ).inc()

    def mark_error(self, reason: str) -> None:
        """Mark the call as failed with a given reason."""
        self.outcome = "error"
        self.error_reason = reason


@contextmanager
def observe_source_request(*, system: str) -> Generator[SourceObservation, None, None]:
    """Observe one outbound source request.

    Records a latency sample and, when the block raises or
    :meth:`SourceObservation.mark_error` is called, an error increment. The
    exception class name is used as the reason when none was set.

    Args:
        system: Source system name (e.g. ``"mosaic"``).

    Yields:
        A mutable :class:`SourceObservation`.
    """
    obs = SourceObservation(system=system)
    try:
        yield obs
    except BaseException as exc:
        if obs.error_reason is None:
            obs.mark_error(type(exc).__name__)
        raise
    finally:
        elapsed = perf_counter() - obs.start
        resident_source_request_latency_seconds.labels(
            system=obs.system, outcome=obs.outcome
        ).observe(elapsed)
        if obs.error_reason is not None:
            resident_source_errors_total.labels(
                system=obs.system, reason=obs.error_reason
            ).inc()
