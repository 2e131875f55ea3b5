# Copyright (c)
# SPDX-License-Identifier: MIT
"""OpenTelemetry span helper.

Provides a small async context manager ``traced(name, **attrs)`` to wrap
individual operations with an OTEL span. Without a configured SDK the global
tracer provider is the API's no-op provider, so spans cost nothing.

Layer:
    infrastructure/observability
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from opentelemetry import trace

_TRACER = trace.get_tracer("resident_info_api")


@asynccontextmanager
async def traced(span_name: str, **attrs: Any) -> AsyncIterator[trace.Span]:
    """Run the enclosed block inside an OTEL span.

    Args:
        span_name: Logical span name (e.g. ``"resident_source.housing"``).
        **attrs: Span attributes; ``None`` values are dropped.

    Yields:
        The active span, so callers may add attributes late.
    """
    clean = {k: v for k, v in attrs.items() if v is not None}
    # Exceptions are recorded on the span and mark it as errored.
    with _TRACER.start_as_current_span(span_name, attributes=clean) as span:
        yield span
