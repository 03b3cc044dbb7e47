"""Span helper for the per-source fan-out of a federated search."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from opentelemetry import trace

_tracer = trace.get_tracer("itdocs.search")


@asynccontextmanager
async def search_span(
    name: str, attributes: dict[str, Any] | None = None
) -> AsyncIterator[trace.Span]:
    """Open a span around one awaited search step.

    The span becomes current for the block; exceptions mark it as failed and
    propagate. Without a configured provider the span is a no-op.
    """
    with _tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        record_exception=True,
        set_status_on_exception=True,
    ) as span:
        yield span
