"""Tracing helpers: search spans and exporter selection."""

import pytest
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from itdocs.shared.telemetry import search_span
from itdocs.shared.telemetry.telemetry import _build_exporter


async def test_search_span_accepts_result_attributes() -> None:
    async with search_span("search.source", {"search.source": "contacts"}) as span:
        span.set_attribute("search.result_count", 3)


async def test_search_span_propagates_errors() -> None:
    with pytest.raises(ValueError, match="boom"):
        async with search_span("search.source"):
            raise ValueError("boom")


def test_exporter_none_records_without_exporting() -> None:
    assert _build_exporter("none", None) is None


def test_otlp_without_endpoint_falls_back_to_console() -> None:
    assert isinstance(_build_exporter("otlp", None), ConsoleSpanExporter)


def test_otlp_with_endpoint() -> None:
    assert isinstance(_build_exporter("otlp", "http://localhost:4317"), OTLPSpanExporter)
