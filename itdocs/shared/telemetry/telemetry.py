"""OpenTelemetry tracing for the search API.

Exporters: "otlp" (gRPC collector such as Jaeger or Tempo), "console" for
local runs, or "none" to record spans without exporting them. Health checks
are excluded from request instrumentation.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from itdocs.core.config import Settings

logger = logging.getLogger(__name__)

UNTRACED_URLS = "/api/health"


def _build_exporter(kind: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if kind == "none":
        return None
    if kind == "otlp" and otlp_endpoint:
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if kind != "console":
        logger.warning("Exporter %r unusable without an endpoint; using console", kind)
    return ConsoleSpanExporter()


class SearchTelemetry:
    """Tracer provider lifecycle for one application process."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.provider: TracerProvider | None = None

    def start(self, app: FastAPI) -> bool:
        """Install the global tracer provider and instrument app.

        Returns False (and leaves tracing off) if the SDK could not be set
        up; startup continues either way.
        """
        settings = self.settings
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: settings.app_name,
                        SERVICE_VERSION: settings.app_version,
                        "deployment.environment": settings.telemetry_environment,
                    }
                ),
                sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
            )
            exporter = _build_exporter(
                settings.telemetry_exporter, settings.telemetry_otlp_endpoint
            )
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
            FastAPIInstrumentor.instrument_app(
                app, tracer_provider=provider, excluded_urls=UNTRACED_URLS
            )
        except Exception:
            logger.exception("Telemetry setup failed; continuing without tracing")
            return False
        self.provider = provider
        logger.info(
            "Tracing enabled: exporter=%s sample_rate=%s",
            settings.telemetry_exporter,
            settings.telemetry_sample_rate,
        )
        return True

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.provider is None:
            return
        try:
            self.provider.shutdown()
        except Exception:
            logger.exception("Error flushing spans on shutdown")
        self.provider = None


_telemetry: SearchTelemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> SearchTelemetry | None:
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: SearchTelemetry | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
