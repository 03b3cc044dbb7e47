"""Logging setup, OpenTelemetry lifecycle and search spans."""

from itdocs.shared.telemetry.logging import RequestIdFilter, setup_logging
from itdocs.shared.telemetry.telemetry import (
    SearchTelemetry,
    get_telemetry,
    set_telemetry,
)
from itdocs.shared.telemetry.tracing import search_span

__all__ = [
    "RequestIdFilter",
    "SearchTelemetry",
    "get_telemetry",
    "search_span",
    "set_telemetry",
    "setup_logging",
]
