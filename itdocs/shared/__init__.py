"""Shared cross-cutting helpers: telemetry (logging, tracing) and utilities."""
