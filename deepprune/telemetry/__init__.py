"""Telemetry package - OpenTelemetry metrics and tracing helpers."""

from .metrics import (
    record_sanitize_metrics,
    sanitize_latency_ms,
    sanitize_pruned_total,
    sanitize_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_sanitize_metrics",
    "sanitize_latency_ms",
    "sanitize_pruned_total",
    "sanitize_total",
]
