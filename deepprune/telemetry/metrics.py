# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for deepprune."""

from __future__ import annotations

import logging
import time

from .runtime import meter

logger = logging.getLogger(__name__)

sanitize_total = meter.create_counter(
    name="deepprune.sanitize.total",
    description="Counts sanitize calls partitioned by outcome (ok, cyclic, depth).",
    unit="1",
)

sanitize_pruned_total = meter.create_counter(
    name="deepprune.sanitize.pruned.total",
    description="Counts nodes removed from input trees.",
    unit="1",
)

sanitize_latency_ms = meter.create_histogram(
    name="deepprune.sanitize.latency.ms",
    description="Time taken to walk and prune a single input tree.",
    unit="ms",
)


def record_sanitize_metrics(status: str, pruned_count: int, started_at: float) -> None:
    """Record latency, outcome and prune count for one sanitize call.

    Args:
        status: Outcome of the call ("ok", "cyclic" or "depth")
        pruned_count: Number of nodes removed from the tree
        started_at: Timestamp from time.perf_counter() when the call started
    """
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        sanitize_latency_ms.record(duration_ms, {"status": status})
        sanitize_total.add(1, {"status": status})
        if pruned_count:
            sanitize_pruned_total.add(pruned_count)
    except Exception:
        # Telemetry must never interfere with user code
        logger.debug("Failed to record sanitize metrics", exc_info=True)


__all__ = [
    "record_sanitize_metrics",
    "sanitize_latency_ms",
    "sanitize_pruned_total",
    "sanitize_total",
]
