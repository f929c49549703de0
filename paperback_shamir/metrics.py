"""Prometheus metrics for split/combine operations.

Only counts and timings are recorded; nothing derived from secret material.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram, generate_latest

SPLITS = Counter(
    "paperback_shamir_splits_total",
    "Total successful secret splits",
)

SPLIT_ERRORS = Counter(
    "paperback_shamir_split_errors_total",
    "Split calls rejected for invalid parameters",
)

COMBINES = Counter(
    "paperback_shamir_combines_total",
    "Combine calls by result",
    ["result"],  # ok, insufficient, inconsistent, duplicate
)

BLOCKS_PROCESSED = Counter(
    "paperback_shamir_blocks_processed_total",
    "Secret blocks split or recovered",
    ["operation"],  # split, combine
)

OPERATION_DURATION = Histogram(
    "paperback_shamir_operation_seconds",
    "Split/combine duration in seconds",
    ["operation"],  # split, combine
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)


def metrics_response() -> bytes:
    """Generate Prometheus-compatible metrics text."""
    return generate_latest()
