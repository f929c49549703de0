"""Tests for Prometheus counters around split/combine."""

from __future__ import annotations

import pytest

from paperback_shamir import DuplicateShareError, InsufficientSharesError, combine, split
from paperback_shamir.metrics import (
    BLOCKS_PROCESSED,
    COMBINES,
    SPLIT_ERRORS,
    SPLITS,
    metrics_response,
)


class TestMetricsResponse:
    def test_returns_bytes(self) -> None:
        assert isinstance(metrics_response(), bytes)

    def test_contains_metric_names(self) -> None:
        split(b"x", k=1, n=1)
        text = metrics_response().decode()
        assert "paperback_shamir_splits_total" in text


class TestCounters:
    def test_split_increments(self) -> None:
        before = SPLITS._value.get()
        blocks_before = BLOCKS_PROCESSED.labels(operation="split")._value.get()
        split(b"a" * 40, k=2, n=3)
        assert SPLITS._value.get() == before + 1
        assert BLOCKS_PROCESSED.labels(operation="split")._value.get() == blocks_before + 3

    def test_split_error_increments(self) -> None:
        before = SPLIT_ERRORS._value.get()
        with pytest.raises(ValueError):
            split(b"a", k=0, n=3)
        assert SPLIT_ERRORS._value.get() == before + 1

    def test_combine_ok_increments(self) -> None:
        before = COMBINES.labels(result="ok")._value.get()
        combine(split(b"ok", k=2, n=2))
        assert COMBINES.labels(result="ok")._value.get() == before + 1

    def test_combine_failures_by_reason(self) -> None:
        shares = split(b"fail", k=2, n=2)
        insufficient = COMBINES.labels(result="insufficient")._value.get()
        duplicate = COMBINES.labels(result="duplicate")._value.get()
        with pytest.raises(InsufficientSharesError):
            combine(shares[:1])
        with pytest.raises(DuplicateShareError):
            combine([shares[0], shares[0]])
        assert COMBINES.labels(result="insufficient")._value.get() == insufficient + 1
        assert COMBINES.labels(result="duplicate")._value.get() == duplicate + 1
