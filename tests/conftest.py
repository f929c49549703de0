"""Shared test fixtures for the paperback_shamir test suite."""

from __future__ import annotations

import os

# Tests must not depend on a developer's local .env.
os.environ["PAPERBACK_WORKERS"] = "1"
os.environ["PAPERBACK_PARALLEL_MIN_BLOCKS"] = "64"
os.environ["PAPERBACK_MAX_SHARES"] = "0"
os.environ["PAPERBACK_LOG_LEVEL"] = "INFO"
os.environ["PAPERBACK_LOG_FORMAT"] = "console"

import pytest
import structlog

from helpers import SeededRandomSource


@pytest.fixture
def rng() -> SeededRandomSource:
    return SeededRandomSource(1234)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
