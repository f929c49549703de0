"""Random sources for polynomial coefficients.

split() takes the source as an explicit argument. The default draws from the
operating system CSPRNG through :mod:`secrets`; anything else passed in must be
cryptographically secure outside of tests.
"""

from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    def randbelow(self, exclusive_upper_bound: int) -> int:
        """Return a uniform integer in [0, exclusive_upper_bound)."""
        ...


class SystemRandomSource:
    """OS-backed CSPRNG. Safe to share between threads."""

    def randbelow(self, exclusive_upper_bound: int) -> int:
        return secrets.randbelow(exclusive_upper_bound)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


def default_source() -> RandomSource:
    return SystemRandomSource()
