"""Exception taxonomy for splitting and combining.

Split-time parameter problems and combine-time share-set problems are caller
errors and never retried. ``FieldInvariantError`` signals a broken invariant
inside the library and should be treated as a defect.
"""

from __future__ import annotations


class ShamirError(Exception):
    """Base class for every error raised by paperback_shamir."""


class InvalidParametersError(ShamirError, ValueError):
    """Raised by split() for a bad secret, threshold or share count."""


class CombineError(ShamirError):
    """Base class for share sets that cannot be combined."""


class InsufficientSharesError(CombineError):
    """Fewer distinct shares than the threshold declared on the shares."""

    def __init__(self, supplied: int, threshold: int) -> None:
        super().__init__(f"Need at least {threshold} shares to combine, got {supplied}")
        self.supplied = supplied
        self.threshold = threshold


class InconsistentSharesError(CombineError):
    """Shares disagree on scheme metadata (likely from different splits)."""


class DuplicateShareError(CombineError):
    """Two supplied shares carry the same x-coordinate."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate share for x={x}")
        self.x = x


class FieldInvariantError(ShamirError, RuntimeError):
    """Internal arithmetic invariant violated (e.g. inverting zero)."""
