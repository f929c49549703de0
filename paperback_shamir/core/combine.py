"""Recover a secret from a threshold of shares.

Integrity is not checked: if any of the shares used is foreign to the split or
has been altered, combine() still succeeds and returns a wrong secret of the
recorded length, deterministically for a given share set. Callers
that need tamper detection must authenticate the secret separately (for example
by storing a MAC or checksum alongside it before splitting).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from paperback_shamir import metrics
from paperback_shamir.config import Config
from paperback_shamir.core.blocks import block_count, blocks_to_bytes
from paperback_shamir.core.parallel import map_block_ranges
from paperback_shamir.core.polynomial import combine_weighted, lagrange_weights
from paperback_shamir.core.share import Share
from paperback_shamir.errors import (
    CombineError,
    DuplicateShareError,
    InconsistentSharesError,
    InsufficientSharesError,
)
from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE, PRIME, is_element

log = structlog.get_logger()

_FAILURE_REASONS = {
    InsufficientSharesError: "insufficient",
    InconsistentSharesError: "inconsistent",
    DuplicateShareError: "duplicate",
}


def _check_consistency(shares: Sequence[Share]) -> None:
    first = shares[0]
    if not isinstance(first.k, int) or first.k < 1:
        raise InconsistentSharesError(f"Invalid threshold on share: k={first.k!r}")
    if first.block_size != DEFAULT_BLOCK_SIZE:
        raise InconsistentSharesError(
            f"Unsupported block size {first.block_size} (expected {DEFAULT_BLOCK_SIZE})"
        )
    if first.total_length < 0 or block_count(first.total_length, first.block_size) != len(first.y):
        raise InconsistentSharesError(
            f"Share carries {len(first.y)} blocks for a {first.total_length}-byte secret"
        )
    for share in shares:
        if share.k != first.k:
            raise InconsistentSharesError(f"Shares disagree on threshold: {first.k} vs {share.k}")
        if share.block_size != first.block_size:
            raise InconsistentSharesError(
                f"Shares disagree on block size: {first.block_size} vs {share.block_size}"
            )
        if share.total_length != first.total_length:
            raise InconsistentSharesError(
                f"Shares disagree on secret length: {first.total_length} vs {share.total_length}"
            )
        if len(share.y) != len(first.y):
            raise InconsistentSharesError(
                f"Shares disagree on block count: {len(first.y)} vs {len(share.y)}"
            )
        if not is_element(share.x) or share.x == 0:
            raise InconsistentSharesError(f"Invalid x-coordinate: {share.x!r}")
        if not all(is_element(y) for y in share.y):
            raise InconsistentSharesError(f"Share x={share.x} holds values outside the field")


def select_shares(shares: Sequence[Share]) -> list[Share]:
    """Validate a share set and return the ``k`` shares used for interpolation.

    Raises:
        InsufficientSharesError: empty input or fewer than ``k`` shares.
        InconsistentSharesError: metadata mismatch (mixed splits) or malformed share.
        DuplicateShareError: two shares with the same x-coordinate.
    """
    if not shares:
        raise InsufficientSharesError(supplied=0, threshold=1)
    _check_consistency(shares)

    seen: set[int] = set()
    for share in shares:
        if share.x in seen:
            raise DuplicateShareError(share.x)
        seen.add(share.x)

    k = shares[0].k
    if len(shares) < k:
        raise InsufficientSharesError(supplied=len(shares), threshold=k)
    return list(shares[:k])


def combine(
    shares: Iterable[Share],
    *,
    workers: int | None = None,
    config: Config | None = None,
) -> bytes:
    """Reconstruct the secret from at least ``k`` shares of one split.

    Exactly the first ``k`` shares supplied are interpolated; any further
    shares only take part in the consistency and duplicate checks.

    Raises:
        InsufficientSharesError, InconsistentSharesError, DuplicateShareError
    """
    config = config or Config()
    workers = config.workers if workers is None else workers
    shares = list(shares)

    try:
        chosen = select_shares(shares)
    except CombineError as e:
        reason = _FAILURE_REASONS.get(type(e), "error")
        metrics.COMBINES.labels(result=reason).inc()
        log.warning("combine_rejected", reason=reason, shares=len(shares), error=str(e))
        raise

    first = chosen[0]
    with metrics.OPERATION_DURATION.labels(operation="combine").time():
        weights = lagrange_weights([s.x for s in chosen], PRIME)
        # Genuine shares always recover a value below 256**block_size. Values in
        # [256**block_size, PRIME) only come from foreign or altered shares and
        # are folded into block width so they decode to wrong bytes.
        block_range = 256**first.block_size

        def interpolate_range(start: int, stop: int) -> list[int]:
            return [
                combine_weighted(weights, [s.y[i] for s in chosen], PRIME) % block_range
                for i in range(start, stop)
            ]

        values = map_block_ranges(interpolate_range, len(first.y), workers, config.parallel_min_blocks)
        secret = blocks_to_bytes(values, first.total_length, first.block_size)

    metrics.COMBINES.labels(result="ok").inc()
    metrics.BLOCKS_PROCESSED.labels(operation="combine").inc(len(values))
    log.debug("shares_combined", k=first.k, shares=len(shares), blocks=len(values))
    return secret
