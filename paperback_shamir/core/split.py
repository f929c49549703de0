"""Split a secret byte string into Shamir shares.

Each block of the secret gets its own random polynomial of degree k-1 with the
block value as constant term. Share ``x`` carries f_i(x) for every block ``i``,
so any k shares recover every block independently.
"""

from __future__ import annotations

import structlog

from paperback_shamir import metrics
from paperback_shamir.config import Config
from paperback_shamir.core.blocks import bytes_to_blocks
from paperback_shamir.core.parallel import map_block_ranges
from paperback_shamir.core.polynomial import evaluate, random_polynomial
from paperback_shamir.core.share import Share
from paperback_shamir.errors import InvalidParametersError
from paperback_shamir.utils.entropy import RandomSource, default_source
from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE, PRIME

log = structlog.get_logger()


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_parameters(k: int, n: int, max_shares: int | None = None) -> None:
    """Raise InvalidParametersError unless ``1 <= k <= n < PRIME``.

    ``max_shares`` of None or 0 applies no cap beyond the field bound.
    """
    if not _is_int(k) or not _is_int(n):
        raise InvalidParametersError(f"k and n must be integers, got k={k!r} n={n!r}")
    if k < 1:
        raise InvalidParametersError(f"Threshold k must be >= 1, got {k}")
    if k > n:
        raise InvalidParametersError(f"Threshold k={k} cannot exceed share count n={n}")
    if n >= PRIME:
        raise InvalidParametersError("Share count n must be smaller than the field prime")
    if max_shares and n > max_shares:
        raise InvalidParametersError(f"Share count n={n} exceeds the configured maximum of {max_shares}")


def split(
    secret: bytes,
    k: int,
    n: int,
    *,
    rng: RandomSource | None = None,
    workers: int | None = None,
    config: Config | None = None,
) -> list[Share]:
    """Split ``secret`` into ``n`` shares, any ``k`` of which recover it.

    Args:
        secret: Arbitrary bytes, possibly empty.
        k: Reconstruction threshold.
        n: Number of shares to produce (x-coordinates 1..n).
        rng: Source of polynomial coefficients. Defaults to the OS CSPRNG.
        workers: Threads for evaluating polynomials. Defaults to ``config.workers``.
        config: Settings override; ``Config()`` when omitted.

    Returns:
        ``n`` shares ordered by x-coordinate.

    Raises:
        InvalidParametersError: bad ``secret`` type, or ``k``/``n`` out of range.
    """
    config = config or Config()
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        metrics.SPLIT_ERRORS.inc()
        raise InvalidParametersError(f"secret must be bytes, got {type(secret).__name__}")
    try:
        validate_parameters(k, n, config.max_shares)
    except InvalidParametersError as e:
        metrics.SPLIT_ERRORS.inc()
        log.warning("split_rejected", reason=str(e))
        raise

    rng = rng or default_source()
    workers = config.workers if workers is None else workers
    xs = range(1, n + 1)

    with metrics.OPERATION_DURATION.labels(operation="split").time():
        blocks = bytes_to_blocks(bytes(secret), DEFAULT_BLOCK_SIZE)
        # Drawn sequentially on this thread so the rng is never shared.
        polynomials = [random_polynomial(k - 1, block.value, rng) for block in blocks]

        def evaluate_range(start: int, stop: int) -> list[list[int]]:
            return [[evaluate(polynomials[i], x) for x in xs] for i in range(start, stop)]

        rows = map_block_ranges(evaluate_range, len(polynomials), workers, config.parallel_min_blocks)
        polynomials.clear()

        shares = [
            Share(
                x=x,
                k=k,
                y=tuple(row[col] for row in rows),
                total_length=len(secret),
                block_size=DEFAULT_BLOCK_SIZE,
            )
            for col, x in enumerate(xs)
        ]

    metrics.SPLITS.inc()
    metrics.BLOCKS_PROCESSED.labels(operation="split").inc(len(blocks))
    log.debug("secret_split", k=k, n=n, blocks=len(blocks))
    return shares
