"""Optional thread fan-out for the per-block loops of split and combine."""

from __future__ import annotations

import concurrent.futures
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def _ranges(count: int, parts: int) -> list[tuple[int, int]]:
    step = -(-count // parts)
    return [(start, min(start + step, count)) for start in range(0, count, step)]


def map_block_ranges(
    fn: Callable[[int, int], list[T]],
    count: int,
    workers: int,
    min_blocks: int = 1,
) -> list[T]:
    """Run ``fn(start, stop)`` over disjoint slices of ``range(count)``.

    Results are concatenated in block order. With ``workers <= 1`` or fewer
    than ``min_blocks`` blocks everything runs on the calling thread. Any
    exception raised by a worker propagates to the caller.
    """
    if workers <= 1 or count < max(min_blocks, 2):
        return fn(0, count)

    ranges = _ranges(count, min(workers, count))
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(fn, start, stop) for start, stop in ranges]
        results: list[T] = []
        for future in futures:
            results.extend(future.result())
    return results
