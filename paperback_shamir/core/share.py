"""The share record handed to callers by split() and consumed by combine()."""

from __future__ import annotations

from dataclasses import dataclass

from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE


@dataclass(frozen=True)
class Share:
    """One Shamir share of a multi-block secret.

    ``y[i]`` is f_i(x) where f_i is the random polynomial hiding block ``i``.
    ``k`` and ``total_length`` are public metadata identical across every share
    of a split.
    """

    x: int
    k: int
    y: tuple[int, ...]
    total_length: int
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.y, tuple):
            object.__setattr__(self, "y", tuple(self.y))

    @property
    def block_count(self) -> int:
        return len(self.y)

    def __repr__(self) -> str:
        # y values are omitted so shares do not end up in logs by accident.
        return (
            f"Share(x={self.x}, k={self.k}, blocks={len(self.y)}, "
            f"total_length={self.total_length}, block_size={self.block_size})"
        )
