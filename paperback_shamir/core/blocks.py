"""Block codec: secret bytes <-> sequence of field elements.

Convention (fixed, split and combine must agree):

- the secret is cut into ``block_size`` chunks, the last one may be shorter;
- each chunk is read most-significant byte first, a short final chunk being
  right-padded with zero bytes to the full width before conversion;
- the secret's total byte length travels on every share and is used to drop
  the padding again on decode.

Every block decodes to exactly ``block_size`` bytes, so leading and embedded
zero bytes survive the round trip.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from paperback_shamir.errors import FieldInvariantError
from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE, PRIME


@dataclass(frozen=True)
class Block:
    """One chunk of a secret mapped to a field element."""

    value: int
    is_final: bool
    length: int  # Bytes of the secret in this chunk (< block_size only when final)


def block_count(total_length: int, block_size: int = DEFAULT_BLOCK_SIZE) -> int:
    """Number of blocks a secret of ``total_length`` bytes occupies."""
    if total_length < 0:
        raise ValueError(f"total_length must be >= 0, got {total_length}")
    return -(-total_length // block_size)


def _check_block_size(block_size: int, prime: int) -> None:
    if block_size < 1:
        raise ValueError(f"block_size must be >= 1, got {block_size}")
    if 256**block_size > prime:
        raise ValueError(f"block_size {block_size} does not fit in the field")


def bytes_to_blocks(
    secret: bytes,
    block_size: int = DEFAULT_BLOCK_SIZE,
    prime: int = PRIME,
) -> list[Block]:
    """Partition ``secret`` into blocks and convert each to a field element."""
    _check_block_size(block_size, prime)
    blocks = []
    total = len(secret)
    for start in range(0, total, block_size):
        chunk = bytes(secret[start : start + block_size])
        value = int.from_bytes(chunk.ljust(block_size, b"\x00"), "big")
        if value >= prime:
            raise FieldInvariantError("Block value exceeds the field prime")
        blocks.append(Block(value=value, is_final=start + block_size >= total, length=len(chunk)))
    return blocks


def blocks_to_bytes(
    values: Sequence[int],
    total_length: int,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> bytes:
    """Turn field elements back into the original ``total_length`` bytes.

    Raises:
        ValueError: ``total_length`` does not match the number of blocks.
        FieldInvariantError: a value does not fit in ``block_size`` bytes.
    """
    expected = block_count(total_length, block_size)
    if len(values) != expected:
        raise ValueError(
            f"total_length {total_length} needs {expected} blocks, got {len(values)}"
        )
    limit = 256**block_size
    out = bytearray()
    for value in values:
        if not 0 <= value < limit:
            raise FieldInvariantError(f"Block value does not fit in {block_size} bytes")
        out += value.to_bytes(block_size, "big")
    del out[total_length:]
    return bytes(out)
