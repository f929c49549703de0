"""Test-only helpers: reproducible randomness, share shuffling and copying."""

from __future__ import annotations

import random

from paperback_shamir import DEFAULT_BLOCK_SIZE, Share, decode_share, encode_share

# Non-cryptographic; only used to build test data.
_rng = random.Random(0x5EC12E7)


class SeededRandomSource:
    """Deterministic RandomSource. Never use outside tests."""

    def __init__(self, seed: int) -> None:
        self._random = random.Random(seed)

    def randbelow(self, exclusive_upper_bound: int) -> int:
        return self._random.randrange(exclusive_upper_bound)


def random_bytes(size: int) -> bytes:
    return bytes(_rng.getrandbits(8) for _ in range(size))


def shuffle_shares(shares: list[Share]) -> list[Share]:
    shuffled = list(shares)
    _rng.shuffle(shuffled)
    return shuffled


def copy_share(share: Share) -> Share:
    """Copy a share through the JSON encoding."""
    return decode_share(encode_share(share))


def copy_shares(shares: list[Share]) -> list[Share]:
    return [copy_share(s) for s in shares]


BS = DEFAULT_BLOCK_SIZE

SECRET_VECTORS = [
    b"Hello, world!",
    b"A slightly longer test string, which spans multiple parts.",
    b"The quick brown fox jumps over the lazy dog.",
    "Some numeric values: π=3.14156926 e=2.71828. Punctuation!?@#%69*&#!@(&%(!@)#)!)%*(!@#{}{}:|:,".encode(),
    # Leading zero byte.
    b"\x00" + random_bytes(BS),
    # Zero byte on a block boundary.
    random_bytes(BS) + b"\x00" + random_bytes(BS),
    # Zeros in the final block.
    random_bytes(BS) + b"\x00\x01",
    b"",
    b"\x00" * BS,
    b"\x00" * (BS + 1),
    random_bytes(BS // 2),
    random_bytes(BS - 1),
    random_bytes(BS * 2 + 1),
    random_bytes(BS * 16 - 2),
    random_bytes(BS * 34 + 23),
    random_bytes(BS * 74 - 19),
]

SCHEMES = [
    (1, 1),
    (2, 2),
    (2, 3),
    (2, 4),
    (4, 4),
    (4, 7),
    (7, 7),
    (7, 8),
    (7, 12),
    (8, 9),
    (14, 19),
]
