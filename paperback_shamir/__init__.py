"""Shamir's Secret Sharing for arbitrary-length byte secrets."""

from __future__ import annotations

__version__ = "0.1.0"

from paperback_shamir.core.combine import combine
from paperback_shamir.core.share import Share
from paperback_shamir.core.split import split
from paperback_shamir.errors import (
    CombineError,
    DuplicateShareError,
    FieldInvariantError,
    InconsistentSharesError,
    InsufficientSharesError,
    InvalidParametersError,
    ShamirError,
)
from paperback_shamir.models import SHARE_FORMAT_VERSION, ShareModel, decode_share, encode_share
from paperback_shamir.utils.entropy import RandomSource, SystemRandomSource
from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE, PRIME

__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "PRIME",
    "SHARE_FORMAT_VERSION",
    "CombineError",
    "DuplicateShareError",
    "FieldInvariantError",
    "InconsistentSharesError",
    "InsufficientSharesError",
    "InvalidParametersError",
    "RandomSource",
    "ShamirError",
    "Share",
    "ShareModel",
    "SystemRandomSource",
    "combine",
    "decode_share",
    "encode_share",
    "split",
]
