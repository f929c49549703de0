"""Pydantic model for the lossless share encoding.

This is the boundary consumed by rendering (QR/paper) and storage layers. Field
elements are hex strings so the JSON stays portable to parsers without big
integer support.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from paperback_shamir.core.blocks import block_count
from paperback_shamir.core.share import Share
from paperback_shamir.utils.field import DEFAULT_BLOCK_SIZE, PRIME

SHARE_FORMAT_VERSION = 0

_HEX_RE = re.compile(r"^(0x)?[0-9a-fA-F]{1,64}$")


def _parse_element(v: object, field_name: str) -> int:
    if isinstance(v, bool):
        raise ValueError(f"{field_name} must be an integer or hex string")
    if isinstance(v, int):
        value = v
    elif isinstance(v, str):
        if not _HEX_RE.match(v):
            raise ValueError(f"{field_name} must be a hex string")
        value = int(v, 16)
    else:
        raise ValueError(f"{field_name} must be an integer or hex string")
    if not 0 <= value < PRIME:
        raise ValueError(f"{field_name} is outside the field")
    return value


class ShareModel(BaseModel):
    """Versioned wire form of a :class:`Share`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = Field(default=SHARE_FORMAT_VERSION, ge=0)
    x: int = Field(ge=1, lt=PRIME)
    k: int = Field(ge=1, lt=PRIME)
    block_size: int = Field(default=DEFAULT_BLOCK_SIZE)
    total_length: int = Field(ge=0)
    y: list[int] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: int) -> int:
        if v != SHARE_FORMAT_VERSION:
            raise ValueError(f"Unsupported share format version {v}")
        return v

    @field_validator("block_size")
    @classmethod
    def validate_block_size(cls, v: int) -> int:
        if v != DEFAULT_BLOCK_SIZE:
            raise ValueError(f"block_size must be {DEFAULT_BLOCK_SIZE}, got {v}")
        return v

    @field_validator("y", mode="before")
    @classmethod
    def parse_y(cls, v: object) -> list[int]:
        if not isinstance(v, (list, tuple)):
            raise ValueError("y must be a list of field elements")
        return [_parse_element(item, "y") for item in v]

    @field_serializer("y")
    def serialize_y(self, y: list[int]) -> list[str]:
        return [format(value, "x") for value in y]

    @model_validator(mode="after")
    def check_block_count(self) -> ShareModel:
        expected = block_count(self.total_length, self.block_size)
        if len(self.y) != expected:
            raise ValueError(
                f"y must hold {expected} values for a {self.total_length}-byte secret, got {len(self.y)}"
            )
        return self

    @classmethod
    def from_share(cls, share: Share) -> ShareModel:
        return cls(
            x=share.x,
            k=share.k,
            block_size=share.block_size,
            total_length=share.total_length,
            y=list(share.y),
        )

    def to_share(self) -> Share:
        return Share(
            x=self.x,
            k=self.k,
            y=tuple(self.y),
            total_length=self.total_length,
            block_size=self.block_size,
        )


def encode_share(share: Share) -> str:
    """Serialise a share to JSON."""
    return ShareModel.from_share(share).model_dump_json()


def decode_share(payload: str | bytes) -> Share:
    """Parse JSON produced by :func:`encode_share`.

    Raises:
        pydantic.ValidationError: malformed payload or unsupported version.
    """
    return ShareModel.model_validate_json(payload).to_share()
