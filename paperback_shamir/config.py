"""Library configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _int_env(key: str, default: str) -> int:
    val = os.getenv(key, default)
    try:
        return int(val)
    except (ValueError, TypeError, OverflowError):
        raise ValueError(f"Invalid integer for {key}: {val!r}")


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Config:
    # Logging
    log_level: str = os.getenv("PAPERBACK_LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("PAPERBACK_LOG_FORMAT", "console").lower()

    # Threads used for the per-block loops of split/combine (1 = no pool)
    workers: int = _int_env("PAPERBACK_WORKERS", "1")
    # Secrets with fewer blocks than this always run on the calling thread
    parallel_min_blocks: int = _int_env("PAPERBACK_PARALLEL_MIN_BLOCKS", "64")

    # Optional cap on shares per split; 0 leaves only the field bound n < PRIME
    max_shares: int = _int_env("PAPERBACK_MAX_SHARES", "0")

    def validate(self, *, strict: bool = False) -> list[str]:
        """Validate config. Returns list of warnings (empty = all good).

        Args:
            strict: If True, raise ValueError on any warning.
        """
        warnings = []
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"PAPERBACK_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}")
        if self.log_format not in _LOG_FORMATS:
            raise ValueError(f"PAPERBACK_LOG_FORMAT must be one of {', '.join(_LOG_FORMATS)}, got {self.log_format!r}")
        if self.workers < 1:
            raise ValueError(f"PAPERBACK_WORKERS must be >= 1, got {self.workers}")
        if self.parallel_min_blocks < 1:
            raise ValueError(f"PAPERBACK_PARALLEL_MIN_BLOCKS must be >= 1, got {self.parallel_min_blocks}")
        if self.max_shares < 0:
            raise ValueError(f"PAPERBACK_MAX_SHARES must be >= 0, got {self.max_shares}")
        cpus = os.cpu_count() or 1
        if self.workers > cpus * 4:
            warnings.append(
                f"PAPERBACK_WORKERS ({self.workers}) is far above the CPU count ({cpus}) "
                "and extra threads only add overhead"
            )
        if self.log_level == "DEBUG":
            warnings.append("PAPERBACK_LOG_LEVEL=DEBUG: share metadata will be logged on every call")
        if strict and warnings:
            raise ValueError("Config validation failed in strict mode:\n" + "\n".join(f"  - {w}" for w in warnings))
        return warnings
