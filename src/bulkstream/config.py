"""
Startup configuration for the bulk logger.

The bulk size is the only required setting. It is validated once here and
is immutable afterwards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Upper bound of an unsigned 64-bit machine word
MAX_BULK_SIZE = 2**64 - 1

COLLISION_OVERWRITE = "overwrite"
COLLISION_SUFFIX = "suffix"
COLLISION_POLICIES = (COLLISION_OVERWRITE, COLLISION_SUFFIX)

_DIGITS = re.compile(r"[0-9]+")


class ConfigurationError(ValueError):
    """Base class for fatal startup configuration errors."""

    message = "Invalid configuration"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{self.message}: {value}")


class InvalidBulkSizeError(ConfigurationError):
    """Bulk size is not a base-10 integer literal."""

    message = "Invalid bulk size"


class BulkSizeOutOfRangeError(ConfigurationError):
    """Bulk size does not fit the unsigned machine range."""

    message = "Bulk size out of range"


class NonPositiveBulkSizeError(ConfigurationError):
    """Bulk size of zero would flush on every command."""

    message = "Bulk size must be positive"


def parse_bulk_size(raw: str) -> int:
    """
    Parse the bulk size argument.

    Args:
        raw: Command-line text, expected to be ASCII digits only

    Returns:
        The bulk size as a positive int

    Raises:
        InvalidBulkSizeError: Empty, signed, padded or non-numeric input
        BulkSizeOutOfRangeError: Value above MAX_BULK_SIZE
        NonPositiveBulkSizeError: Value is zero
    """
    if not _DIGITS.fullmatch(raw):
        raise InvalidBulkSizeError(raw)

    value = int(raw)
    if value > MAX_BULK_SIZE:
        raise BulkSizeOutOfRangeError(raw)
    if value == 0:
        raise NonPositiveBulkSizeError(raw)
    return value


@dataclass(frozen=True)
class BulkConfig:
    """Validated runtime settings."""

    bulk_size: int
    output_dir: Path = Path(".")
    collision_policy: str = COLLISION_OVERWRITE

    def __post_init__(self):
        if self.bulk_size <= 0:
            raise NonPositiveBulkSizeError(str(self.bulk_size))
        if self.collision_policy not in COLLISION_POLICIES:
            raise ValueError(
                f"Unknown collision policy {self.collision_policy!r}, "
                f"expected one of {COLLISION_POLICIES}"
            )

    @classmethod
    def from_args(cls, args: Any) -> "BulkConfig":
        """Build a config from an argparse namespace."""
        config = cls(
            bulk_size=parse_bulk_size(args.bulk_size),
            output_dir=Path(args.output_dir),
            collision_policy=args.on_collision,
        )
        logger.debug("BulkConfig: %s", config)
        return config
