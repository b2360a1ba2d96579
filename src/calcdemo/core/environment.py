"""
Environment configuration for calcdemo.

Settings are read from environment variables; there are no configuration
files.

Environment values:
    - CALCDEMO_INT_BITS: signed integer width used for literals and
      intermediate results. 32 (default) mirrors a C ``int``; 0 selects
      Python's unbounded integers. Accepted: 0 or 8..64.
    - LOG_LEVEL: logging level for the command line (default: WARNING).

Usage:
    from calcdemo.core.environment import load_settings

    settings = load_settings()
    settings.int_max  # 2147483647
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

INT_BITS_VAR = "CALCDEMO_INT_BITS"
LOG_LEVEL_VAR = "LOG_LEVEL"

DEFAULT_INT_BITS = 32
DEFAULT_LOG_LEVEL = "WARNING"

_MIN_BOUNDED_BITS = 8
_MAX_BOUNDED_BITS = 64


class Settings(BaseModel):
    """Runtime settings shared by the parser and evaluator."""

    int_bits: int = Field(
        default=DEFAULT_INT_BITS,
        description="Signed integer width; 0 means unbounded",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def bounded(self) -> bool:
        return self.int_bits != 0

    @property
    def int_min(self) -> int | None:
        """Smallest representable value, or None when unbounded."""
        if not self.bounded:
            return None
        return -(1 << (self.int_bits - 1))

    @property
    def int_max(self) -> int | None:
        """Largest representable value, or None when unbounded."""
        if not self.bounded:
            return None
        return (1 << (self.int_bits - 1)) - 1

    def fits(self, value: int) -> bool:
        """Check whether value is representable under these settings."""
        int_min, int_max = self.int_min, self.int_max
        if int_min is None or int_max is None:
            return True
        return int_min <= value <= int_max


def get_int_bits() -> int:
    """Get the integer width from CALCDEMO_INT_BITS.

    Unknown or out-of-range values log a warning and fall back to the
    default width.

    Examples:
        >>> import os
        >>> os.environ["CALCDEMO_INT_BITS"] = "64"
        >>> get_int_bits()
        64
    """
    raw = os.environ.get(INT_BITS_VAR, "").strip()
    if raw == "":
        return DEFAULT_INT_BITS

    try:
        bits = int(raw)
    except ValueError:
        logger.warning(
            "Invalid %s value '%s'. Expected an integer. Defaulting to %d.",
            INT_BITS_VAR,
            raw,
            DEFAULT_INT_BITS,
        )
        return DEFAULT_INT_BITS

    if bits != 0 and not (_MIN_BOUNDED_BITS <= bits <= _MAX_BOUNDED_BITS):
        logger.warning(
            "Unsupported %s value %d. Valid values: 0 or %d..%d. Defaulting to %d.",
            INT_BITS_VAR,
            bits,
            _MIN_BOUNDED_BITS,
            _MAX_BOUNDED_BITS,
            DEFAULT_INT_BITS,
        )
        return DEFAULT_INT_BITS

    return bits


def get_log_level() -> int:
    """Get the logging level from LOG_LEVEL, defaulting to WARNING."""
    name = os.environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).upper().strip()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(
            "Unknown %s value '%s'. Defaulting to %s.", LOG_LEVEL_VAR, name, DEFAULT_LOG_LEVEL
        )
        return logging.WARNING
    return level


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(int_bits=get_int_bits())
