"""Centralized defaults for the coding pipeline and the command line.

Defines immutable tolerances, precision limits, the default symbol order and
the sample messages used by ``arithcode demo``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Numeric tolerances
    TOLERANCE: float = 1e-9

    # Mantissa bits of an IEEE-754 double; narrowing past this is lossy
    PRECISION_BITS: int = 52
    # Above this many bits `inspect` warns that a text is close to the ceiling
    SAFE_PRECISION_BITS: int = 45

    # Symbol ordering
    DEFAULT_ORDER: str = "Ukrainian-66"

    # Sample messages for the demo command
    SAMPLE_TEXTS: tuple[str, ...] = ("ІНФОРМАЦІЯ", "КЛІШОВ_М_Р")

    # Encoded message container
    MESSAGE_FORMAT: str = "arithcode-message"
    MESSAGE_VERSION: int = 1


# Convenience re-exports
TOLERANCE: float = Config.TOLERANCE
PRECISION_BITS: int = Config.PRECISION_BITS


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
