"""
Configuration for password generation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional
import logging
import math

from .entropy import calculate_length
from .pool import BASE94, Pool

logger = logging.getLogger(__name__)


@dataclass
class PasswordConfig:
    # Characters per password.
    length: int = 16

    # How many passwords to produce per request.
    count: int = 1

    # Characters to draw from; duplicates are dropped when parsed into a Pool.
    characters: str = BASE94

    # Seed for the PRNG source. None means fresh OS entropy.
    seed: Optional[int] = None

    # If set, `with_min_entropy` raises `length` until this many bits are reached.
    min_entropy_bits: Optional[float] = None

    def validate(self) -> None:
        if self.length < 0:
            raise ValueError("length must be non-negative")
        if self.count < 0:
            raise ValueError("count must be non-negative")
        if not self.characters:
            raise ValueError("characters must not be empty")

    @property
    def pool(self) -> Pool:
        return Pool.parse(self.characters)

    def with_min_entropy(self) -> "PasswordConfig":
        """
        Copy of this config whose length reaches `min_entropy_bits`.

        The length is never lowered. Pools of a single character can not
        reach any positive entropy and raise ValueError. Zero bits is always
        reached.
        """
        self.validate()
        if self.min_entropy_bits is None or self.min_entropy_bits <= 0:
            return replace(self)

        needed = calculate_length(self.min_entropy_bits, len(self.pool))
        if not math.isfinite(needed):
            raise ValueError(
                f"a pool of {len(self.pool)} character(s) can not reach "
                f"{self.min_entropy_bits} bits"
            )
        length = max(self.length, int(needed))
        if length != self.length:
            logger.debug(
                "raising length %d -> %d to reach %s bits",
                self.length, length, self.min_entropy_bits,
            )
        return replace(self, length=length)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
