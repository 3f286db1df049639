"""
passwords.py

Aim:
1) Draws passwords from a `Pool`: every character is an independent, uniform
   pick of a pool position (sampling with replacement).
2) Provides a PasswordGenerator that bundles a pool with an index source.
3) Exposes simple helpers to make passwords and estimate their entropy.

Note:
- Positions come from any index source (see `qrng`). By default that is the
  calling thread's seedable PRNG; pass `qrng.BitPool()` for quantum bits.
- Sampling from an empty pool raises `EmptyPoolError` before anything is
  drawn. A zero length is fine and gives "".

Quick start
>>> from qpool import Pool, generate_password, generate_n_passwords
>>> pool = Pool.parse("0123456789")
>>> generate_password(pool, 15)
# 15 digits
>>> generate_n_passwords(pool, 8, count=3)
# three 8-digit passwords

Reusable generator:
>>> from qpool.passwords import PasswordGenerator
>>> from qpool.qrng import PRNGSource
>>> gen = PasswordGenerator("abcdef0123", source=PRNGSource(seed=1))
>>> gen.passwords(length=12, count=5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union
import logging

from . import qrng
from .config import PasswordConfig
from .entropy import calculate_entropy
from .pool import BASE94, Pool

logger = logging.getLogger(__name__)


class EmptyPoolError(ValueError):
    """Raised when asked to sample from a pool with no characters."""

    def __init__(self, message: str = "Pool contains no elements!") -> None:
        super().__init__(message)


def _check_pool(pool: Pool) -> None:
    if pool.is_empty():
        raise EmptyPoolError()


#Sampling
def generate_password(
    pool: Pool,
    length: int,
    source: Optional[qrng.IndexSource] = None,
) -> str:
    """
    Generate one random password of `length` characters drawn from `pool`.

    Parameters
    ----------
    pool : Pool
        Characters to draw from. Must not be empty.
    length : int
        Number of characters. 0 gives an empty string.
    source : index source, optional
        Where the positions come from. Defaults to `qrng.default_source()`.

    Raises
    ------
    EmptyPoolError
        If `pool` is empty, whatever the length.
    ValueError
        If `length` is negative.
    """
    _check_pool(pool)
    if length < 0:
        raise ValueError("length must be non-negative")
    if length == 0:
        return ""

    src = source if source is not None else qrng.default_source()
    idxs = src.uniform_ints(len(pool), size=length)
    return "".join(pool.get(i) for i in idxs)


def generate_n_passwords(
    pool: Pool,
    length: int,
    count: int,
    source: Optional[qrng.IndexSource] = None,
) -> List[str]:
    """
    Generate `count` independent passwords, in generation order.

    Raises EmptyPoolError for an empty pool even when `count` is 0.
    """
    _check_pool(pool)
    if length < 0:
        raise ValueError("length must be non-negative")
    if count < 0:
        raise ValueError("count must be non-negative")
    src = source if source is not None else qrng.default_source()
    logger.debug(
        "generating %d password(s) of length %d from a pool of %d chars",
        count, length, len(pool),
    )
    return [generate_password(pool, length, src) for _ in range(count)]


#Password generator
@dataclass
class PasswordGenerator:
    """
    Generate passwords over a chosen pool.

    Parameters

    pool : Pool or str, default=BASE94
        Characters to sample from. A string is parsed into a Pool.
    source : index source, optional
        Source of uniform positions. When None, the calling thread's default
        source is looked up on every call.

    Examples

    >>> gen = PasswordGenerator()
    >>> gen.password(16)
    'N?iX...'
    >>> gen.entropy_bits(16)
    104.8...
    """

    pool: Union[Pool, str] = BASE94
    source: Optional[qrng.IndexSource] = None

    def __post_init__(self) -> None:
        if isinstance(self.pool, str):
            self.pool = Pool.parse(self.pool)

    @classmethod
    def from_config(cls, config: PasswordConfig) -> "PasswordGenerator":
        """Build a generator from a config's characters and seed."""
        config.validate()
        return cls(pool=Pool.parse(config.characters), source=qrng.PRNGSource(config.seed))

    #Introspection
    @property
    def pool_size(self) -> int:
        """Number of characters in the active pool."""
        return len(self.pool)

    #Estimates
    def entropy_bits(self, length: int) -> float:
        """Entropy of a password of `length` from this pool."""
        return calculate_entropy(length, self.pool_size)

    #Generation
    def password(self, length: int) -> str:
        """Create one password of given length."""
        return generate_password(self.pool, length, self.source)

    def passwords(self, length: int, count: int) -> List[str]:
        """Create `count` passwords (each of length `length`)."""
        return generate_n_passwords(self.pool, length, count, self.source)


#Convenience helpers
def make_password(
    length: int,
    characters: str = BASE94,
    source: Optional[qrng.IndexSource] = None,
) -> str:
    """
    One-shot helper to generate a password without building a Pool first.
    """
    return generate_password(Pool.parse(characters), length, source)


__all__ = [
    "EmptyPoolError",
    "PasswordGenerator",
    "generate_n_passwords",
    "generate_password",
    "make_password",
]
