"""
entropy.py

Password-strength arithmetic:

    H = length * log2(pool_size)          (bits)
    L = ceil(H / log2(pool_size))         (characters)

Everything runs on numpy float64 so degenerate inputs come out as IEEE-754
special values instead of exceptions (``math.log2(0)`` and ``1.0 / 0.0``
raise in plain Python):

>>> calculate_entropy(12, 64)
72.0
>>> calculate_entropy(12, 0)
-inf
>>> calculate_length(128, 64)
22.0
>>> calculate_length(1, 1)
inf
"""

from __future__ import annotations

import numpy as np

from .pool import Pool


def entropy_per_char(pool_size: float) -> float:
    """log2(pool_size); -inf for an empty pool, 0.0 for a single character."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log2(np.float64(pool_size)))


def calculate_entropy(length: int, pool_size: int) -> float:
    """
    Entropy in bits of a `length`-character password over `pool_size` symbols.

    A zero length is exactly 0.0 for any pool size (0 * -inf would be NaN).
    """
    if length == 0:
        return 0.0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(length) * np.log2(np.float64(pool_size)))


def calculate_length(entropy: float, pool_size: float) -> float:
    """
    Minimum password length that reaches `entropy` bits over `pool_size` symbols.

    Degenerate pools follow float division: pool_size 1 gives inf (or NaN when
    entropy is 0), pool_size 0 gives 0.0.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        length = np.ceil(np.float64(entropy) / np.log2(np.float64(pool_size)))
    # ceil(-0.0) is -0.0; report it as plain zero
    return float(length) + 0.0


def pool_entropy(pool: Pool, length: int) -> float:
    """Entropy of a `length`-character password drawn from `pool`."""
    return calculate_entropy(length, len(pool))


__all__ = [
    "calculate_entropy",
    "calculate_length",
    "entropy_per_char",
    "pool_entropy",
]
