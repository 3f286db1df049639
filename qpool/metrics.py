"""
metrics.py

Is the sampler fair? Every pool character should turn up about equally
often across a batch of passwords. This module counts characters per pool
and runs a Chi-square goodness-of-fit test (scipy) against that uniform
expectation.

Quick start

>>> from qpool import Pool
>>> from qpool.metrics import audit_sampler
>>> report = audit_sampler(Pool.parse("abcd"), length=50, count=20)
>>> report.df, report.expected
(3, 250.0)
>>> report.pvalue > 0.001
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from scipy.stats import chisquare

from .passwords import generate_n_passwords
from .pool import Pool
from .qrng import IndexSource


def character_histogram(passwords: Iterable[str], pool: Pool) -> Dict[str, int]:
    """
    How often each pool character appears across `passwords`, in pool order.

    Pool characters that never appear count 0; foreign characters are skipped.
    """
    hist = dict.fromkeys(pool, 0)
    for pw in passwords:
        for ch in pw:
            if ch in hist:
                hist[ch] += 1
    return hist


@dataclass
class UniformityReport:
    counts: Dict[str, int]
    expected: float  # per character
    stat: float
    df: int
    pvalue: float

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def sample_uniformity(pool: Pool, passwords: Iterable[str]) -> UniformityReport:
    """
    Chi-square test of `passwords` against uniform use of `pool`.

    Needs a pool of at least two characters and at least one counted character.
    """
    if len(pool) < 2:
        raise ValueError("Need a pool of at least two characters.")
    counts = character_histogram(passwords, pool)
    total = sum(counts.values())
    if total == 0:
        raise ValueError("No pool characters found in the passwords.")

    expected = total / len(pool)
    res = chisquare(list(counts.values()))
    return UniformityReport(
        counts=counts,
        expected=expected,
        stat=float(res.statistic),
        df=len(pool) - 1,
        pvalue=float(res.pvalue),
    )


def audit_sampler(
    pool: Pool,
    length: int,
    count: int,
    source: Optional[IndexSource] = None,
) -> UniformityReport:
    """Generate `count` passwords of `length` from `pool` and test them."""
    return sample_uniformity(pool, generate_n_passwords(pool, length, count, source))


__all__ = [
    "UniformityReport",
    "audit_sampler",
    "character_histogram",
    "sample_uniformity",
]
