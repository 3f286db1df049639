"""
viz.py: Matplotlib figures for password strength and sampler fairness

Each helper returns (fig, ax) so callers can further customize or save.

Quick start

>>> from qpool.viz import plot_password_entropy_curve, plot_character_frequency
>>> fig, ax = plot_password_entropy_curve(range(8, 33, 4), pool_size=94, target_bits=128)

>>> from qpool.metrics import audit_sampler
>>> fig, ax = plot_character_frequency(audit_sampler(pool, 32, 500))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt

from .entropy import calculate_entropy, calculate_length
from .metrics import UniformityReport


def plot_password_entropy_curve(
    lengths: Sequence[int],
    pool_size: int,
    *,
    target_bits: Optional[float] = None,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Entropy in bits against password length for one pool size.

    With `target_bits`, a dashed line marks the target and a dotted one the
    shortest length reaching it.
    """
    lengths = list(lengths)
    if any(L < 0 for L in lengths):
        raise ValueError("All lengths must be non-negative.")
    if pool_size < 2:
        raise ValueError("pool_size must be >= 2")

    fig, ax = plt.subplots()
    ax.plot(lengths, [calculate_entropy(L, pool_size) for L in lengths], marker="o")
    if target_bits is not None:
        ax.axhline(target_bits, linestyle="--")
        ax.axvline(calculate_length(target_bits, pool_size), linestyle=":")
    ax.set_xlabel("Password length")
    ax.set_ylabel("Entropy (bits)")
    ax.set_title(title or f"Pool of {pool_size} characters")
    fig.tight_layout()
    return fig, ax


def plot_character_frequency(
    report: UniformityReport,
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    One bar per pool character with the uniform expectation as a dashed line.
    The default title carries the Chi-square p-value.
    """
    chars = list(report.counts)

    fig, ax = plt.subplots()
    ax.bar(range(len(chars)), list(report.counts.values()))
    ax.set_xticks(range(len(chars)), chars)
    ax.axhline(report.expected, linestyle="--")
    ax.set_ylabel("Occurrences")
    ax.set_title(title or f"Character frequency (p = {report.pvalue:.3f})")
    fig.tight_layout()
    return fig, ax


__all__ = [
    "plot_character_frequency",
    "plot_password_entropy_curve",
]
