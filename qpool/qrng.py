"""
qrng.py


Purpose/Aim:
1) Hands the password sampler its positions: uniform integers in [0, n),
   where n is the size of the pool being drawn from.
2) `PRNGSource` is the everyday source: a seedable numpy Generator. Each
   thread gets its own lazily created default.
3) `BitPool` is the quantum one. It measures an H^n register on the Aer
   simulator (or a real device backend), keeps the bits in a numpy buffer
   and turns them into pool positions by rejection.

Anything with `uniform_int(n)` and `uniform_ints(n, size)` can be passed to
`generate_password(..., source=...)`.

qiskit is only imported once a BitPool is built, so the PRNG path works
without the quantum stack loaded.

Quick start

>>> from qpool.qrng import PRNGSource, BitPool
>>> PRNGSource(seed=7).uniform_ints(10, size=5)     # repeatable
>>> BitPool(n_qubits=8, refill_shots=256).uniform_ints(94, size=16)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Protocol
import logging
import threading

import numpy as np

if TYPE_CHECKING:
    from qiskit import QuantumCircuit

logger = logging.getLogger(__name__)


class IndexSource(Protocol):
    """Anything that hands out uniform integers in [0, n)."""

    def uniform_int(self, n: int) -> int: ...

    def uniform_ints(self, n: int, size: int) -> List[int]: ...


def _check_range(n: int, size: int = 0) -> None:
    if n <= 0:
        raise ValueError("n must be positive")
    if size < 0:
        raise ValueError("size must be non-negative")


#Pseudo-random source
class PRNGSource:
    """
    Uniform integers from ``numpy.random.default_rng``.

    Parameters
    ----------
    seed : int, optional
        Same seed, same stream. ``None`` pulls fresh OS entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, n: int) -> int:
        _check_range(n)
        return int(self._rng.integers(0, n))

    def uniform_ints(self, n: int, size: int) -> List[int]:
        _check_range(n, size)
        return self._rng.integers(0, n, size=size).tolist()

    def __repr__(self) -> str:
        return f"PRNGSource(seed={self.seed!r})"


#Quantum measurements
def _hadamard_register(n_qubits: int) -> "QuantumCircuit":
    from qiskit import QuantumCircuit

    qc = QuantumCircuit(n_qubits, n_qubits)
    qc.h(range(n_qubits))
    qc.measure(range(n_qubits), range(n_qubits))
    return qc


def _aer_backend():
    from qiskit_aer import AerSimulator

    return AerSimulator()


def measure_bits(
    n_qubits: int,
    shots: int,
    backend=None,
    seed_simulator: Optional[int] = None,
) -> np.ndarray:
    """
    Measure an equal superposition of `n_qubits` qubits `shots` times.

    Returns a flat uint8 array of ``n_qubits * shots`` bits, shot by shot in
    the order the backend ran them (per-shot memory, so no reshuffling).
    """
    if n_qubits <= 0:
        raise ValueError("n_qubits must be positive")
    if shots <= 0:
        raise ValueError("shots must be positive")
    if backend is None:
        backend = _aer_backend()

    run_options = {"shots": shots, "memory": True}
    if seed_simulator is not None:
        run_options["seed_simulator"] = seed_simulator
    memory = backend.run(_hadamard_register(n_qubits), **run_options).result().get_memory()

    digits = "".join(memory).replace(" ", "")
    return np.frombuffer(digits.encode("ascii"), dtype=np.uint8) - ord("0")


#Quantum source
@dataclass
class BitPool:
    """
    Pool positions drawn from measured qubits.

    Parameters

    n_qubits : int, default=16
        Bits per shot.
    refill_shots : int, default=4096
        Shots per backend run when the buffer runs dry.
    backend : qiskit backend, optional
        Where to run. Default is a local AerSimulator.
    seed_simulator : int, optional
        Seed for repeatable simulator runs. Refill k runs with
        ``seed_simulator + k`` so refills do not repeat each other.

    Notes

    A position in [0, n) takes k = bit_length(n - 1) bits read as a
    big-endian integer; values >= n are thrown away and redrawn, so every
    pool character keeps probability 1/n.
    """

    n_qubits: int = 16
    refill_shots: int = 4096
    backend: Optional[object] = None
    seed_simulator: Optional[int] = None
    _bits: np.ndarray = field(
        default_factory=lambda: np.empty(0, dtype=np.uint8), init=False, repr=False
    )
    _refills: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n_qubits <= 0:
            raise ValueError("n_qubits must be positive")
        if self.refill_shots <= 0:
            raise ValueError("refill_shots must be positive")
        if self.backend is None:
            self.backend = _aer_backend()

    @property
    def buffered_bits(self) -> int:
        return int(self._bits.size)

    def _take(self, k: int) -> np.ndarray:
        while self._bits.size < k:
            seed = None
            if self.seed_simulator is not None:
                seed = self.seed_simulator + self._refills
            fresh = measure_bits(self.n_qubits, self.refill_shots, self.backend, seed)
            self._bits = np.concatenate([self._bits, fresh])
            self._refills += 1
            logger.debug(
                "BitPool refill #%d: %d bits buffered", self._refills, self._bits.size
            )
        out, self._bits = self._bits[:k], self._bits[k:]
        return out

    def uniform_int(self, n: int) -> int:
        _check_range(n)
        k = (n - 1).bit_length()
        if k == 0:
            return 0
        while True:
            value = int("".join(map(str, self._take(k))), 2)
            if value < n:
                return value

    def uniform_ints(self, n: int, size: int) -> List[int]:
        _check_range(n, size)
        return [self.uniform_int(n) for _ in range(size)]


#Per-thread default source
_local = threading.local()


def default_source() -> PRNGSource:
    """The calling thread's default source, created on first use."""
    src = getattr(_local, "source", None)
    if src is None:
        src = _local.source = PRNGSource()
    return src


def seed_default_source(seed: Optional[int]) -> PRNGSource:
    """Replace the calling thread's default source with a freshly seeded one."""
    _local.source = PRNGSource(seed)
    logger.debug("default source reseeded (seed=%r)", seed)
    return _local.source


__all__ = [
    "BitPool",
    "IndexSource",
    "PRNGSource",
    "default_source",
    "measure_bits",
    "seed_default_source",
]
