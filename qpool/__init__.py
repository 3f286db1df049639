"""
Random passwords from a user-defined character pool, plus entropy arithmetic.
"""

from .config import DEFAULT_CONFIG, PasswordConfig
from .entropy import calculate_entropy, calculate_length, entropy_per_char, pool_entropy
from .passwords import (
    EmptyPoolError,
    PasswordGenerator,
    generate_n_passwords,
    generate_password,
    make_password,
)
from .pool import BASE94, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE, Pool

__all__ = [
    "BASE94",
    "DEFAULT_CONFIG",
    "DIGITS",
    "EmptyPoolError",
    "LOWERCASE",
    "PasswordConfig",
    "PasswordGenerator",
    "Pool",
    "SYMBOLS",
    "UPPERCASE",
    "calculate_entropy",
    "calculate_length",
    "entropy_per_char",
    "generate_n_passwords",
    "generate_password",
    "make_password",
    "pool_entropy",
]
