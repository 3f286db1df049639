"""
pool.py

Aim:
1) Defines `Pool`, an ordered set of unique characters to draw passwords from.
2) Keeps insertion order *and* constant-time membership by pairing a list of
   characters with a dict index (char -> position), updated together.
3) Ships a few ready-made character presets (digits, letters, Base94, ...).

Quick start
>>> from qpool.pool import Pool
>>> pool = Pool.parse("hello world")
>>> str(pool)
'helo wrd'
>>> pool.contains_all("owl")
True
>>> pool.get(1)
'e'

Removal comes in two flavours:
>>> pool = Pool.parse("abcdefz")
>>> pool.swap_remove("b")     # last char fills the gap
True
>>> str(pool)
'azcdef'
>>> pool = Pool.parse("abcdefz")
>>> pool.shift_remove("b")    # later chars shift left
True
>>> str(pool)
'acdefz'
"""

from __future__ import annotations

import string
from typing import Dict, Iterable, Iterator, List, Optional


#Presets
DIGITS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
SYMBOLS = string.punctuation
# Printable ASCII Base94: characters 33 ('!') through 126 ('~')
BASE94 = "".join(chr(c) for c in range(33, 127))

PRESETS: Dict[str, str] = {
    "digits": DIGITS,
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "symbols": SYMBOLS,
    "base94": BASE94,
}


def _check_char(ch: object) -> str:
    if not isinstance(ch, str):
        raise TypeError(f"pool elements must be str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"pool elements must be single characters, got {ch!r}")
    return ch


class Pool:
    """
    Collection of unique characters with a stable order.

    Parameters
    ----------
    chars : iterable of str, optional
        Initial characters. Duplicates are dropped; the first occurrence
        decides the position.

    Notes
    -----
    Positions are 0-based and contiguous. They stay put under `insert` and
    `extend`; `swap_remove`, `shift_remove`, `remove_all` and `sort` may move
    characters around.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, chars: Optional[Iterable[str]] = None) -> None:
        self._items: List[str] = []
        self._index: Dict[str, int] = {}
        if chars is not None:
            self.extend(chars)

    #Construction
    @classmethod
    def parse(cls, s: str) -> "Pool":
        """Build a pool from the distinct characters of `s`, first-seen order."""
        pool = cls()
        # A str only ever yields 1-char strings, so skip the per-char check.
        for ch in s:
            if ch not in pool._index:
                pool._index[ch] = len(pool._items)
                pool._items.append(ch)
        return pool

    from_string = parse

    @classmethod
    def from_presets(cls, *names: str) -> "Pool":
        """
        Build a pool from named presets, e.g. ``Pool.from_presets("lowercase", "digits")``.

        Raises KeyError for unknown preset names.
        """
        pool = cls()
        for name in names:
            try:
                chars = PRESETS[name]
            except KeyError:
                raise KeyError(
                    f"unknown preset {name!r}; expected one of {sorted(PRESETS)}"
                ) from None
            pool.extend_from_string(chars)
        return pool

    def copy(self) -> "Pool":
        """Independent copy with the same characters in the same order."""
        other = Pool()
        other._items = list(self._items)
        other._index = dict(self._index)
        return other

    #Queries
    def __len__(self) -> int:
        return len(self._items)

    def len(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def contains_all(self, chars: Iterable[str]) -> bool:
        """True if every character of `chars` is in the pool."""
        return all(ch in self._index for ch in chars)

    def get(self, index: int) -> Optional[str]:
        """Character at `index`, or None when `index` is outside ``0..len``."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def index_of(self, ch: str) -> Optional[int]:
        return self._index.get(ch)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def iter(self) -> Iterator[str]:
        return iter(self._items)

    #Mutation
    def insert(self, ch: str) -> bool:
        """
        Append `ch` if absent. Returns True if the pool changed.

        Inserting a character that is already present is a no-op.
        """
        _check_char(ch)
        if ch in self._index:
            return False
        self._index[ch] = len(self._items)
        self._items.append(ch)
        return True

    def extend(self, chars: Iterable[str]) -> "Pool":
        """Insert each of `chars` in order. Nothing is added if any element is invalid."""
        chars = [_check_char(ch) for ch in chars]
        for ch in chars:
            self.insert(ch)
        return self

    def extend_from_string(self, s: str) -> "Pool":
        """Add every character of `s`, skipping those already present."""
        return self.extend(s)

    def swap_remove(self, ch: str) -> bool:
        """
        Remove `ch` in O(1) by moving the last character into its slot.

        Returns True if `ch` was present.
        """
        pos = self._index.pop(ch, None)
        if pos is None:
            return False
        last = self._items.pop()
        if pos < len(self._items):
            self._items[pos] = last
            self._index[last] = pos
        return True

    def shift_remove(self, ch: str) -> bool:
        """
        Remove `ch` and shift everything after it one place left (O(n)).

        Returns True if `ch` was present.
        """
        pos = self._index.pop(ch, None)
        if pos is None:
            return False
        del self._items[pos]
        for i in range(pos, len(self._items)):
            self._index[self._items[i]] = i
        return True

    def remove_all(self, chars: Iterable[str]) -> None:
        """Swap-remove every character of `chars`; absent ones are ignored."""
        for ch in chars:
            self.swap_remove(ch)

    def sort(self) -> None:
        """Reorder by code point. Previously observed indices become stale."""
        self._items.sort()
        self._index = {ch: i for i, ch in enumerate(self._items)}

    def clear(self) -> None:
        self._items.clear()
        self._index.clear()

    #Display / comparison
    def to_string(self) -> str:
        return "".join(self._items)

    def __str__(self) -> str:
        return "".join(self._items)

    def __repr__(self) -> str:
        return f"Pool({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pool):
            return NotImplemented
        # Same characters, any order
        return len(self._items) == len(other._items) and self._index.keys() == other._index.keys()

    __hash__ = None  # mutable


__all__ = [
    "BASE94",
    "DIGITS",
    "LOWERCASE",
    "PRESETS",
    "Pool",
    "SYMBOLS",
    "UPPERCASE",
]
