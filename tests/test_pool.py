"""Tests for Pool."""

from __future__ import annotations

import pytest

from qpool.pool import BASE94, DIGITS, LOWERCASE, Pool


class TestConstruction:
    def test_new_is_empty(self):
        pool = Pool()
        assert pool.is_empty()
        assert len(pool) == 0
        assert not pool

    def test_parse_keeps_first_seen_order(self):
        pool = Pool.parse("hello world")
        assert str(pool) == "helo wrd"
        assert len(pool) == 8

    def test_parse_distinct_count(self):
        s = "mississippi"
        pool = Pool.parse(s)
        assert len(pool) == len(set(s))
        assert all(ch in pool for ch in s)

    def test_parse_empty_string(self):
        assert Pool.parse("").is_empty()

    def test_from_string_alias(self):
        assert Pool.from_string("abc") == Pool.parse("abc")

    def test_from_iterable(self):
        assert Pool(["a", "b", "c", "a"]) == Pool.parse("abc")

    def test_rejects_multichar_element(self):
        with pytest.raises(ValueError):
            Pool(["ab"])

    def test_rejects_non_str_element(self):
        with pytest.raises(TypeError):
            Pool([1, 2])

    def test_from_presets(self):
        pool = Pool.from_presets("lowercase", "digits")
        assert str(pool) == LOWERCASE + DIGITS

    def test_from_presets_unknown(self):
        with pytest.raises(KeyError):
            Pool.from_presets("emoji")

    def test_base94_preset(self):
        assert len(Pool.parse(BASE94)) == 94

    def test_roundtrip_through_string(self):
        pool = Pool.parse("q8!Zq8")
        assert Pool.parse(pool.to_string()) == pool

    def test_copy_is_independent(self):
        pool = Pool.parse("abc")
        other = pool.copy()
        other.insert("d")
        assert str(pool) == "abc"
        assert str(other) == "abcd"


class TestQueries:
    def test_len(self):
        assert Pool.parse("0123456789").len() == 10

    def test_contains(self):
        pool = Pool.parse("0123456789")
        assert pool.contains("5")
        assert not pool.contains("A")

    def test_contains_all(self):
        pool = Pool.parse("0123456789")
        assert pool.contains_all("2357")
        assert not pool.contains_all("0123F")
        assert pool.contains_all("")

    def test_get(self):
        pool = Pool.parse("ABCD")
        assert pool.get(0) == "A"
        assert pool.get(3) == "D"
        assert pool.get(4) is None
        assert pool.get(-1) is None

    def test_index_of(self):
        pool = Pool.parse("ABCD")
        assert pool.index_of("C") == 2
        assert pool.index_of("Z") is None

    def test_iter_is_restartable(self):
        pool = Pool.parse("abcdefz")
        it = pool.iter()
        assert next(it) == "a"
        assert next(it) == "b"
        assert list(it)[-1] == "z"
        assert list(pool) == list("abcdefz")
        assert list(pool) == list("abcdefz")

    def test_display(self):
        pool = Pool.parse("0123456789")
        assert str(pool) == "0123456789"
        assert pool.to_string() == "0123456789"
        assert repr(pool) == "Pool('0123456789')"

    def test_equality_ignores_order(self):
        assert Pool.parse("abc") == Pool.parse("abc")
        assert Pool.parse("abc") == Pool.parse("cba")
        assert str(Pool.parse("abc")) != str(Pool.parse("cba"))

    def test_inequality(self):
        assert Pool.parse("abc") != Pool.parse("abd")
        assert Pool.parse("abc") != Pool.parse("ab")
        assert Pool.parse("abc") != "abc"


class TestMutation:
    def test_insert(self):
        pool = Pool.parse("ABC")
        assert pool.insert("D")
        assert pool == Pool.parse("ABCD")

    def test_insert_existing_is_noop(self):
        pool = Pool.parse("ABC")
        assert not pool.insert("B")
        assert str(pool) == "ABC"
        assert len(pool) == 3

    def test_extend(self):
        pool = Pool.parse("abc")
        pool.extend(["d", "e", "a"])
        assert pool == Pool.parse("abcde")

    def test_extend_from_string_matches_insert(self):
        pool = Pool.parse("ABC")
        other = pool.copy()
        other.insert("D")
        pool.extend_from_string("D")
        assert pool == other

    def test_extend_bad_element_adds_nothing(self):
        pool = Pool.parse("a")
        with pytest.raises(ValueError):
            pool.extend(["b", "cd", "e"])
        assert str(pool) == "a"

    def test_extend_chains(self):
        pool = Pool().extend_from_string("ab").extend("bc")
        assert str(pool) == "abc"

    def test_swap_remove_moves_last_into_gap(self):
        pool = Pool.parse("abcdefz")
        assert pool.swap_remove("b")
        assert pool.get(1) == "z"
        assert pool.get(6) is None
        assert str(pool) == "azcdef"
        assert pool.index_of("z") == 1

    def test_swap_remove_last_element(self):
        pool = Pool.parse("abc")
        assert pool.swap_remove("c")
        assert str(pool) == "ab"

    def test_swap_remove_missing(self):
        pool = Pool.parse("abc")
        assert not pool.swap_remove("x")
        assert str(pool) == "abc"

    def test_shift_remove_shifts_left(self):
        pool = Pool.parse("abcdefz")
        assert pool.shift_remove("b")
        assert pool.get(1) == "c"
        assert pool.get(6) is None
        assert str(pool) == "acdefz"
        assert [pool.index_of(ch) for ch in "acdefz"] == list(range(6))

    def test_shift_remove_missing(self):
        assert not Pool.parse("abc").shift_remove("x")

    def test_remove_all(self):
        pool = Pool.parse("abcde")
        pool.remove_all("ace")
        assert pool == Pool.parse("bd")

    def test_remove_all_ignores_absent(self):
        pool = Pool.parse("abc")
        pool.remove_all("xyzb")
        assert str(pool) == "ac"

    def test_sort(self):
        pool = Pool.parse("31524")
        pool.sort()
        assert pool == Pool.parse("12345")
        assert str(pool) == "12345"
        assert pool.index_of("1") == 0

    def test_clear(self):
        pool = Pool.parse("abc")
        pool.clear()
        assert pool.is_empty()
        assert "a" not in pool

    def test_index_stays_in_sync(self):
        pool = Pool.parse("abcdefgh")
        pool.swap_remove("c")
        pool.shift_remove("a")
        pool.insert("x")
        for i, ch in enumerate(pool):
            assert pool.get(i) == ch
            assert pool.index_of(ch) == i
